"""
Base classes and registry for validation rules.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
import logging
from typing import Dict, Optional, Protocol, Type

from gedcom_validator.app_hooks import AppHooks
from gedcom_validator.model import Gedcom
from gedcom_validator.validation.context import ValidationContext

logger = logging.getLogger(__name__)

# Rule Registry
_RULE_REGISTRY: Dict[str, Type['BaseRule']] = {}


def register_rule(cls: Type['BaseRule']) -> Type['BaseRule']:
    """
    Decorator to register a rule class in the global registry.

    Rules run in registration order, which is the import order in
    gedcom_validator.validation.rules.

    Usage:
        @register_rule
        @dataclass
        class MyRule(BaseRule):
            rule_id: str = "my_rule"
            ...
    """
    rule_id = getattr(cls, 'rule_id', None)
    if rule_id:
        _RULE_REGISTRY[rule_id] = cls
        logger.debug(f"Registered validation rule: {rule_id}")
    else:
        logger.warning(f"Rule {cls.__name__} missing 'rule_id' attribute, not registered")
    return cls


def get_rule_registry() -> Dict[str, Type['BaseRule']]:
    """Get the global rule registry."""
    return _RULE_REGISTRY.copy()


class ValidationRule(Protocol):
    rule_id: str

    def apply(self, gedcom: Gedcom, context: ValidationContext) -> None:
        ...


@dataclass
class BaseRule(ABC):
    """
    Base class for document-level validation rules.

    A rule inspects one section of the document, reports into the context's
    findings and, when context.autorepair is set, may fix what it finds.
    Rules never decide pass or fail for the run.

    Attributes:
        rule_id: Unique identifier for this rule
        app_hooks: Optional application hooks for progress reporting
    """
    rule_id: str = ""
    app_hooks: Optional[AppHooks] = None

    @abstractmethod
    def apply(self, gedcom: Gedcom, context: ValidationContext) -> None:
        """
        Validate (and possibly repair) a section of the document.

        Args:
            gedcom: Document being validated
            context: Repair policy and findings collector for this run
        """
        pass

    def __post_init__(self):
        if not self.rule_id:
            raise ValueError(f"{self.__class__.__name__} must define rule_id")

    def _report_step(self, info: str = "", target: Optional[int] = None, reset_counter: bool = False, plus_step: int = 0) -> None:
        """Report a step via app hooks if available.

        Args:
            info (str): Information message.
            target (int): Target count for progress.
            reset_counter (bool): Whether to reset the counter.
            plus_step (int): Incremental step count.
        """
        if self.app_hooks and callable(getattr(self.app_hooks, "report_step", None)):
            self.app_hooks.report_step(info=info, target=target, reset_counter=reset_counter, plus_step=plus_step)
        else:
            logger.debug(info)

