from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Sequence, Union

from gedcom_validator.app_hooks import AppHooks
from gedcom_validator.model import Gedcom

from .config import ValidatorConfig
from .context import ValidationContext
from .defaults import get_default_rules
from .model import Findings, Severity
from .rules.base import ValidationRule

logger = logging.getLogger(__name__)


class GedcomValidator:
    """
    Runs the validation rules over a document and collects the findings.

    The document is borrowed, never copied: with autorepair on, rules fix
    defects directly in the caller's graph. Every call to validate() is a
    full pass that starts from an empty findings collection, so the outcome
    depends only on the document and the autorepair flag at call time.

    Attributes:
        gedcom (Optional[Gedcom]): Document to validate.
        autorepair (bool): Whether rules may repair defects in place.
        findings (Findings): Findings of the most recent run.
        rule_runs (Dict[str, int]): rule_id -> times run in the most recent run.
    """

    def __init__(
        self,
        gedcom: Optional[Gedcom] = None,
        autorepair: Optional[bool] = None,
        config: Optional[ValidatorConfig] = None,
        config_yaml: Optional[Path] = None,
        config_dict: Optional[Dict[str, Any]] = None,
        rules: Optional[Sequence[ValidationRule]] = None,
        min_severity: Optional[Union[str, Severity]] = None,
        app_hooks: Optional[AppHooks] = None,
    ) -> None:
        """
        Initialize the validator.

        Args:
            gedcom: Document to validate (may also be assigned later).
            autorepair: Repair defects in place; defaults to the config value.
            config: Configuration; when None it is loaded from config_yaml
                (or the bundled config.yaml).
            config_yaml: Path to a YAML config file; ignored when config is given.
            config_dict: Dictionary to override values of config (or of the
                YAML-loaded config), applied on top of it in either case.
            rules: Rules to run, in order; defaults to the registered rules.
            min_severity: Lowest severity counted by findings.is_empty();
                defaults to the config value.
            app_hooks: Optional application hooks for progress reporting.
        """
        if config is None:
            config = ValidatorConfig.from_yaml(config_yaml) if config_yaml else ValidatorConfig()
        elif config_yaml:
            logger.warning(f"Both config and config_yaml given, ignoring {config_yaml}")
        if config_dict:
            config = ValidatorConfig.from_dict(config_dict, base=config)
        self.config = config
        self.gedcom = gedcom
        self.autorepair = config.autorepair if autorepair is None else autorepair
        self.findings = Findings(min_severity=config.min_severity if min_severity is None else min_severity)
        self.rules = list(rules) if rules is not None else get_default_rules(config)
        self.rule_runs: Dict[str, int] = {}
        self.app_hooks = app_hooks

        # Set app_hooks on all rules that support it
        for rule in self.rules:
            if hasattr(rule, 'app_hooks'):
                rule.app_hooks = app_hooks

    def validate(self) -> Findings:
        """
        Validate the document, repairing defects if autorepair is set.

        Returns:
            Findings: The findings of this run (also available as self.findings).

        Raises:
            ValueError: If there is no document to validate.
        """
        if self.gedcom is None:
            raise ValueError("No document to validate: gedcom is None")

        self.findings.clear()
        self.rule_runs = {}
        context = ValidationContext(autorepair=self.autorepair, findings=self.findings)

        enabled_rules = [rule for rule in self.rules if self.config.rule_enabled(rule.rule_id)]
        self._report_step(info="Validating document", target=len(enabled_rules), reset_counter=True, plus_step=0)

        for rule_num, rule in enumerate(enabled_rules, start=1):
            self._report_step(info=f"Validation ({rule_num}/{len(enabled_rules)}): applying {rule.rule_id}")
            rule.apply(self.gedcom, context)
            self.rule_runs[rule.rule_id] = self.rule_runs.get(rule.rule_id, 0) + 1
            self._report_step(plus_step=1)

        counts = self.findings.counts()
        logger.info(
            f"Validation finished (autorepair={self.autorepair}): "
            f"{counts['error']} errors, {counts['warning']} warnings, {counts['info']} info"
        )
        return self.findings

    def _report_step(self, info: str = "", target: Optional[int] = None, reset_counter: bool = False, plus_step: int = 0) -> None:
        """
        Report a step via app hooks if available. (Private method)

        Args:
            info (str): Information message.
            target (int): Target count for progress.
            reset_counter (bool): Whether to reset the counter.
            plus_step (int): Incremental step count.
        """
        if self.app_hooks and callable(getattr(self.app_hooks, "report_step", None)):
            self.app_hooks.report_step(info=info, target=target, reset_counter=reset_counter, plus_step=plus_step)
        elif info:
            logger.debug(info)
