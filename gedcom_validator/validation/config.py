from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional
import yaml

from .model import Severity

DEFAULT_CONFIG_YAML = Path(__file__).parent / "config.yaml"


def _load_yaml(yaml_path: Path) -> Dict[str, Any]:
    if not yaml_path or not Path(yaml_path).exists():
        raise FileNotFoundError(f"Configuration file not found: {yaml_path}")
    try:
        with open(yaml_path, 'r', encoding='utf-8') as f:
            return yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Error parsing {yaml_path}: {e}")


@dataclass
class ValidatorConfig:
    """
    Configuration for the validation process.

    Loads all configuration values from config.yaml in the validation directory.
    """
    # Repair policy
    autorepair: bool = field(init=False)

    # Lowest severity counted by Findings.is_empty()
    min_issue_severity: str = field(init=False)

    # Rule toggles (nested dict)
    rules_enabled: Dict[str, bool] = field(init=False)

    # Values used by autorepair (nested dict)
    repair_defaults: Dict[str, str] = field(init=False)

    def __post_init__(self):
        """Load configuration from the bundled YAML file."""
        self._set_fields(_load_yaml(DEFAULT_CONFIG_YAML), defaults={})

    @classmethod
    def from_yaml(cls, yaml_path: Path) -> ValidatorConfig:
        """
        Load configuration from a specific YAML file.

        Keys missing from the file fall back to the bundled defaults.

        Args:
            yaml_path: Path to YAML config file.

        Returns:
            ValidatorConfig: Configuration instance loaded from YAML.
        """
        return cls.from_dict(_load_yaml(Path(yaml_path)))

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any], base: Optional[ValidatorConfig] = None) -> ValidatorConfig:
        """
        Create configuration from a dictionary.

        Keys missing from the dictionary fall back to base, or to the bundled
        defaults when no base is given. The rules_enabled and repair_defaults
        dicts are merged key by key rather than replaced.

        Args:
            config_dict (Dict[str, Any]): Dictionary with configuration values.
            base (Optional[ValidatorConfig]): Configuration to layer the values over.

        Returns:
            ValidatorConfig: Configuration instance.
        """
        defaults = base.to_dict() if base is not None else _load_yaml(DEFAULT_CONFIG_YAML)
        instance = object.__new__(cls)
        instance._set_fields(config_dict, defaults=defaults)
        return instance

    def to_dict(self) -> Dict[str, Any]:
        return {key: getattr(self, key) for key in self.__dataclass_fields__.keys()}

    def _set_fields(self, config_dict: Dict[str, Any], defaults: Dict[str, Any]) -> None:
        for key in self.__dataclass_fields__.keys():
            if key in config_dict:
                value = config_dict[key]
            elif key in defaults:
                value = defaults[key]
            else:
                raise ValueError(f"Required configuration field '{key}' not found")
            if key in ('rules_enabled', 'repair_defaults'):
                # dict overrides merge with the defaults rather than replace them
                value = {**(defaults.get(key) or {}), **(value or {})}
            object.__setattr__(self, key, value)
        # Fail early on a bad severity name
        Severity.from_name(self.min_issue_severity)

    @property
    def min_severity(self) -> Severity:
        return Severity.from_name(self.min_issue_severity)

    def rule_enabled(self, rule_id: str) -> bool:
        # default: enabled unless explicitly false
        return self.rules_enabled.get(rule_id, True)

    def repair_default(self, name: str, fallback: Optional[str] = None) -> Optional[str]:
        return self.repair_defaults.get(name, fallback)
