"""
Default validation rules configuration.
"""
from __future__ import annotations

import logging
from typing import List

from .config import ValidatorConfig
from .rules import BaseRule, get_rule_registry

logger = logging.getLogger(__name__)


# Rule parameter mapping: maps config values to rule constructor parameters
RULE_PARAM_MAP = {
    'header': {
        'default_character_set_name': lambda cfg: cfg.repair_default('character_set_name', 'ANSEL'),
        'default_gedcom_version': lambda cfg: str(cfg.repair_default('gedcom_version', '5.5')),
        'default_gedcom_form': lambda cfg: cfg.repair_default('gedcom_form', 'LINEAGE-LINKED'),
        'default_source_system_id': lambda cfg: cfg.repair_default('source_system_id', 'UNSPECIFIED'),
    },
    'submitters': {},
}


def get_default_rules(config: ValidatorConfig) -> List[BaseRule]:
    """
    Create default validation rules based on config using the rule registry.

    Rules come back in registration order (header before submitters).

    Args:
        config: ValidatorConfig instance with rule parameters.

    Returns:
        List[BaseRule]: List of configured rules from the registry.
    """
    registry = get_rule_registry()
    for rule_id in config.rules_enabled:
        if rule_id not in registry:
            logger.warning(f"Unknown validation rule '{rule_id}' in configuration, ignored")

    rules = []
    for rule_id, rule_class in registry.items():
        if not config.rule_enabled(rule_id):
            continue

        param_map = RULE_PARAM_MAP.get(rule_id, {})
        kwargs = {param_name: value_of(config) for param_name, value_of in param_map.items()}
        rules.append(rule_class(**kwargs))

    return rules
