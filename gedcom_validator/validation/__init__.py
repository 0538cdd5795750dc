"""Validation module: certifies a GEDCOM document graph against a fixed rule set.

Walks the document with hand-written rules, one per record type, that:
    - Report defects as findings (error, warning or info)
    - Optionally repair defects in place (autorepair), recording an info finding
    - Report a missing parent record once and skip the checks beneath it

Core classes:
    - GedcomValidator: Runs the rules over a document and collects findings
    - ValidatorConfig: Configuration (autorepair, severity threshold, rule toggles, repair defaults)
    - ValidationContext: Repair policy and findings collector shared by the rules of one run

Data models:
    - Severity: ERROR, WARNING, INFO (ordered by importance)
    - Finding: Severity, message and the offending object
    - Findings: Ordered findings of one run, with has() and is_empty() queries

Built-in rules:
    - HeaderRule: Header, character set, copyright data and submitter reference
    - SubmittersRule: Every submitter record

Example:
    >>> from gedcom_validator.validation import GedcomValidator, Severity
    >>> validator = GedcomValidator(gedcom=document, autorepair=False)
    >>> findings = validator.validate()
    >>> if findings.has(Severity.ERROR, "character set"):
    ...     print(findings)
"""

from .model import Severity
from .model import Finding
from .model import Findings
from .context import ValidationContext
from .config import ValidatorConfig
from .rules import BaseRule
from .rules import ValidationRule
from .rules import HeaderRule
from .rules import SubmittersRule
from .defaults import get_default_rules
from .validator import GedcomValidator

__all__ = [
    'Severity',
    'Finding',
    'Findings',
    'ValidationContext',
    'ValidatorConfig',
    'BaseRule',
    'ValidationRule',
    'HeaderRule',
    'SubmittersRule',
    'get_default_rules',
    'GedcomValidator',
]
