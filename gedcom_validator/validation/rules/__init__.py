"""Validation rules: hand-written checks for each section of a GEDCOM document.

Built-in rules (run in this order):
    - HeaderRule: Header, character set, copyright data and submitter reference
    - SubmittersRule: Every submitter record

Shared checks:
    - check_character_set: Character set declared in the header
    - check_submitter: A single submitter record
    - check_custom_tags / check_string_with_custom_tags: Custom tag collections
    - check_required_string / check_optional_string: StringWithCustomTags fields

Extensibility:
    Create custom rules by:
        1. Subclass BaseRule
        2. Implement apply(gedcom, context)
        3. Use @register_rule decorator for automatic registration

Example:
    >>> from gedcom_validator.validation.rules import BaseRule, register_rule
    >>> @register_rule
    ... @dataclass
    ... class MyCustomRule(BaseRule):
    ...     rule_id: str = "my_rule"
    ...     def apply(self, gedcom, context):
    ...         if not gedcom.header.notes:
    ...             context.add_warning("header has no notes", gedcom.header)
"""

from .base import ValidationRule
from .base import BaseRule
from .base import register_rule
from .base import get_rule_registry
from .string_custom_tags import check_custom_tags
from .string_custom_tags import check_string_with_custom_tags
from .string_custom_tags import check_required_string
from .string_custom_tags import check_optional_string
from .character_set import check_character_set
from .header import HeaderRule
from .submitter import SubmittersRule
from .submitter import check_submitter

__all__ = [
    'ValidationRule',
    'BaseRule',
    'register_rule',
    'get_rule_registry',
    'check_custom_tags',
    'check_string_with_custom_tags',
    'check_required_string',
    'check_optional_string',
    'check_character_set',
    'HeaderRule',
    'SubmittersRule',
    'check_submitter',
]
