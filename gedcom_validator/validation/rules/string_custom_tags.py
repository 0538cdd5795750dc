"""
Checks shared by every record that carries custom tags or StringWithCustomTags values.

These run wherever the wrapper occurs (character set names, submitter
names, header fields, ...) so a defect nested inside an otherwise valid
value is still reported.
"""
from __future__ import annotations

from typing import Any, Optional

from gedcom_validator.model import StringWithCustomTags
from gedcom_validator.validation.context import ValidationContext


def check_custom_tags(element: Any, context: ValidationContext, description: str = "element") -> bool:
    """
    Check that an element's custom tag collection exists (it may be empty).

    Args:
        element: Any record with a custom_tags attribute.
        context: Current validation context.
        description: How the element is named in finding messages.

    Returns:
        bool: True if the collection exists after the check (possibly repaired).
    """
    if element.custom_tags is not None:
        return True
    if context.autorepair:
        element.custom_tags = {}
        context.add_info(f"custom tag collection on {description} was null - repaired", element)
        return True
    context.add_error(f"custom tag collection on {description} is null - must be at least an empty collection", element)
    return False


def check_string_with_custom_tags(value: Optional[StringWithCustomTags], context: ValidationContext, description: str) -> None:
    """Check a StringWithCustomTags value if present; an absent value is not a defect here."""
    if value is None:
        return
    check_custom_tags(value, context, description)


def check_required_string(value: Optional[StringWithCustomTags], context: ValidationContext, description: str, subject: Any) -> bool:
    """
    Check a mandatory StringWithCustomTags field.

    Args:
        value: The field value.
        context: Current validation context.
        description: Field name used in messages, e.g. 'source system id'.
        subject: Record owning the field, reported when the field is missing.

    Returns:
        bool: True if the value has non-blank text.
    """
    if value is None:
        context.add_error(f"{description} is required but not specified", subject)
        return False
    valid = True
    if value.value is None:
        context.add_error(f"{description} is required but has no value", value)
        valid = False
    elif not value.value.strip():
        context.add_error(f"{description} is required but blank", value)
        valid = False
    check_custom_tags(value, context, description)
    return valid


def check_optional_string(value: Optional[StringWithCustomTags], context: ValidationContext, description: str) -> None:
    """Check an optional StringWithCustomTags field: absent is fine, present-but-blank is suspicious."""
    if value is None:
        return
    if value.value is None or not value.value.strip():
        context.add_warning(f"{description} is present but blank", value)
    check_custom_tags(value, context, description)
