from __future__ import annotations

from typing import Any

from gedcom_validator.validation.context import ValidationContext


def check_required_list(owner: Any, attribute: str, context: ValidationContext, description: str) -> bool:
    """
    Check that a collection attribute is present. An empty collection is valid.

    Returns:
        bool: True if the collection exists after the check (possibly repaired).
    """
    if getattr(owner, attribute) is not None:
        return True
    if context.autorepair:
        setattr(owner, attribute, [])
        context.add_info(f"{description} collection was null - repaired", owner)
        return True
    context.add_error(f"{description} collection is null - must be at least an empty collection", owner)
    return False


def check_xref(subject: Any, context: ValidationContext, description: str) -> bool:
    """Check the GEDCOM cross-reference id of a record, e.g. '@SUBM0001@'."""
    xref = subject.xref
    if xref is None or not xref.strip():
        context.add_error(f"xref on {description} is required but not specified", subject)
        return False
    if len(xref) < 3:
        context.add_error(f"xref '{xref}' on {description} is too short", subject)
        return False
    if not xref.startswith('@'):
        context.add_error(f"xref '{xref}' on {description} must start with @", subject)
        return False
    if not xref.endswith('@'):
        context.add_error(f"xref '{xref}' on {description} must end with @", subject)
        return False
    return True
