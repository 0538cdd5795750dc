from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from gedcom_validator.app_hooks import AppHooks
from gedcom_validator.model import Gedcom, Submitter
from gedcom_validator.validation.context import ValidationContext
from .base import BaseRule, register_rule
from .common import check_required_list, check_xref
from .string_custom_tags import check_custom_tags, check_optional_string, check_required_string, check_string_with_custom_tags

MAX_LANGUAGE_PREFERENCES = 3


def check_submitter(submitter: Submitter, context: ValidationContext) -> None:
    """
    Check a single submitter record.

    The xref key is not checked for uniqueness; the document's submitter
    mapping already guarantees it.

    Args:
        submitter: Submitter to check.
        context: Current validation context.
    """
    description = f"submitter {submitter.xref}" if submitter.xref else "submitter"
    check_xref(submitter, context, description)
    check_string_with_custom_tags(submitter.name, context, f"{description} name")

    if check_required_list(submitter, 'language_pref', context, f"{description} language preferences"):
        if len(submitter.language_pref) > MAX_LANGUAGE_PREFERENCES:
            context.add_error(
                f"{description} exceeds limit of {MAX_LANGUAGE_PREFERENCES} language preferences "
                f"({len(submitter.language_pref)} given)",
                submitter,
            )
        for language in submitter.language_pref:
            check_required_string(language, context, f"{description} language preference", submitter)

    check_optional_string(submitter.registration_file_number, context, f"{description} registration file number")
    check_optional_string(submitter.rec_id_number, context, f"{description} record id number")
    check_custom_tags(submitter, context, description)


@register_rule
@dataclass
class SubmittersRule(BaseRule):
    """Check every submitter record held by the document."""
    rule_id: str = "submitters"
    app_hooks: Optional[AppHooks] = None

    def apply(self, gedcom: Gedcom, context: ValidationContext) -> None:
        if gedcom.submitters is None:
            if not context.autorepair:
                context.add_error("submitters collection is null - must be at least an empty collection", gedcom)
                return
            gedcom.submitters = {}
            context.add_info("submitters collection was null - repaired", gedcom)

        submitters = list(gedcom.submitters.values())
        for idx, submitter in enumerate(submitters):
            if idx % 100 == 0:
                self._report_step(
                    info=f"Validating submitter {submitter.xref} ({idx + 1}/{len(submitters)})",
                    target=len(submitters),
                    reset_counter=(idx == 0),
                    plus_step=100,
                )
            check_submitter(submitter, context)
