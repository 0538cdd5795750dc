from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Optional

from gedcom_validator.app_hooks import AppHooks
from gedcom_validator.encoding import Encoding
from gedcom_validator.model import Gedcom, GedcomVersion, Header, SourceSystem, StringWithCustomTags
from gedcom_validator.validation.context import ValidationContext
from .base import BaseRule, register_rule
from .character_set import check_character_set
from .common import check_required_list
from .string_custom_tags import check_custom_tags, check_optional_string, check_required_string

logger = logging.getLogger(__name__)


@register_rule
@dataclass
class HeaderRule(BaseRule):
    """
    Check the document header (HEAD record).

    Covers the character set, copyright data, GEDCOM version, source system,
    notes, the optional header strings and the header's submitter reference.
    A missing header is reported once and nothing beneath it is checked.

    The default_* values are what autorepair writes into missing fields.
    """
    rule_id: str = "header"
    default_character_set_name: str = "ANSEL"
    default_gedcom_version: str = "5.5"
    default_gedcom_form: str = "LINEAGE-LINKED"
    default_source_system_id: str = "UNSPECIFIED"
    app_hooks: Optional[AppHooks] = None

    def __post_init__(self):
        super().__post_init__()
        if not Encoding.is_valid_character_set_name(self.default_character_set_name):
            logger.warning(
                f"Default character set name '{self.default_character_set_name}' is not supported, "
                f"a missing character set will not be repaired"
            )

    def apply(self, gedcom: Gedcom, context: ValidationContext) -> None:
        header = gedcom.header
        if header is None:
            if not context.autorepair:
                context.add_error("document header is not specified", gedcom)
                return
            header = gedcom.header = Header()
            context.add_info("document header was not specified - repaired", gedcom)

        check_character_set(header, context, default_name=self.default_character_set_name)
        check_required_list(header, 'copyright_data', context, "copyright data")
        self._check_gedcom_version(header, context)
        self._check_source_system(header, context)
        check_required_list(header, 'notes', context, "notes in header")

        check_optional_string(header.destination_system, context, "destination system")
        check_optional_string(header.date, context, "header date")
        check_optional_string(header.time, context, "header time")
        check_optional_string(header.file_name, context, "file name")
        check_optional_string(header.language, context, "header language")
        check_optional_string(header.place_hierarchy, context, "place hierarchy")
        check_custom_tags(header, context, "header")

        self._check_submitter_reference(gedcom, header, context)

    def _check_gedcom_version(self, header: Header, context: ValidationContext) -> None:
        if header.gedcom_version is None:
            if not context.autorepair:
                context.add_error("gedcom version in header is not specified", header)
                return
            header.gedcom_version = GedcomVersion(
                version_number=StringWithCustomTags(self.default_gedcom_version),
                gedcom_form=StringWithCustomTags(self.default_gedcom_form),
            )
            context.add_info(
                f"gedcom version in header was not specified - repaired with {self.default_gedcom_version} {self.default_gedcom_form}",
                header,
            )
        version = header.gedcom_version
        check_custom_tags(version, context, "gedcom version")
        check_required_string(version.version_number, context, "gedcom version number", version)
        check_required_string(version.gedcom_form, context, "gedcom form", version)

    def _check_source_system(self, header: Header, context: ValidationContext) -> None:
        if header.source_system is None:
            if not context.autorepair:
                context.add_error("source system in header is not specified", header)
                return
            header.source_system = SourceSystem(system_id=StringWithCustomTags(self.default_source_system_id))
            context.add_info(f"source system in header was not specified - repaired with {self.default_source_system_id}", header)
        source_system = header.source_system
        check_custom_tags(source_system, context, "source system")
        check_required_string(source_system.system_id, context, "source system id", source_system)
        check_optional_string(source_system.version_number, context, "source system version number")
        check_optional_string(source_system.product_name, context, "source system product name")

        corporation = source_system.corporation
        if corporation is not None:
            if corporation.business_name is None or not corporation.business_name.strip():
                context.add_error("corporation business name is required but not specified", corporation)
            check_custom_tags(corporation, context, "corporation")

    def _check_submitter_reference(self, gedcom: Gedcom, header: Header, context: ValidationContext) -> None:
        submitters = gedcom.submitters
        if not submitters:
            context.add_error("submitter not specified - the document has no submitter records", gedcom)
            return

        if header.submitter is None:
            if not (context.autorepair and len(submitters) == 1):
                context.add_error("header submitter not specified", header)
                return
            header.submitter = next(iter(submitters.values()))
            context.add_info(f"header submitter was not specified - repaired with {header.submitter.xref}", header)

        if not any(submitter is header.submitter for submitter in submitters.values()):
            context.add_error(
                f"header submitter {header.submitter.xref} is not present in the document's submitter records",
                header.submitter,
            )
