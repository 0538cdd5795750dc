"""
Tests for the header rule: character set, copyright data and submitters.
"""
from __future__ import annotations

import pytest

from gedcom_validator.encoding import Encoding
from gedcom_validator.model import (
    CharacterSet,
    Corporation,
    Gedcom,
    Header,
    StringWithCustomTags,
    Submitter,
)
from gedcom_validator.validation.model import Severity
from gedcom_validator.validation.rules.header import HeaderRule
from gedcom_validator.validation.validator import GedcomValidator


class TestCharacterSet:
    """Tests for the header character set checks."""

    def test_missing_character_set(self, validator):
        """Test that a missing character set is reported once and nothing beneath it."""
        validator.gedcom.header.character_set = None

        findings = validator.validate()

        assert findings.has(Severity.ERROR, "character set")
        assert len(findings) == 1
        assert findings[0].subject is validator.gedcom.header

    def test_default_character_set_is_valid(self, validator):
        validator.gedcom.header.character_set = CharacterSet()

        assert validator.validate().is_empty()

    def test_missing_character_set_name(self, validator):
        character_set = validator.gedcom.header.character_set
        character_set.character_set_name = None

        findings = validator.validate()

        assert findings.has(Severity.ERROR, "character set", "name", "not", "defined")
        assert len(findings) == 1
        assert findings[0].subject is character_set

    def test_unsupported_character_set_name(self, validator):
        name = StringWithCustomTags("FRYINGPAN")
        validator.gedcom.header.character_set.character_set_name = name

        findings = validator.validate()

        assert findings.has(Severity.ERROR, "character set", "not", "supported")
        assert len(findings.errors) == 1
        assert findings.errors[0].subject is name

    @pytest.mark.parametrize("encoding", list(Encoding))
    def test_supported_character_set_names(self, validator, encoding):
        validator.gedcom.header.character_set.character_set_name = StringWithCustomTags(encoding.character_set_name)

        assert validator.validate().is_empty()

    def test_blank_character_set_name(self, validator):
        validator.gedcom.header.character_set.character_set_name = StringWithCustomTags("  ")

        findings = validator.validate()

        assert findings.has(Severity.ERROR, "character set name", "blank")
        assert not findings.has(Severity.ERROR, "supported")

    def test_null_custom_tags_on_character_set_name(self, validator):
        """Test that a nested custom tag defect is reported even though the name itself is valid."""
        name = StringWithCustomTags(Encoding.ASCII.character_set_name)
        validator.gedcom.header.character_set.character_set_name = name
        assert validator.validate().is_empty()

        name.custom_tags = None
        findings = validator.validate()

        assert findings.has(Severity.ERROR, "custom tag", "is null")
        assert len(findings) == 1
        assert findings[0].subject is name

    def test_null_custom_tags_on_character_set(self, validator):
        validator.gedcom.header.character_set.custom_tags = None

        findings = validator.validate()

        assert findings.has(Severity.ERROR, "custom tag", "is null")
        assert len(findings) == 1

    def test_null_custom_tags_with_unsupported_name(self, validator):
        """Test that the custom tag check is independent of the name being supported."""
        name = StringWithCustomTags("FRYINGPAN", custom_tags=None)
        validator.gedcom.header.character_set.character_set_name = name

        findings = validator.validate()

        assert findings.has(Severity.ERROR, "custom tag", "is null")
        assert findings.has(Severity.ERROR, "character set", "not", "supported")
        assert len(findings) == 2


class TestCopyrightData:
    """Tests for the copyright data check."""

    def test_missing_copyright_data(self, validator):
        validator.gedcom.header.copyright_data = None

        findings = validator.validate()

        assert findings.has(Severity.ERROR, "copyright")
        assert len(findings) == 1

    def test_empty_copyright_data_is_valid(self, validator):
        validator.gedcom.header.copyright_data = []

        assert validator.validate().is_empty()

    def test_copyright_lines_are_valid(self, validator):
        validator.gedcom.header.copyright_data = ["Copyright 2025", "All rights reserved"]

        assert validator.validate().is_empty()


class TestSubmitters:
    """Tests for the header's submitter checks."""

    def test_no_submitters(self):
        """Test that a document without submitters reports a single submitter error."""
        validator = GedcomValidator(gedcom=Gedcom(), autorepair=False)

        findings = validator.validate()

        assert findings.has(Severity.ERROR, "submitter", "not specified")
        assert len(findings) == 1

    def test_adding_submitter_clears_findings(self, make_submitter):
        gedcom = Gedcom()
        validator = GedcomValidator(gedcom=gedcom, autorepair=False)
        assert validator.validate().has(Severity.ERROR, "submitter", "not specified")

        submitter = make_submitter()
        gedcom.submitters[submitter.xref] = submitter
        gedcom.header.submitter = submitter

        assert validator.validate().is_empty()

    def test_header_submitter_not_set(self, validator):
        validator.gedcom.header.submitter = None

        findings = validator.validate()

        assert findings.has(Severity.ERROR, "header submitter", "not specified")
        assert len(findings) == 1

    def test_header_submitter_not_in_document(self, validator, make_submitter):
        stray = make_submitter(xref="@SUBM0099@")
        validator.gedcom.header.submitter = stray

        findings = validator.validate()

        assert findings.has(Severity.ERROR, "@SUBM0099@", "not present")
        assert findings[0].subject is stray

    def test_header_submitter_must_be_the_same_instance(self, validator, make_submitter):
        """Test that an equal copy of a submitter does not count as a reference to it."""
        validator.gedcom.header.submitter = make_submitter()

        assert validator.validate().has(Severity.ERROR, "not present")


class TestHeaderSections:
    """Tests for the remaining header checks."""

    def test_missing_header(self, validator):
        validator.gedcom.header = None

        findings = validator.validate()

        assert findings.has(Severity.ERROR, "header", "not specified")
        assert len(findings) == 1

    def test_missing_gedcom_version(self, validator):
        validator.gedcom.header.gedcom_version = None

        findings = validator.validate()

        assert findings.has(Severity.ERROR, "gedcom version", "not specified")
        assert len(findings) == 1

    def test_blank_gedcom_form(self, validator):
        validator.gedcom.header.gedcom_version.gedcom_form = StringWithCustomTags("")

        assert validator.validate().has(Severity.ERROR, "gedcom form", "blank")

    def test_missing_source_system(self, validator):
        validator.gedcom.header.source_system = None

        findings = validator.validate()

        assert findings.has(Severity.ERROR, "source system", "not specified")
        assert len(findings) == 1

    def test_missing_source_system_id(self, validator):
        validator.gedcom.header.source_system.system_id = None

        assert validator.validate().has(Severity.ERROR, "source system id", "required")

    def test_corporation_without_name(self, validator):
        corporation = Corporation(business_name="")
        validator.gedcom.header.source_system.corporation = corporation

        findings = validator.validate()

        assert findings.has(Severity.ERROR, "corporation business name")
        assert findings[0].subject is corporation

    def test_missing_notes(self, validator):
        validator.gedcom.header.notes = None

        assert validator.validate().has(Severity.ERROR, "notes", "is null")

    def test_blank_optional_string_is_a_warning(self, validator):
        validator.gedcom.header.destination_system = StringWithCustomTags(" ")

        findings = validator.validate()

        assert findings.has(Severity.WARNING, "destination system", "blank")
        assert findings.is_empty(Severity.ERROR)

    def test_optional_strings_present(self, validator):
        header = validator.gedcom.header
        header.destination_system = StringWithCustomTags("ANSTFILE")
        header.date = StringWithCustomTags("1 JAN 2025")
        header.time = StringWithCustomTags("12:00:00")
        header.file_name = StringWithCustomTags("family.ged")
        header.language = StringWithCustomTags("English")
        header.place_hierarchy = StringWithCustomTags("City, County, State, Country")

        assert validator.validate().is_empty()

    def test_null_header_custom_tags(self, validator):
        validator.gedcom.header.custom_tags = None

        assert validator.validate().has(Severity.ERROR, "custom tag", "header", "is null")


class TestHeaderRepair:
    """Tests for the header rule with autorepair."""

    def test_repairs_missing_character_set(self, validator):
        header = validator.gedcom.header
        header.character_set = None
        validator.autorepair = True

        findings = validator.validate()

        assert findings.has(Severity.INFO, "character set", "repaired")
        assert findings.is_empty(Severity.WARNING)
        assert header.character_set.character_set_name.value == "ANSEL"

        validator.autorepair = False
        assert validator.validate().is_empty()

    def test_repairs_missing_character_set_name(self, validator):
        validator.gedcom.header.character_set.character_set_name = None
        validator.autorepair = True

        assert validator.validate().has(Severity.INFO, "character set name", "repaired")

        validator.autorepair = False
        assert validator.validate().is_empty()

    def test_does_not_repair_unsupported_name(self, validator):
        validator.gedcom.header.character_set.character_set_name = StringWithCustomTags("FRYINGPAN")
        validator.autorepair = True

        findings = validator.validate()

        assert findings.has(Severity.ERROR, "character set", "not", "supported")
        assert validator.gedcom.header.character_set.character_set_name.value == "FRYINGPAN"

    def test_repairs_custom_tags(self, validator):
        name = validator.gedcom.header.character_set.character_set_name
        name.custom_tags = None
        validator.autorepair = True

        assert validator.validate().has(Severity.INFO, "custom tag", "repaired")
        assert name.custom_tags == {}

        validator.autorepair = False
        assert validator.validate().is_empty()

    def test_repairs_copyright_data(self, validator):
        validator.gedcom.header.copyright_data = None
        validator.autorepair = True

        findings = validator.validate()

        assert findings.has(Severity.INFO, "copyright", "repaired")
        assert validator.gedcom.header.copyright_data == []

        validator.autorepair = False
        findings = validator.validate()
        assert not findings.has(Severity.ERROR, "copyright")
        assert not findings.has(Severity.INFO, "copyright")

    def test_repairs_missing_header(self, validator):
        submitter = validator.gedcom.header.submitter
        validator.gedcom.header = None
        validator.autorepair = True

        findings = validator.validate()

        assert findings.has(Severity.INFO, "document header", "repaired")
        assert findings.has(Severity.INFO, "header submitter", "repaired")
        assert validator.gedcom.header.submitter is submitter

        validator.autorepair = False
        assert validator.validate().is_empty()

    def test_repairs_header_submitter_when_unambiguous(self, validator):
        validator.gedcom.header.submitter = None
        validator.autorepair = True

        assert validator.validate().has(Severity.INFO, "header submitter", "repaired")
        assert validator.gedcom.header.submitter is validator.gedcom.submitters["@SUBM0001@"]

        validator.autorepair = False
        assert validator.validate().is_empty()

    def test_no_repair_of_header_submitter_when_ambiguous(self, validator, make_submitter):
        validator.gedcom.add_submitter(make_submitter(xref="@SUBM0002@"))
        validator.gedcom.header.submitter = None
        validator.autorepair = True

        findings = validator.validate()

        assert findings.has(Severity.ERROR, "header submitter", "not specified")
        assert validator.gedcom.header.submitter is None

    def test_repairs_versions_with_configured_defaults(self, context):
        gedcom = Gedcom(header=Header(gedcom_version=None, source_system=None), submitters={})
        rule = HeaderRule(default_gedcom_version="5.5.1", default_source_system_id="MYAPP")
        ctx = context(autorepair=True)

        rule.apply(gedcom, ctx)

        assert gedcom.header.gedcom_version.version_number.value == "5.5.1"
        assert gedcom.header.source_system.system_id.value == "MYAPP"
        assert ctx.findings.has(Severity.INFO, "gedcom version", "5.5.1")
        assert ctx.findings.has(Severity.INFO, "source system", "MYAPP")

        ctx = context()
        rule.apply(gedcom, ctx)
        assert not ctx.findings.has(Severity.ERROR, "gedcom version")
        assert not ctx.findings.has(Severity.ERROR, "source system")
        assert ctx.findings.infos == []

    def test_unsupported_repair_default_falls_back_to_error(self, context):
        gedcom = Gedcom(header=Header(character_set=None))
        rule = HeaderRule(default_character_set_name="EBCDIC")
        ctx = context(autorepair=True)

        rule.apply(gedcom, ctx)

        assert ctx.findings.has(Severity.ERROR, "character set", "not specified")
        assert gedcom.header.character_set is None

    def test_repairs_gedcom_version_and_source_system(self, validator):
        header = validator.gedcom.header
        header.gedcom_version = None
        header.source_system = None
        validator.autorepair = True

        findings = validator.validate()

        assert findings.has(Severity.INFO, "gedcom version", "repaired")
        assert findings.has(Severity.INFO, "source system", "repaired")
        assert header.gedcom_version.gedcom_form.value == "LINEAGE-LINKED"
        assert header.source_system.system_id.value == "UNSPECIFIED"

        validator.autorepair = False
        assert validator.validate().is_empty()


class TestHeaderRule:
    """Tests for HeaderRule construction."""

    def test_rule_id(self):
        assert HeaderRule().rule_id == "header"

    def test_rule_requires_id(self):
        with pytest.raises(ValueError):
            HeaderRule(rule_id="")

    def test_unsupported_default_character_set_is_logged_once(self, caplog):
        HeaderRule(default_character_set_name="EBCDIC")

        assert caplog.text.count("EBCDIC") == 1

    def test_no_warning_when_nothing_to_repair(self, validator, caplog):
        validator.autorepair = True

        assert validator.validate().is_empty()
        assert "not supported" not in caplog.text

    def test_header_independent_of_submitter_records(self, context):
        """Test that the header rule does not look inside submitter records."""
        submitter = Submitter(xref="@S1@", name=StringWithCustomTags("x", custom_tags=None))
        gedcom = Gedcom()
        gedcom.add_submitter(submitter)
        gedcom.header.submitter = submitter
        ctx = context()

        HeaderRule().apply(gedcom, ctx)

        assert ctx.findings.is_empty()
