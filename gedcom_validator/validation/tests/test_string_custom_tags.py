"""
Tests for the shared string and custom tag checks.
"""
from __future__ import annotations

from gedcom_validator.model import Header, SourceSystem, StringWithCustomTags
from gedcom_validator.validation.model import Severity
from gedcom_validator.validation.rules.common import check_required_list
from gedcom_validator.validation.rules.string_custom_tags import (
    check_custom_tags,
    check_optional_string,
    check_required_string,
    check_string_with_custom_tags,
)


class TestCheckCustomTags:
    """Tests for check_custom_tags."""

    def test_empty_collection_is_valid(self, context):
        ctx = context()
        assert check_custom_tags(StringWithCustomTags("x"), ctx, "value")
        assert ctx.findings.is_empty()

    def test_populated_collection_is_valid(self, context):
        ctx = context()
        assert check_custom_tags(StringWithCustomTags("x", {"_UID": "123"}), ctx, "value")
        assert ctx.findings.is_empty()

    def test_null_collection(self, context):
        value = StringWithCustomTags("x", custom_tags=None)
        ctx = context()

        assert not check_custom_tags(value, ctx, "value")
        assert ctx.findings.has(Severity.ERROR, "custom tag", "is null")
        assert ctx.findings[0].subject is value
        assert value.custom_tags is None

    def test_null_collection_repaired(self, context):
        value = StringWithCustomTags("x", custom_tags=None)
        ctx = context(autorepair=True)

        assert check_custom_tags(value, ctx, "value")
        assert ctx.findings.has(Severity.INFO, "custom tag", "repaired")
        assert value.custom_tags == {}


class TestStringChecks:
    """Tests for the StringWithCustomTags field checks."""

    def test_absent_string_with_custom_tags(self, context):
        ctx = context()
        check_string_with_custom_tags(None, ctx, "name")
        assert ctx.findings.is_empty()

    def test_required_string_missing(self, context):
        owner = SourceSystem()
        ctx = context()

        assert not check_required_string(None, ctx, "source system id", owner)
        assert ctx.findings.has(Severity.ERROR, "source system id", "not specified")
        assert ctx.findings[0].subject is owner

    def test_required_string_without_value(self, context):
        ctx = context()
        assert not check_required_string(StringWithCustomTags(None), ctx, "id", None)
        assert ctx.findings.has(Severity.ERROR, "id", "has no value")

    def test_required_string_short_circuits_on_missing_value(self, context):
        """Test that a missing wrapper is reported once, without a custom tag finding."""
        ctx = context()
        check_required_string(None, ctx, "id", None)
        assert len(ctx.findings) == 1

    def test_required_string_checks_custom_tags(self, context):
        ctx = context()
        assert check_required_string(StringWithCustomTags("x", custom_tags=None), ctx, "id", None)
        assert ctx.findings.has(Severity.ERROR, "custom tag", "id", "is null")

    def test_optional_string(self, context):
        ctx = context()
        check_optional_string(None, ctx, "file name")
        check_optional_string(StringWithCustomTags("family.ged"), ctx, "file name")
        assert ctx.findings.is_empty()

        check_optional_string(StringWithCustomTags(""), ctx, "file name")
        assert ctx.findings.has(Severity.WARNING, "file name", "blank")


class TestCheckRequiredList:
    """Tests for check_required_list."""

    def test_list_present(self, context):
        owner = Header(notes=[])
        ctx = context()

        assert check_required_list(owner, 'notes', ctx, "notes")
        assert ctx.findings.is_empty()

    def test_list_missing_and_repaired(self, context):
        owner = Header(notes=None)
        ctx = context(autorepair=True)

        assert check_required_list(owner, 'notes', ctx, "notes")
        assert owner.notes == []
        assert ctx.findings.has(Severity.INFO, "notes", "repaired")
