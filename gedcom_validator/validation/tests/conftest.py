"""
Pytest fixtures for validation tests.
"""
from __future__ import annotations

import pytest

from gedcom_validator.model import Gedcom, StringWithCustomTags, Submitter
from gedcom_validator.validation.context import ValidationContext
from gedcom_validator.validation.model import Findings
from gedcom_validator.validation.validator import GedcomValidator


@pytest.fixture
def make_submitter():
    """Factory for submitters with a valid xref and name."""
    def _create_submitter(xref: str = "@SUBM0001@", name: str = "test") -> Submitter:
        return Submitter(xref=xref, name=StringWithCustomTags(name))

    return _create_submitter


@pytest.fixture
def valid_gedcom(make_submitter) -> Gedcom:
    """A document with one submitter referenced from the header; validates clean."""
    gedcom = Gedcom()
    submitter = gedcom.add_submitter(make_submitter())
    gedcom.header.submitter = submitter
    return gedcom


@pytest.fixture
def validator(valid_gedcom) -> GedcomValidator:
    """Validator over valid_gedcom with autorepair off."""
    return GedcomValidator(gedcom=valid_gedcom, autorepair=False)


@pytest.fixture
def context():
    """Factory for a fresh validation context."""
    def _create_context(autorepair: bool = False) -> ValidationContext:
        return ValidationContext(autorepair=autorepair, findings=Findings())

    return _create_context
