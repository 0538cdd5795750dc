"""gedcom_validator package: Exposes the GEDCOM document model, loader and validator."""

from gedcom_validator.encoding import Encoding
from gedcom_validator.gedcom_loader import GedcomLoader, GedcomLoadError
from gedcom_validator.model import (
    CharacterSet,
    Corporation,
    Gedcom,
    GedcomVersion,
    Header,
    SourceSystem,
    StringWithCustomTags,
    Submitter,
)
from gedcom_validator.validation import Finding, Findings, GedcomValidator, Severity, ValidatorConfig

__all__ = [
    "CharacterSet",
    "Corporation",
    "Encoding",
    "Finding",
    "Findings",
    "Gedcom",
    "GedcomLoadError",
    "GedcomLoader",
    "GedcomValidator",
    "GedcomVersion",
    "Header",
    "Severity",
    "SourceSystem",
    "StringWithCustomTags",
    "Submitter",
    "ValidatorConfig",
]
