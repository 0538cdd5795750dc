"""
model.py - In-memory GEDCOM document graph checked by the validator.

This module provides the record types the validation rules inspect:
    - Gedcom: root document holding the header and the submitter records
    - Header: HEAD record (character set, source system, copyright, ...)
    - Submitter: SUBM record
    - StringWithCustomTags: text value carrying non-standard '_' tags

Optional fields default to None. Collections that must exist but may be
empty default to an empty container; setting one to None is a defect the
validator reports (or repairs).

Module: gedcom_validator.model
Author: @colin0brass
Last updated: 2026-10-19
"""

__all__ = [
    'StringWithCustomTags',
    'CharacterSet',
    'GedcomVersion',
    'Corporation',
    'SourceSystem',
    'Submitter',
    'Header',
    'Gedcom',
]

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .encoding import Encoding

CustomTags = Dict[str, Any]  # e.g. {'_UID': '...'}


@dataclass
class StringWithCustomTags:
    """
    A text value paired with its custom tag extensions.

    Attributes:
        value (Optional[str]): The text value.
        custom_tags (Optional[CustomTags]): Custom tags by tag name; None means unset.
    """
    value: Optional[str] = None
    custom_tags: Optional[CustomTags] = field(default_factory=dict)

    def __str__(self) -> str:
        return self.value if self.value is not None else ""


@dataclass
class CharacterSet:
    """
    HEAD.CHAR: character set the file is written in.

    Attributes:
        character_set_name (Optional[StringWithCustomTags]): Name, e.g. 'ANSEL'.
        version_number (Optional[StringWithCustomTags]): Optional character set version.
        custom_tags (Optional[CustomTags]): Custom tags on the CHAR record.
    """
    character_set_name: Optional[StringWithCustomTags] = field(
        default_factory=lambda: StringWithCustomTags(Encoding.ANSEL.character_set_name)
    )
    version_number: Optional[StringWithCustomTags] = None
    custom_tags: Optional[CustomTags] = field(default_factory=dict)


@dataclass
class GedcomVersion:
    """HEAD.GEDC: GEDCOM version and form."""
    version_number: Optional[StringWithCustomTags] = field(default_factory=lambda: StringWithCustomTags("5.5"))
    gedcom_form: Optional[StringWithCustomTags] = field(default_factory=lambda: StringWithCustomTags("LINEAGE-LINKED"))
    custom_tags: Optional[CustomTags] = field(default_factory=dict)


@dataclass
class Corporation:
    """HEAD.SOUR.CORP: business that produced the source system."""
    business_name: Optional[str] = "UNSPECIFIED"
    custom_tags: Optional[CustomTags] = field(default_factory=dict)


@dataclass
class SourceSystem:
    """
    HEAD.SOUR: the system that produced the file.

    Attributes:
        system_id (Optional[StringWithCustomTags]): Approved system identifier.
        version_number (Optional[StringWithCustomTags]): Product version.
        product_name (Optional[StringWithCustomTags]): Product name.
        corporation (Optional[Corporation]): Producing business.
        custom_tags (Optional[CustomTags]): Custom tags on the SOUR record.
    """
    system_id: Optional[StringWithCustomTags] = field(default_factory=lambda: StringWithCustomTags("UNSPECIFIED"))
    version_number: Optional[StringWithCustomTags] = None
    product_name: Optional[StringWithCustomTags] = None
    corporation: Optional[Corporation] = None
    custom_tags: Optional[CustomTags] = field(default_factory=dict)


@dataclass
class Submitter:
    """
    SUBM record: the person or organisation that submitted the data.

    Attributes:
        xref (Optional[str]): Cross-reference id, e.g. '@SUBM0001@'.
        name (Optional[StringWithCustomTags]): Submitter name.
        language_pref (Optional[List[StringWithCustomTags]]): Preferred languages (at most 3).
        registration_file_number (Optional[StringWithCustomTags]): RFN.
        rec_id_number (Optional[StringWithCustomTags]): RIN.
        custom_tags (Optional[CustomTags]): Custom tags on the SUBM record.
    """
    xref: Optional[str] = None
    name: Optional[StringWithCustomTags] = None
    language_pref: Optional[List[StringWithCustomTags]] = field(default_factory=list)
    registration_file_number: Optional[StringWithCustomTags] = None
    rec_id_number: Optional[StringWithCustomTags] = None
    custom_tags: Optional[CustomTags] = field(default_factory=dict)

    def __repr__(self) -> str:
        return f"Submitter(xref={self.xref!r}, name={str(self.name) if self.name else None!r})"


@dataclass
class Header:
    """
    HEAD record.

    Attributes:
        character_set (Optional[CharacterSet]): Declared character set.
        copyright_data (Optional[List[str]]): Copyright lines; may be empty, must not be None.
        submitter (Optional[Submitter]): Reference to a submitter held in Gedcom.submitters.
        source_system (Optional[SourceSystem]): Producing system.
        gedcom_version (Optional[GedcomVersion]): GEDCOM version and form.
        destination_system (Optional[StringWithCustomTags]): Receiving system.
        date (Optional[StringWithCustomTags]): Transmission date, kept as text.
        time (Optional[StringWithCustomTags]): Transmission time.
        file_name (Optional[StringWithCustomTags]): File name.
        language (Optional[StringWithCustomTags]): Language of the file.
        place_hierarchy (Optional[StringWithCustomTags]): Default PLAC.FORM.
        notes (Optional[List[str]]): Header notes; may be empty, must not be None.
        custom_tags (Optional[CustomTags]): Custom tags on the HEAD record.
    """
    character_set: Optional[CharacterSet] = field(default_factory=CharacterSet)
    copyright_data: Optional[List[str]] = field(default_factory=list)
    submitter: Optional[Submitter] = None
    source_system: Optional[SourceSystem] = field(default_factory=SourceSystem)
    gedcom_version: Optional[GedcomVersion] = field(default_factory=GedcomVersion)
    destination_system: Optional[StringWithCustomTags] = None
    date: Optional[StringWithCustomTags] = None
    time: Optional[StringWithCustomTags] = None
    file_name: Optional[StringWithCustomTags] = None
    language: Optional[StringWithCustomTags] = None
    place_hierarchy: Optional[StringWithCustomTags] = None
    notes: Optional[List[str]] = field(default_factory=list)
    custom_tags: Optional[CustomTags] = field(default_factory=dict)


@dataclass
class Gedcom:
    """
    Root of the document graph.

    Attributes:
        header (Optional[Header]): HEAD record.
        submitters (Optional[Dict[str, Submitter]]): Submitter records by xref.
    """
    header: Optional[Header] = field(default_factory=Header)
    submitters: Optional[Dict[str, Submitter]] = field(default_factory=dict)

    def add_submitter(self, submitter: Submitter) -> Submitter:
        """
        Add a submitter keyed by its xref.

        Args:
            submitter (Submitter): Submitter with a non-empty xref.

        Returns:
            Submitter: The submitter added.
        """
        if not submitter.xref:
            raise ValueError("Submitter must have an xref to be added to the document")
        if self.submitters is None:
            self.submitters = {}
        self.submitters[submitter.xref] = submitter
        return submitter
