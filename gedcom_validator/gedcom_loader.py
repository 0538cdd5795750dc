"""
gedcom_loader.py - Build the validator's document graph from a GEDCOM file.

Defines the GedcomLoader class, which reads a GEDCOM file with ged4py and
maps the HEAD and SUBM records onto the gedcom_validator.model types.
Missing tags are left as None so the validator can report them; nothing is
defaulted here.

Author: @colin0brass
Last updated: 2026-10-19
"""
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ged4py.parser import GedcomReader
from ged4py.model import Record

from .model import (
    CharacterSet,
    Corporation,
    Gedcom,
    GedcomVersion,
    Header,
    SourceSystem,
    StringWithCustomTags,
    Submitter,
)

logger = logging.getLogger(__name__)


class GedcomLoadError(Exception):
    """Raised when a GEDCOM file cannot be read."""


class GedcomLoader:
    """
    Loads a GEDCOM file into a Gedcom document graph.

    Attributes:
        gedcom_file (Path): Path to GEDCOM file.
        encoding (Optional[str]): Python codec to read with; None lets ged4py
            detect it from the BOM and HEAD.CHAR.
    """
    __slots__ = ['gedcom_file', 'encoding']

    def __init__(self, gedcom_file: Union[str, Path], encoding: Optional[str] = None) -> None:
        """
        Initialize GedcomLoader.

        Args:
            gedcom_file (Union[str, Path]): Path to GEDCOM file.
            encoding (Optional[str]): Codec override.
        """
        self.gedcom_file = Path(gedcom_file)
        self.encoding = encoding

    def load(self) -> Gedcom:
        """
        Read the file and build the document graph.

        Returns:
            Gedcom: Document with header and submitters populated from the file.

        Raises:
            GedcomLoadError: If the file is missing or cannot be parsed.
        """
        if not self.gedcom_file.exists():
            raise GedcomLoadError(f"GEDCOM file not found: {self.gedcom_file}")
        try:
            with GedcomReader(str(self.gedcom_file), encoding=self.encoding) as reader:
                gedcom = Gedcom(header=None, submitters={})
                for record in reader.records0('SUBM'):
                    if not record.xref_id:
                        logger.warning(f"Skipping SUBM record without xref in '{self.gedcom_file}'")
                        continue
                    submitter = self._create_submitter(record)
                    gedcom.submitters[submitter.xref] = submitter
                if reader.header is not None:
                    gedcom.header = self._create_header(reader.header, gedcom.submitters)
                else:
                    logger.warning(f"GEDCOM file '{self.gedcom_file}' has no HEAD record")
        except Exception as e:
            logger.error(f"Error loading GEDCOM file '{self.gedcom_file}': {e}")
            raise GedcomLoadError(f"Could not load GEDCOM file '{self.gedcom_file}': {e}") from e

        logger.info(f"Loaded GEDCOM file '{self.gedcom_file}' with {len(gedcom.submitters)} submitter(s)")
        return gedcom

    def _create_header(self, record: Record, submitters: Dict[str, Submitter]) -> Header:
        """
        Creates a Header from the HEAD record.

        Args:
            record (Record): HEAD record.
            submitters (Dict[str, Submitter]): Submitters already loaded, by xref.

        Returns:
            Header: Header object.
        """
        header = Header(
            character_set=self._create_character_set(record.sub_tag('CHAR')),
            copyright_data=self._lines(record, 'COPR'),
            source_system=self._create_source_system(record.sub_tag('SOUR')),
            gedcom_version=self._create_gedcom_version(record.sub_tag('GEDC')),
            destination_system=_string(record, 'DEST'),
            date=_string(record, 'DATE'),
            time=_string(record, 'DATE/TIME'),
            file_name=_string(record, 'FILE'),
            language=_string(record, 'LANG'),
            place_hierarchy=_string(record, 'PLAC/FORM'),
            notes=self._lines(record, 'NOTE'),
            custom_tags=_custom_tags(record),
        )

        # follows the pointer to the SUBM record
        submitter_record = record.sub_tag('SUBM')
        if submitter_record is not None:
            xref = _pointer_xref(submitter_record)
            header.submitter = submitters.get(xref)
            if header.submitter is None:
                logger.warning(f"Header submitter {xref} has no SUBM record")
                header.submitter = Submitter(xref=xref)
        return header

    def _create_character_set(self, record: Optional[Record]) -> Optional[CharacterSet]:
        if record is None:
            return None
        return CharacterSet(
            character_set_name=StringWithCustomTags(_text(record.value)) if record.value is not None else None,
            version_number=_string(record, 'VERS'),
            custom_tags=_custom_tags(record),
        )

    def _create_source_system(self, record: Optional[Record]) -> Optional[SourceSystem]:
        if record is None:
            return None
        corporation = None
        corp_record = record.sub_tag('CORP')
        if corp_record is not None:
            corporation = Corporation(business_name=_text(corp_record.value), custom_tags=_custom_tags(corp_record))
        return SourceSystem(
            system_id=StringWithCustomTags(_text(record.value)) if record.value is not None else None,
            version_number=_string(record, 'VERS'),
            product_name=_string(record, 'NAME'),
            corporation=corporation,
            custom_tags=_custom_tags(record),
        )

    def _create_gedcom_version(self, record: Optional[Record]) -> Optional[GedcomVersion]:
        if record is None:
            return None
        return GedcomVersion(
            version_number=_string(record, 'VERS'),
            gedcom_form=_string(record, 'FORM'),
            custom_tags=_custom_tags(record),
        )

    def _create_submitter(self, record: Record) -> Submitter:
        """
        Creates a Submitter from a SUBM record.

        Args:
            record (Record): SUBM record.

        Returns:
            Submitter: Submitter object.
        """
        return Submitter(
            xref=record.xref_id,
            name=_string(record, 'NAME'),
            language_pref=[
                StringWithCustomTags(_text(lang.value), _custom_tags(lang))
                for lang in record.sub_tags('LANG')
            ],
            registration_file_number=_string(record, 'RFN'),
            rec_id_number=_string(record, 'RIN'),
            custom_tags=_custom_tags(record),
        )

    def _lines(self, record: Record, tag: str) -> List[str]:
        """Text of every sub-record with this tag, one entry per line (CONT/CONC already joined by ged4py)."""
        lines = []
        for sub_record in record.sub_tags(tag):
            text = _text(sub_record.value)
            if text is not None:
                lines.extend(text.splitlines())
        return lines


def _text(value: Any) -> Optional[str]:
    """Plain text of a ged4py record value (NAME values arrive as name-part tuples, DATE values as DateValue)."""
    if value is None:
        return None
    if isinstance(value, tuple):
        return " ".join(part for part in value if part)
    return str(value)


def _custom_tags(record: Record) -> Dict[str, Any]:
    """User-defined sub-records (tags starting with '_') by tag."""
    return {
        sub_record.tag: _text(sub_record.value)
        for sub_record in record.sub_records
        if sub_record.tag.startswith('_')
    }


def _string(record: Record, path: str) -> Optional[StringWithCustomTags]:
    sub_record = record.sub_tag(path)
    if sub_record is None:
        return None
    return StringWithCustomTags(_text(sub_record.value), _custom_tags(sub_record))


def _pointer_xref(record: Record) -> Optional[str]:
    if record.xref_id:
        return record.xref_id
    value = record.value
    return getattr(value, 'ref', None) or (value if isinstance(value, str) else None)
