"""
encoding.py - Character set names that a GEDCOM header may declare.

Module: gedcom_validator.encoding
Author: @colin0brass
Last updated: 2026-10-19
"""

__all__ = ['Encoding']

from enum import Enum
from typing import List, Optional


class Encoding(Enum):
    """
    Supported GEDCOM character sets, valued by the name used in the HEAD.CHAR tag.

    UNICODE covers both byte orders; the byte order is detected from the file,
    not declared in the header.
    """
    ASCII = "ASCII"
    ANSEL = "ANSEL"
    UNICODE = "UNICODE"
    UTF_8 = "UTF-8"

    @property
    def character_set_name(self) -> str:
        """Name as written in the header."""
        return self.value

    @classmethod
    def from_character_set_name(cls, name: Optional[str]) -> Optional['Encoding']:
        """
        Look up an encoding by its header name.

        Args:
            name (Optional[str]): Character set name, e.g. 'UTF-8'.

        Returns:
            Optional[Encoding]: Matching encoding, or None if not supported.
        """
        if name is None:
            return None
        name = name.strip()
        for encoding in cls:
            if encoding.value == name:
                return encoding
        return None

    @classmethod
    def is_valid_character_set_name(cls, name: Optional[str]) -> bool:
        return cls.from_character_set_name(name) is not None

    @classmethod
    def supported_character_set_names(cls) -> List[str]:
        return [encoding.value for encoding in cls]
