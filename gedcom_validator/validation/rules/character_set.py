from __future__ import annotations

from gedcom_validator.encoding import Encoding
from gedcom_validator.model import CharacterSet, Header, StringWithCustomTags
from gedcom_validator.validation.context import ValidationContext
from .string_custom_tags import check_custom_tags, check_required_string


def check_character_set(header: Header, context: ValidationContext, default_name: str = Encoding.ANSEL.character_set_name) -> None:
    """
    Check the character set declared in the header.

    A missing character set (or a missing name) is reported once and the
    checks that depend on it are skipped. With autorepair the missing value
    is replaced by default_name, provided default_name is itself supported.
    An unsupported name is never repaired.

    Args:
        header: Header holding the character set.
        context: Current validation context.
        default_name: Character set name used for repairs.
    """
    can_repair = context.autorepair and Encoding.is_valid_character_set_name(default_name)

    if header.character_set is None:
        if not can_repair:
            context.add_error("header character set is not specified", header)
            return
        header.character_set = CharacterSet(character_set_name=StringWithCustomTags(default_name))
        context.add_info(f"header character set was not specified - repaired with {default_name}", header)

    character_set = header.character_set
    check_custom_tags(character_set, context, "character set")

    if character_set.character_set_name is None:
        if not can_repair:
            context.add_error("header character set name is not defined", character_set)
            return
        character_set.character_set_name = StringWithCustomTags(default_name)
        context.add_info(f"header character set name was not defined - repaired with {default_name}", character_set)

    name = character_set.character_set_name
    if not check_required_string(name, context, "character set name", character_set):
        return
    if not Encoding.is_valid_character_set_name(name.value):
        supported = ", ".join(Encoding.supported_character_set_names())
        context.add_error(f"character set name '{name.value}' is not one of the supported encodings ({supported})", name)
