import pytest


@pytest.mark.parametrize(
    "symbol_name",
    [
        "Gedcom",
        "GedcomLoader",
        "GedcomValidator",
        "Header",
        "CharacterSet",
        "StringWithCustomTags",
        "Submitter",
        "Severity",
        "Findings",
        "Encoding",
    ],
)
def test_import_symbol(symbol_name):
    """Test that each key symbol can be imported from gedcom_validator."""
    module = __import__("gedcom_validator", fromlist=[symbol_name])
    symbol = getattr(module, symbol_name, None)
    assert symbol is not None, f"{symbol_name} could not be imported"


def test_import_failure():
    """Test that importing a non-existent symbol raises ImportError or AttributeError."""
    with pytest.raises((ImportError, AttributeError)):
        from gedcom_validator import NotARealClass  # noqa: F401
