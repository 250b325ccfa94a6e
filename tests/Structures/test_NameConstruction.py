import pytest

from StructuredNames.Structures.ComponentListName import ComponentListName
from StructuredNames.Structures.DelimitedStringName import DelimitedStringName
from StructuredNames.Structures.NameConstruction import *
from StructuredNames.Structures.NameErrors import MaskingError

def test_string_to_name_defaults():
    n = string_to_name("oss.cs.fau.de")
    assert isinstance(n, ComponentListName)
    assert n.get_no_components() == 4
    assert n.get_delimiter_character() == "."

def test_string_to_name_with_class():
    n = string_to_name("a/b", "/", DelimitedStringName)
    assert isinstance(n, DelimitedStringName)
    assert n.as_data_string() == "a.b"

def test_components_to_name():
    for name_class in name_classes:
        n = components_to_name(("a", "b\\.c"), ".", name_class)
        assert n.get_no_components() == 2
        assert n.as_string() == "a.b.c"

def test_display_to_name_masks_parts():
    for name_class in name_classes:
        n = display_to_name(["Oh...", "a\\b"], ".", name_class)
        assert n.get_component(0) == "Oh\\.\\.\\."
        assert n.get_component(1) == "a\\\\b"
        assert n.as_string("/") == "Oh.../a\\b"

def test_data_string_to_name_inverts_as_data_string():
    n = display_to_name(["a.b", "", "c\\"])
    parsed = data_string_to_name(n.as_data_string(), DelimitedStringName)
    assert parsed.is_equal(n)
    assert parsed.get_delimiter_character() == "."

def test_strict_string_to_name_accepts_masked():
    n = strict_string_to_name("Oh\\.\\.\\..x", ".", DelimitedStringName)
    assert n.get_no_components() == 2

def test_strict_string_to_name_rejects_trailing_escape():
    with pytest.raises(MaskingError) as e:
        strict_string_to_name("a.b\\")
    assert e.value.component == "b\\"
    assert e.value.delimiter == "."

def test_strict_string_to_name_rejects_needless_escape():
    with pytest.raises(MaskingError):
        strict_string_to_name("a/\\b", "/")

def test_name_classes():
    assert name_classes == [ComponentListName, DelimitedStringName]
