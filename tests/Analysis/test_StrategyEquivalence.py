from typing import List

import pytest

from StructuredNames.Analysis.StrategyEquivalence import *
from StructuredNames.Structures.ComponentListName import ComponentListName
from StructuredNames.Structures.DelimitedStringName import DelimitedStringName
from StructuredNames.Structures.NameErrors import PanicNameError, StrategyMismatchError

raw_names = ["", "oss.cs.fau.de", "Oh\\.\\.\\.", "...", "a\\\\.b", "x", "a.\\.b."]

operations : List[NameOperation] = [
    ("append", ("c\\.d",)),
    ("insert", (0, "first")),
    ("set_component", (1, "")),
    ("remove", (0,)),
    ("insert", (100, "out of range")),
    ("remove", (-1,)),
    ("append", ("",)),
    ("concat", (ComponentListName("p.q"),)),
    ("set_component", (0, "\\\\")),
]

def test_strategies_agree_on_default_delimiter():
    for raw in raw_names:
        final = check_equivalence(raw, ".", operations)
        assert final.get_component(final.get_no_components() - 1) == "q"

def test_strategies_agree_on_other_delimiter():
    slash_operations : List[NameOperation] = [
        ("append", ("a\\/b",)),
        ("insert", (1, "x.y")),
        ("remove", (0,)),
        ("concat", (DelimitedStringName("u/v", "/"),)),
    ]
    for raw in ["///", "a/b", "a\\/b/c", "dots.are.plain"]:
        check_equivalence(raw, "/", slash_operations)

def test_strategies_agree_on_remove_until_empty():
    check_equivalence("a.b.c", ".", [("remove", (0,))] * 4)

def test_check_all():
    assert check_all(raw_names, ".", operations) == len(raw_names)
    assert check_all(raw_names, ".", operations, show_progress=True) == len(raw_names)

def test_apply_operation():
    n = ComponentListName("a.b")
    apply_operation(n, ("insert", (1, "x")))
    assert n.as_data_string() == "a.x.b"

def test_apply_unsupported_operation():
    with pytest.raises(ValueError):
        apply_operation(ComponentListName("a"), ("clone", ()))

def test_compare_names_reports_mismatch():
    with pytest.raises(StrategyMismatchError) as e:
        compare_names(ComponentListName("a.b"), DelimitedStringName("a.c"), 3)
    assert e.value.step == 3

def test_compare_names_ignores_delimiter_for_equality_but_not_display():
    with pytest.raises(StrategyMismatchError) as e:
        compare_names(ComponentListName("a.b"), DelimitedStringName("a/b", "/"), 0)
    assert "display" in str(e.value)

def test_divergence_is_detected():
    # the delimited string can not hold a component with an unmasked delimiter
    with pytest.raises(PanicNameError):
        check_equivalence("a.b", ".", [("set_component", (0, "x.y"))])
