from typing import Any, Iterable, Optional, Sequence, Tuple

import tqdm

from StructuredNames.Common.Printable import DEFAULT_DELIMITER
from StructuredNames.Structures.ComponentListName import ComponentListName
from StructuredNames.Structures.DelimitedStringName import DelimitedStringName
from StructuredNames.Structures.Name import Name
from StructuredNames.Structures.NameErrors import IndexOutOfRangeError, StrategyMismatchError

NameOperation = Tuple[str, Tuple[Any, ...]]

supported_operations = ["set_component", "insert", "append", "remove", "concat"]

def apply_operation(name : Name, operation : NameOperation):
    method_name, args = operation
    if method_name not in supported_operations:
        raise ValueError(f"Unsupported name operation {method_name}")
    getattr(name, method_name)(*args)

def compare_names(expected : Name, got : Name, step : int):
    """ Raises StrategyMismatchError if the two names can be told apart through the Name contract. """
    if not expected.is_equal(got) or not got.is_equal(expected):
        raise StrategyMismatchError("Names are not equal", step, expected, got)
    if expected.get_no_components() != got.get_no_components():
        raise StrategyMismatchError("Different number of components", step, expected.get_no_components(), got.get_no_components())
    if expected.as_string() != got.as_string():
        raise StrategyMismatchError("Different display strings", step, expected.as_string(), got.as_string())
    if expected.as_data_string() != got.as_data_string():
        raise StrategyMismatchError("Different data strings", step, expected.as_data_string(), got.as_data_string())
    if expected.get_hash_code() != got.get_hash_code():
        raise StrategyMismatchError("Different hash codes", step, expected.get_hash_code(), got.get_hash_code())

def try_operation(name : Name, operation : NameOperation) -> Optional[IndexOutOfRangeError]:
    try:
        apply_operation(name, operation)
    except IndexOutOfRangeError as e:
        return e
    return None

def check_equivalence(raw : str, delimiter : str = DEFAULT_DELIMITER, operations : Sequence[NameOperation] = ()) -> Name:
    """
    Builds both storage strategies from raw and replays operations on them, comparing them after every step. An operation must fail with IndexOutOfRangeError on both or on neither of them.

    Returns the component list name in its final state.
    """
    expected : Name = ComponentListName(raw, delimiter)
    got : Name = DelimitedStringName(raw, delimiter)
    compare_names(expected, got, 0)

    for step, operation in enumerate(operations, start=1):
        expected_error = try_operation(expected, operation)
        got_error = try_operation(got, operation)
        if (expected_error is None) != (got_error is None):
            raise StrategyMismatchError(f"Only one strategy failed on {operation[0]}", step, expected_error, got_error)
        compare_names(expected, got, step)
    return expected

def check_all(raws : Iterable[str], delimiter : str = DEFAULT_DELIMITER, operations : Sequence[NameOperation] = (), show_progress : bool = False) -> int:
    checked = 0
    iterator = tqdm.tqdm(raws) if show_progress else raws
    for raw in iterator:
        check_equivalence(raw, delimiter, operations)
        checked += 1
    return checked

__all__ = ['NameOperation', 'apply_operation', 'compare_names', 'check_equivalence', 'check_all']
