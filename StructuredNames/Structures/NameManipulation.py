from typing import List, Sequence

from typeguard import typechecked

from StructuredNames.Analysis.Analysis import profile
from StructuredNames.Common.Printable import ESCAPE_CHARACTER

def assert_is_valid_delimiter(delimiter : str):
    assert len(delimiter) == 1, f"Delimiter must be a single character, got {delimiter!r}"
    assert delimiter != ESCAPE_CHARACTER, f"Delimiter can not be the escape character {ESCAPE_CHARACTER!r}"

@profile
@typechecked
def split_components(raw : str, delimiter : str) -> List[str]:
    """
    Splits a masked string into masked components. An escape character and the character after it always stay together in the current component, so masked delimiters never split. The last component is always pushed, which means that the empty string gives a single empty component.
    """
    assert_is_valid_delimiter(delimiter)

    components : List[str] = []
    current : List[str] = []
    i = 0
    while i < len(raw):
        c = raw[i]
        if c == ESCAPE_CHARACTER and i + 1 < len(raw):
            current.append(raw[i:i + 2])
            i += 2
        elif c == delimiter:
            components.append("".join(current))
            current = []
            i += 1
        else:
            # a trailing unmatched escape character also ends up here
            current.append(c)
            i += 1
    components.append("".join(current))
    return components

@typechecked
def tokenize(raw : str, delimiter : str) -> List[str]:
    """ Same as split_components, except that the empty string is the name without components. """
    if raw == "":
        return []
    return split_components(raw, delimiter)

@typechecked
def join_components(components : Sequence[str], delimiter : str) -> str:
    return delimiter.join(components)

@typechecked
def unmask_component(component : str) -> str:
    """
    Removes the escape character in front of every escaped character. A trailing unmatched escape character is kept as is.
    """
    result : List[str] = []
    i = 0
    while i < len(component):
        if component[i] == ESCAPE_CHARACTER and i + 1 < len(component):
            result.append(component[i + 1])
            i += 2
        else:
            result.append(component[i])
            i += 1
    return "".join(result)

@typechecked
def mask_component(component : str, delimiter : str) -> str:
    """ Inverse of unmask_component: escapes every literal delimiter and escape character. """
    assert_is_valid_delimiter(delimiter)
    result : List[str] = []
    for c in component:
        if c == ESCAPE_CHARACTER or c == delimiter:
            result.append(ESCAPE_CHARACTER)
        result.append(c)
    return "".join(result)

@typechecked
def is_properly_masked(component : str, delimiter : str) -> bool:
    """
    Checks that a single component is exactly what mask_component produces: no unescaped delimiter, no trailing unmatched escape character and no escape in front of an ordinary character.
    """
    assert_is_valid_delimiter(delimiter)
    i = 0
    while i < len(component):
        if component[i] == ESCAPE_CHARACTER:
            if i + 1 == len(component):
                return False
            if component[i + 1] != ESCAPE_CHARACTER and component[i + 1] != delimiter:
                return False
            i += 2
        elif component[i] == delimiter:
            return False
        else:
            i += 1
    return True

__all__ = ['split_components', 'tokenize', 'join_components', 'unmask_component', 'mask_component', 'is_properly_masked']
