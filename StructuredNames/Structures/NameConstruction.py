from typing import List, Sequence, Type

from typeguard import typechecked

from StructuredNames.Common.Printable import DEFAULT_DELIMITER
from StructuredNames.Structures.ComponentListName import ComponentListName
from StructuredNames.Structures.DelimitedStringName import DelimitedStringName
from StructuredNames.Structures.Name import Name
from StructuredNames.Structures.NameErrors import MaskingError
from StructuredNames.Structures.NameManipulation import is_properly_masked, mask_component, tokenize

name_classes : List[Type[Name]] = [ComponentListName, DelimitedStringName]

@typechecked
def string_to_name(raw : str, delimiter : str = DEFAULT_DELIMITER, name_class : Type[Name] = ComponentListName) -> Name:
    """ Builds a name from a string that is already masked for the given delimiter. """
    return name_class(raw, delimiter) # type: ignore

@typechecked
def components_to_name(components : Sequence[str], delimiter : str = DEFAULT_DELIMITER, name_class : Type[Name] = ComponentListName) -> Name:
    return name_class(list(components), delimiter) # type: ignore

@typechecked
def display_to_name(parts : Sequence[str], delimiter : str = DEFAULT_DELIMITER, name_class : Type[Name] = ComponentListName) -> Name:
    """ Builds a name from unmasked parts, masking each of them first. """
    return components_to_name([mask_component(part, delimiter) for part in parts], delimiter, name_class)

@typechecked
def data_string_to_name(data : str, name_class : Type[Name] = ComponentListName) -> Name:
    """ Inverse of Name.as_data_string. """
    return string_to_name(data, DEFAULT_DELIMITER, name_class)

@typechecked
def strict_string_to_name(raw : str, delimiter : str = DEFAULT_DELIMITER, name_class : Type[Name] = ComponentListName) -> Name:
    """
    Like string_to_name, but rejects components that mask_component could not have produced, e.g. a trailing unmatched escape character.
    """
    for component in tokenize(raw, delimiter):
        if not is_properly_masked(component, delimiter):
            raise MaskingError(component, delimiter)
    return string_to_name(raw, delimiter, name_class)

__all__ = ['name_classes', 'string_to_name', 'components_to_name', 'display_to_name', 'data_string_to_name', 'strict_string_to_name']
