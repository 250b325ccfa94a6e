from typing import List, Sequence, Union

from typeguard import typechecked
from typing_extensions import override

from StructuredNames.Common.Printable import DEFAULT_DELIMITER
from StructuredNames.Structures.Name import Name
from StructuredNames.Structures.NameManipulation import tokenize

class ComponentListName(Name):
    """
    Stores the masked components in a list. Tokenization only happens when constructing from a raw string.
    """
    @typechecked
    def __init__(self, source : Union[str, Sequence[str]], delimiter : str = DEFAULT_DELIMITER):
        Name.__init__(self, delimiter)
        if isinstance(source, str):
            self.components : List[str] = tokenize(source, delimiter)
        else:
            self.components = list(source)

    @override
    def do_clone(self) -> 'ComponentListName':
        return ComponentListName(self.components, self.delimiter)

    @override
    def get_no_components(self) -> int:
        return len(self.components)

    @override
    @typechecked
    def get_component(self, i : int) -> str:
        self.assert_is_valid_index(i)
        return self.components[i]

    @override
    @typechecked
    def set_component(self, i : int, c : str) -> None:
        self.assert_is_valid_index(i)
        self.components[i] = c

    @override
    @typechecked
    def insert(self, i : int, c : str) -> None:
        self.assert_is_valid_insert_index(i)
        self.components.insert(i, c)

    @override
    @typechecked
    def append(self, c : str) -> None:
        self.components.append(c)

    @override
    @typechecked
    def remove(self, i : int) -> None:
        self.assert_is_valid_index(i)
        del self.components[i]

    @override
    def get_components(self) -> List[str]:
        return list(self.components)

__all__ = ['ComponentListName']
