from typing import List, Sequence, Union

from typeguard import typechecked
from typing_extensions import override

from StructuredNames.Analysis.Analysis import monitor_mutation, trace_retokenization
from StructuredNames.Common.Printable import DEFAULT_DELIMITER
from StructuredNames.Structures.Name import Name
from StructuredNames.Structures.NameErrors import PanicNameError
from StructuredNames.Structures.NameManipulation import join_components, split_components, tokenize

class DelimitedStringName(Name):
    """
    Stores the name as a single masked string together with the number of its components.

    Every structural query or mutation re-tokenizes the whole string, changes the resulting list and joins it back. This costs O(length of the name) per operation and is kept on purpose: the class is a second implementation of the Name contract that ComponentListName is checked against.

    The cached count is authoritative. An empty string stands for no components when the count is 0 and for a single empty component when the count is 1.
    """
    @typechecked
    def __init__(self, source : Union[str, Sequence[str]], delimiter : str = DEFAULT_DELIMITER):
        Name.__init__(self, delimiter)
        if isinstance(source, str):
            self.name = source
            self.no_components = len(tokenize(source, delimiter))
        else:
            self.name = join_components(source, delimiter)
            self.no_components = len(source)

    @override
    def do_clone(self) -> 'DelimitedStringName':
        cloned = DelimitedStringName(self.name, self.delimiter)
        cloned.no_components = self.no_components
        return cloned

    @trace_retokenization
    def _get_components(self) -> List[str]:
        if self.no_components == 0:
            return []
        components = split_components(self.name, self.delimiter)
        if len(components) != self.no_components:
            raise PanicNameError(f"Re-tokenizing {self.name!r} gave {len(components)} components, expected {self.no_components}")
        return components

    def _store(self, components : List[str]):
        self.name = join_components(components, self.delimiter)
        self.no_components = len(components)

    @override
    def get_components(self) -> List[str]:
        return self._get_components()

    @override
    def get_no_components(self) -> int:
        return self.no_components

    @override
    @typechecked
    def get_component(self, i : int) -> str:
        self.assert_is_valid_index(i)
        return self._get_components()[i]

    @override
    @monitor_mutation
    @typechecked
    def set_component(self, i : int, c : str) -> None:
        self.assert_is_valid_index(i)
        components = self._get_components()
        components[i] = c
        self._store(components)

    @override
    @monitor_mutation
    @typechecked
    def insert(self, i : int, c : str) -> None:
        self.assert_is_valid_insert_index(i)
        components = self._get_components()
        components.insert(i, c)
        self._store(components)

    @override
    @monitor_mutation
    @typechecked
    def append(self, c : str) -> None:
        # appending can not disturb existing escape sequences, no need to re-tokenize
        if self.is_empty():
            self.name = c
        else:
            self.name += self.delimiter + c
        self.no_components += 1

    @override
    @monitor_mutation
    @typechecked
    def remove(self, i : int) -> None:
        self.assert_is_valid_index(i)
        components = self._get_components()
        del components[i]
        self._store(components)

    @override
    def as_data_string(self) -> str:
        if self.delimiter == DEFAULT_DELIMITER:
            return self.name
        return join_components(self._get_components(), DEFAULT_DELIMITER)

__all__ = ['DelimitedStringName']
