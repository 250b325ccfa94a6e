from abc import abstractmethod
from typing import Iterator, List, Optional

from typeguard import typechecked

from StructuredNames.Common.Printable import DEFAULT_DELIMITER, Printable
from StructuredNames.Structures.NameErrors import IndexOutOfRangeError
from StructuredNames.Structures.NameManipulation import assert_is_valid_delimiter, join_components, unmask_component

class Name(Printable):
    """
    A name is a sequence of string components separated by a delimiter character.

    Components are stored masked: a literal delimiter or escape character inside a component is preceded by the escape character. The escape character is fixed, the delimiter can be chosen per name.

    Examples with the delimiter '.':
        "oss.cs.fau.de" has four components,
        "Oh\\.\\.\\." has a single component.
    With the delimiter '/', "///" has four empty components.
    """
    def __init__(self, delimiter : str):
        assert_is_valid_delimiter(delimiter)
        self.delimiter = delimiter

    # Primitives every storage strategy provides

    @abstractmethod
    def get_no_components(self) -> int:
        raise NotImplementedError(f"Method get_no_components not implemented for class {self.__class__.__name__}")

    @abstractmethod
    def get_component(self, i : int) -> str:
        """ Returns the masked component at index i. """
        raise NotImplementedError(f"Method get_component not implemented for class {self.__class__.__name__}")

    @abstractmethod
    def set_component(self, i : int, c : str) -> None:
        """ Expects that c is properly masked. """
        raise NotImplementedError(f"Method set_component not implemented for class {self.__class__.__name__}")

    @abstractmethod
    def insert(self, i : int, c : str) -> None:
        """ Expects that c is properly masked. Inserting at get_no_components() appends. """
        raise NotImplementedError(f"Method insert not implemented for class {self.__class__.__name__}")

    @abstractmethod
    def append(self, c : str) -> None:
        """ Expects that c is properly masked. """
        raise NotImplementedError(f"Method append not implemented for class {self.__class__.__name__}")

    @abstractmethod
    def remove(self, i : int) -> None:
        raise NotImplementedError(f"Method remove not implemented for class {self.__class__.__name__}")

    @abstractmethod
    def do_clone(self) -> 'Name':
        raise NotImplementedError(f"Method do_clone not implemented for class {self.__class__.__name__}")

    # Index checks, done before any mutation

    def assert_is_valid_index(self, i : int):
        if i < 0 or i >= self.get_no_components():
            raise IndexOutOfRangeError(i, self.get_no_components(), self)

    def assert_is_valid_insert_index(self, i : int):
        if i < 0 or i > self.get_no_components():
            raise IndexOutOfRangeError(i, self.get_no_components(), self, allow_end=True)

    # Shared behaviour, written only in terms of the primitives

    def get_components(self) -> List[str]:
        return [self.get_component(i) for i in range(self.get_no_components())]

    @typechecked
    def as_string(self, delimiter : Optional[str] = None) -> str:
        if delimiter is None:
            delimiter = self.delimiter
        return join_components([unmask_component(c) for c in self.get_components()], delimiter)

    def as_data_string(self) -> str:
        return join_components(self.get_components(), DEFAULT_DELIMITER)

    def get_delimiter_character(self) -> str:
        return self.delimiter

    def is_empty(self) -> bool:
        return self.get_no_components() == 0

    @typechecked
    def is_equal(self, other : 'Name') -> bool:
        """
        Two names are equal if their masked components are equal pairwise. The delimiter is not taken into account.
        """
        if self.get_no_components() != other.get_no_components():
            return False
        for i in range(self.get_no_components()):
            if self.get_component(i) != other.get_component(i):
                return False
        return True

    def get_hash_code(self) -> int:
        """ 32-bit signed rolling hash (h * 31 + c) of the data string. """
        hash_code = 0
        for c in self.as_data_string():
            hash_code = (hash_code * 31 + ord(c)) & 0xFFFFFFFF
        if hash_code >= 0x80000000:
            hash_code -= 0x100000000
        return hash_code

    @typechecked
    def concat(self, other : 'Name') -> None:
        """
        Appends all components of other. The delimiter of other is not checked, masked components are carried over verbatim.
        """
        no_components = other.get_no_components() # other may be self
        for i in range(no_components):
            self.append(other.get_component(i))

    def clone(self) -> 'Name':
        cloned = self.do_clone()
        assert cloned is not self
        return cloned

    # Python protocols

    def __eq__(self, other : object) -> bool:
        if self is other: return True
        if not isinstance(other, Name): return False
        return self.is_equal(other)

    def __hash__(self) -> int:
        # follows the current components, do not mutate names used as keys
        return self.get_hash_code()

    def __len__(self) -> int:
        return self.get_no_components()

    def __iter__(self) -> Iterator[str]:
        return iter(self.get_components())

    def __str__(self) -> str:
        return self.as_data_string()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.as_data_string()!r}, delimiter={self.delimiter!r})"

__all__ = ['Name']
