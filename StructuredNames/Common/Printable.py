from abc import abstractmethod
from typing import Optional

DEFAULT_DELIMITER = '.'
ESCAPE_CHARACTER = '\\'

class Printable:
    """
    Anything that has a human-readable and a machine-readable string form.
    """
    @abstractmethod
    def as_string(self, delimiter : Optional[str] = None) -> str:
        """
        Returns a human-readable representation where special characters are not escaped. The result is meant for display and can not always be parsed back.
        """
        raise NotImplementedError(f"Method as_string not implemented for class {self.__class__.__name__}")

    @abstractmethod
    def as_data_string(self) -> str:
        """
        Returns a machine-readable representation using the default special characters. It can be parsed back into an equal object.
        """
        raise NotImplementedError(f"Method as_data_string not implemented for class {self.__class__.__name__}")

__all__ = ['DEFAULT_DELIMITER', 'ESCAPE_CHARACTER', 'Printable']
