from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from StructuredNames.Structures.Name import Name

should_print_names = True

# Fatal errors
class PanicNameError(Exception):
    def __init__(self, message : str):
        super().__init__(message)

# Contract errors
class IndexOutOfRangeError(IndexError):
    def __init__(self, index : int, no_components : int, name : Optional['Name'] = None, allow_end : bool = False):
        self.index = index
        self.no_components = no_components
        self.name = name
        bound = "]" if allow_end else ")"
        message = f"Index {index} out of range [0, {no_components}{bound}"
        if should_print_names and name is not None:
            message += f" for name\n\t{name.as_data_string()!r}"
        super().__init__(message)

class MaskingError(Exception):
    def __init__(self, component : str, delimiter : str):
        self.component = component
        self.delimiter = delimiter
        if should_print_names:
            super().__init__(f"Component is not properly masked for delimiter {delimiter!r}\n\t{component!r}")
        else:
            super().__init__("Component is not properly masked")

class StrategyMismatchError(Exception):
    def __init__(self, message : str, step : int, expected : Any, got : Any):
        self.step = step
        self.expected = expected
        self.got = got
        if should_print_names:
            super().__init__(f"Step {step}: {message}\n\t{expected!r}\nand\n\t{got!r}")
        else:
            super().__init__(f"Step {step}: {message}")

__all__ = ['PanicNameError', 'IndexOutOfRangeError', 'MaskingError', 'StrategyMismatchError']
