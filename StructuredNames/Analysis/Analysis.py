import functools
import sys
from typing import Any, Callable, Concatenate, List, Optional, ParamSpec, TypeVar

from line_profiler import LineProfiler

lp = LineProfiler()
T = TypeVar("T")
P = ParamSpec("P")

def profile(func : Callable[P, T]) -> Callable[P, T]:
    lp.add_function(func) # type: ignore
    return func

def print_profile_stats():
    lp.print_stats() # type: ignore

verbose = False
def trace_retokenization(fn : Callable[[Any], List[str]]) -> Callable[[Any], List[str]]:
    """
    Reports every re-tokenization of a delimited string name on stderr when verbose is set.
    """
    @functools.wraps(fn)
    def wrapper(self_arg : Any) -> List[str]:
        components = fn(self_arg)
        if verbose:
            print(f"{fn.__name__} re-tokenized {self_arg.name!r} (delimiter {self_arg.delimiter!r}) into {len(components)} components", file=sys.stderr)
        return components
    return wrapper

monitor_data_string : Optional[str] = None
def monitor_mutation(fn : Callable[Concatenate[Any, P], None]) -> Callable[Concatenate[Any, P], None]:
    """
    Profiles a mutation of the name whose data string equals monitor_data_string.
    """
    @functools.wraps(fn)
    def wrapper(self_arg : Any, *args : P.args, **kwargs : P.kwargs) -> None:
        monitored = monitor_data_string is not None and self_arg.as_data_string() == monitor_data_string
        if monitored:
            lp.enable() # type: ignore
            print(f"Monitoring {fn.__name__} on {monitor_data_string!r}", file=sys.stderr)

        try:
            fn(self_arg, *args, **kwargs)
        finally:
            if monitored:
                lp.disable() # type: ignore
                lp.print_stats() # type: ignore
    return wrapper

__all__ = ['lp', 'profile', 'print_profile_stats', 'trace_retokenization', 'monitor_mutation']
