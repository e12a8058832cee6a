"""
Result Type Implementation.

Provides an Ok/Err result type so that per-file failures (unparseable
source, unreadable directories) travel as values instead of exceptions.
The graph builder and the import extractor return these; callers decide
whether a failure becomes a diagnostic or a hard error.
"""

from dataclasses import dataclass
from typing import Callable, Generic, NoReturn, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Represents a successful computation."""
    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value


@dataclass(frozen=True)
class Err(Generic[E]):
    """Represents a failed computation."""
    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        raise ValueError(f"Called unwrap on Err: {self.error}")

    def unwrap_or(self, default: T) -> T:
        return default


# Type alias for the Result
Result = Union[Ok[T], Err[E]]


def map_ok(result: Result[T, E], func: Callable[[T], U]) -> Result[U, E]:
    """
    Apply a function to the contained value if Ok, otherwise return Err.
    """
    if isinstance(result, Ok):
        return Ok(func(result.value))
    return result  # type: ignore
