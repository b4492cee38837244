"""
Ok/Err results for loading data from outside the process.

Snapshot text and user files can be malformed; parsing them returns a Result
instead of raising, and the CLI decides how to report the Err. Graph
operations themselves never fail and return plain values.
"""

from dataclasses import dataclass
from typing import Callable, Generic, NoReturn, TypeVar, Union

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err:
    """A failed load; error is a message fit for the user."""
    error: str

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        raise ValueError(f"Called unwrap on Err: {self.error}")


Result = Union[Ok[T], Err]


def map_ok(result: "Result[T]", func: Callable[[T], U]) -> "Result[U]":
    """Feed an Ok value through func; an Err passes through untouched."""
    if isinstance(result, Ok):
        return Ok(func(result.value))
    return result
