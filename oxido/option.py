"""
Option type for oxido.

An ``Option[T]`` is either ``Some(value)`` or ``Nothing``. Both variants carry
the same combinator methods, so callers never need to branch by hand:

    from_nullable(user.get("nickname")).map(str.upper).unwrap_or("ANON")

Use pattern matching when both branches matter:

    match option:
        case Some(value):
            ...
        case Nothing():
            ...
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Generic, TypeVar, Union

from .lib.util import is_present, raise_unwrap

if TYPE_CHECKING:
    from .result import Result

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Some(Generic[T]):
    """Present option containing a value. The value may not be None."""

    value: T

    def __post_init__(self) -> None:
        if self.value is None:
            raise TypeError("Some() requires a value; use NOTHING for absence")

    def is_some(self) -> bool:
        return True

    def is_none(self) -> bool:
        return False

    def is_some_and(self, fn: Callable[[T], bool]) -> bool:
        return fn(self.value)

    def match(self, on_some: Callable[[T], U], on_none: Callable[[], U]) -> U:
        return on_some(self.value)

    def and_(self, other: Option[U]) -> Option[U]:
        return other

    def and_then(self, fn: Callable[[T], Option[U]]) -> Option[U]:
        return fn(self.value)

    def filter(self, fn: Callable[[T], bool]) -> Option[T]:
        return self if fn(self.value) else NOTHING

    def map(self, fn: Callable[[T], U]) -> Option[U]:
        return Some(fn(self.value))

    def map_or(self, default: U, fn: Callable[[T], U]) -> U:
        return fn(self.value)

    def map_or_else(self, fallback: Callable[[], U], fn: Callable[[T], U]) -> U:
        return fn(self.value)

    def ok_or(self, error: E) -> Result[T, E]:
        from .result import Ok

        return Ok(self.value)

    def ok_or_else(self, fn: Callable[[], E]) -> Result[T, E]:
        from .result import Ok

        return Ok(self.value)

    def or_(self, other: Option[T]) -> Option[T]:
        return self

    def or_else(self, fn: Callable[[], Option[T]]) -> Option[T]:
        return self

    def xor(self, other: Option[T]) -> Option[T]:
        return self if other.is_none() else NOTHING

    def expect(self, message: str) -> T:
        return self.value

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value

    def unwrap_or_else(self, fn: Callable[[], T]) -> T:
        return self.value


@dataclass(frozen=True, slots=True)
class Nothing:
    """Empty option. Use the shared ``NOTHING`` instance."""

    def __repr__(self) -> str:
        return "NOTHING"

    def is_some(self) -> bool:
        return False

    def is_none(self) -> bool:
        return True

    def is_some_and(self, fn: Callable[[Any], bool]) -> bool:
        return False

    def match(self, on_some: Callable[[Any], U], on_none: Callable[[], U]) -> U:
        return on_none()

    def and_(self, other: Option[U]) -> Option[U]:
        return self

    def and_then(self, fn: Callable[[Any], Option[U]]) -> Option[U]:
        return self

    def filter(self, fn: Callable[[Any], bool]) -> Nothing:
        return self

    def map(self, fn: Callable[[Any], U]) -> Option[U]:
        return self

    def map_or(self, default: U, fn: Callable[[Any], U]) -> U:
        return default

    def map_or_else(self, fallback: Callable[[], U], fn: Callable[[Any], U]) -> U:
        return fallback()

    def ok_or(self, error: E) -> Result[Any, E]:
        from .result import Err

        return Err(error)

    def ok_or_else(self, fn: Callable[[], E]) -> Result[Any, E]:
        from .result import Err

        return Err(fn())

    def or_(self, other: Option[T]) -> Option[T]:
        return other

    def or_else(self, fn: Callable[[], Option[T]]) -> Option[T]:
        return fn()

    def xor(self, other: Option[T]) -> Option[T]:
        return other if other.is_some() else self

    def expect(self, message: str) -> Any:
        raise_unwrap(message)

    def unwrap(self) -> Any:
        raise_unwrap("called `Option.unwrap()` on a `Nothing` value")

    def unwrap_or(self, default: T) -> T:
        return default

    def unwrap_or_else(self, fn: Callable[[], T]) -> T:
        return fn()


NOTHING = Nothing()

Option = Union[Some[T], Nothing]


def from_nullable(value: T | None) -> Option[T]:
    """Wrap a possibly-None value: None becomes NOTHING, anything else Some."""
    return Some(value) if is_present(value) else NOTHING
