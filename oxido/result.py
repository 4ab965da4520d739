"""
Result type for oxido.

A ``Result[T, E]`` is either ``Ok(value)`` or ``Err(error)``. The schema
engine reports every validation outcome this way instead of raising.

The ``unwrap`` family (``unwrap``, ``unwrap_err``, ``expect``, ``expect_err``)
raises UnwrapError on the wrong variant. Reserve it for trusted boundaries;
use ``match``/``is_err`` or the combinators everywhere else.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar, Union

from .lib.util import raise_unwrap
from .option import NOTHING, Option, from_nullable

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
F = TypeVar("F")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Success result containing a value."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def is_ok_and(self, fn: Callable[[T], bool]) -> bool:
        return fn(self.value)

    def is_err_and(self, fn: Callable[[Any], bool]) -> bool:
        return False

    def match(self, on_ok: Callable[[T], U], on_err: Callable[[Any], U]) -> U:
        return on_ok(self.value)

    def ok(self) -> Option[T]:
        return from_nullable(self.value)

    def err(self) -> Option[Any]:
        return NOTHING

    def and_(self, other: Result[U, E]) -> Result[U, E]:
        return other

    def and_then(self, fn: Callable[[T], Result[U, E]]) -> Result[U, E]:
        return fn(self.value)

    def map(self, fn: Callable[[T], U]) -> Ok[U]:
        return Ok(fn(self.value))

    def map_err(self, fn: Callable[[Any], F]) -> Ok[T]:
        return self

    def map_or(self, default: U, fn: Callable[[T], U]) -> U:
        return fn(self.value)

    def map_or_else(self, fallback: Callable[[Any], U], fn: Callable[[T], U]) -> U:
        return fn(self.value)

    def or_(self, other: Result[T, F]) -> Ok[T]:
        return self

    def or_else(self, fn: Callable[[Any], Result[T, F]]) -> Ok[T]:
        return self

    def expect(self, message: str) -> T:
        return self.value

    def expect_err(self, message: str) -> Any:
        raise_unwrap(message, self.value)

    def unwrap(self) -> T:
        return self.value

    def unwrap_err(self) -> Any:
        raise_unwrap("called `Result.unwrap_err()` on an `Ok` value", self.value)

    def unwrap_or(self, default: T) -> T:
        return self.value

    def unwrap_or_else(self, fn: Callable[[Any], T]) -> T:
        return self.value


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Error result containing an error value."""

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def is_ok_and(self, fn: Callable[[Any], bool]) -> bool:
        return False

    def is_err_and(self, fn: Callable[[E], bool]) -> bool:
        return fn(self.error)

    def match(self, on_ok: Callable[[Any], U], on_err: Callable[[E], U]) -> U:
        return on_err(self.error)

    def ok(self) -> Option[Any]:
        return NOTHING

    def err(self) -> Option[E]:
        return from_nullable(self.error)

    def and_(self, other: Result[U, E]) -> Err[E]:
        return self

    def and_then(self, fn: Callable[[Any], Result[U, E]]) -> Err[E]:
        return self

    def map(self, fn: Callable[[Any], U]) -> Err[E]:
        return self

    def map_err(self, fn: Callable[[E], F]) -> Err[F]:
        return Err(fn(self.error))

    def map_or(self, default: U, fn: Callable[[Any], U]) -> U:
        return default

    def map_or_else(self, fallback: Callable[[E], U], fn: Callable[[Any], U]) -> U:
        return fallback(self.error)

    def or_(self, other: Result[T, F]) -> Result[T, F]:
        return other

    def or_else(self, fn: Callable[[E], Result[T, F]]) -> Result[T, F]:
        return fn(self.error)

    def expect(self, message: str) -> Any:
        raise_unwrap(message, self.error)

    def expect_err(self, message: str) -> E:
        return self.error

    def unwrap(self) -> Any:
        raise_unwrap("called `Result.unwrap()` on an `Err` value", self.error)

    def unwrap_err(self) -> E:
        return self.error

    def unwrap_or(self, default: T) -> T:
        return default

    def unwrap_or_else(self, fn: Callable[[E], T]) -> T:
        return fn(self.error)


Result = Union[Ok[T], Err[E]]
