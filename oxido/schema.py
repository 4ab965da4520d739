"""
Schema engine for oxido.

Schemas are immutable validators built by composing factory functions:

    from oxido import array, number, object, optional, string

    user = object({
        "name": string(),
        "age": number(),
        "tags": array(string()),
        "email": optional(string()),
    })

    result = user.validate({"name": "Ada", "age": 36, "tags": []})
    # Ok({"name": "Ada", "age": 36, "tags": [], "email": NOTHING})

``validate`` never raises on bad input. It walks the input and the schema tree
together and stops at the first mismatch, returning ``Err(ParseError)`` whose
``path`` points from the root to the failing value:

    user.validate({"name": "Ada", "age": "36", "tags": []})
    # Err(ParseError(path=("age",), message="Expecting number", input="36"))
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from datetime import date as _date
from types import MappingProxyType
from typing import (
    Any,
    Generic,
    Mapping,
    Protocol,
    TypeVar,
    runtime_checkable,
)

from pydantic import BaseModel, ConfigDict, field_serializer
from pydantic_core import PydanticSerializationError

from .context import descend
from .lib.util import is_nil, is_plain_object
from .option import NOTHING, Option, from_nullable
from .result import Err, Ok, Result

logger = logging.getLogger(__name__)

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


class ParseError(BaseModel):
    """
    Why and where validation failed.

    Attributes:
        path: Field names and stringified list indices, root first
        message: Fixed description of the failed check
        input: The sub-value that failed (not the whole input)
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    path: tuple[str, ...] = ()
    message: str
    input: Any = None

    @field_serializer("input", mode="wrap")
    def serialize_input(self, value: Any, handler: Any) -> Any:
        # json mode cannot encode arbitrary rejected objects
        try:
            return handler(value)
        except PydanticSerializationError:
            return repr(value)

    def prepend(self, segment: str) -> ParseError:
        """Return a copy with ``segment`` as the new outermost path element."""
        return self.model_copy(update={"path": (segment, *self.path)})

    @property
    def location(self) -> str:
        """Dotted path, e.g. "items.1.n". Empty for the root."""
        return ".".join(self.path)

    def __str__(self) -> str:
        if not self.path:
            return self.message
        return f"{self.location}: {self.message}"


@runtime_checkable
class Schema(Protocol[T_co]):
    """Anything that can validate untyped input into a ``T_co``."""

    @property
    def type(self) -> str: ...

    def validate(self, input: Any) -> Result[T_co, ParseError]: ...


def _fail(schema_type: str, message: str, input: Any) -> Err[ParseError]:
    logger.debug("%s schema rejected %s: %s", schema_type, _type_name(input), message)
    return Err(ParseError(message=message, input=input))


def _type_name(value: Any) -> str:
    return type(value).__name__


def _require_schema(value: Any, where: str) -> None:
    # schema classes satisfy the protocol check too
    if isinstance(value, type):
        raise TypeError(
            f"{where} must be a schema instance, got class {value.__name__}"
        )
    if not isinstance(value, Schema):
        raise TypeError(f"{where} must be a schema, got {_type_name(value)}")


# Primitives


@dataclass(frozen=True, slots=True)
class StringSchema:
    @property
    def type(self) -> str:
        return "string"

    def validate(self, input: Any) -> Result[str, ParseError]:
        if isinstance(input, str):
            return Ok(input)
        return _fail(self.type, "Expecting string", input)


@dataclass(frozen=True, slots=True)
class NumberSchema:
    """
    Finite ``int`` or ``float``.

    ``bool`` is rejected even though it subclasses ``int``, and so are NaN and
    the infinities. No coercion: ``"1"`` is not a number.
    """

    @property
    def type(self) -> str:
        return "number"

    def validate(self, input: Any) -> Result[int | float, ParseError]:
        if isinstance(input, bool) or not isinstance(input, (int, float)):
            return _fail(self.type, "Expecting number", input)
        if isinstance(input, float) and not math.isfinite(input):
            return _fail(self.type, "Expecting number", input)
        return Ok(input)


@dataclass(frozen=True, slots=True)
class BooleanSchema:
    @property
    def type(self) -> str:
        return "boolean"

    def validate(self, input: Any) -> Result[bool, ParseError]:
        if isinstance(input, bool):
            return Ok(input)
        return _fail(self.type, "Expecting boolean", input)


@dataclass(frozen=True, slots=True)
class DateSchema:
    """
    ``datetime.date`` or ``datetime.datetime``.

    Values that are not equal to themselves (NaT-style placeholders) are
    invalid. On success a new instance is returned, never the caller's object.
    """

    @property
    def type(self) -> str:
        return "date"

    def validate(self, input: Any) -> Result[_date, ParseError]:
        if isinstance(input, _date) and input == input:
            return Ok(input.replace())
        return _fail(self.type, "Expecting valid date", input)


# Containers


@dataclass(frozen=True, slots=True)
class ArraySchema(Generic[T]):
    element: Schema[T]

    @property
    def type(self) -> str:
        return f"array<{self.element.type}>"

    def validate(self, input: Any) -> Result[list[T], ParseError]:
        if not isinstance(input, (list, tuple)):
            return _fail(self.type, "Expecting array", input)

        with descend() as too_deep:
            if too_deep:
                return _fail(self.type, "Maximum depth exceeded", input)

            items: list[T] = []
            for i, item in enumerate(input):
                match self.element.validate(item):
                    case Err(error):
                        return Err(error.prepend(str(i)))
                    case Ok(value):
                        items.append(value)
            return Ok(items)


@dataclass(frozen=True, slots=True, eq=False)
class ObjectSchema:
    """
    Plain ``dict`` with a fixed set of fields.

    Fields are checked in ``shape`` order; a missing key is validated as None.
    Keys not in ``shape`` are dropped from the output. Instances compare and
    hash by identity.
    """

    shape: Mapping[str, Schema[Any]]

    @property
    def type(self) -> str:
        return "object"

    def validate(self, input: Any) -> Result[dict[str, Any], ParseError]:
        if not is_plain_object(input):
            return _fail(self.type, "Expecting object", input)

        with descend() as too_deep:
            if too_deep:
                return _fail(self.type, "Maximum depth exceeded", input)

            output: dict[str, Any] = {}
            for key, field in self.shape.items():
                match field.validate(input.get(key)):
                    case Err(error):
                        return Err(error.prepend(key))
                    case Ok(value):
                        output[key] = value
            return Ok(output)


# Wrappers


@dataclass(frozen=True, slots=True)
class OptionalSchema(Generic[T]):
    """None becomes NOTHING; anything else is validated and wrapped in Some."""

    inner: Schema[T]

    @property
    def type(self) -> str:
        return f"option<{self.inner.type}>"

    def validate(self, input: Any) -> Result[Option[T], ParseError]:
        if is_nil(input):
            return Ok(NOTHING)
        return self.inner.validate(input).map(from_nullable)


@dataclass(frozen=True, slots=True, eq=False)
class DefaultedSchema(Generic[T]):
    """
    None becomes ``default`` as-is; the default is not validated.

    Compares and hashes by identity, so unhashable defaults are fine.
    """

    inner: Schema[T]
    default: T

    @property
    def type(self) -> str:
        return self.inner.type

    def validate(self, input: Any) -> Result[T, ParseError]:
        if is_nil(input):
            return Ok(self.default)
        return self.inner.validate(input)


# Factories


def string() -> StringSchema:
    return StringSchema()


def number() -> NumberSchema:
    return NumberSchema()


def boolean() -> BooleanSchema:
    return BooleanSchema()


def date() -> DateSchema:
    return DateSchema()


def array(element: Schema[T]) -> ArraySchema[T]:
    """Schema for a list (or tuple) whose items all match ``element``."""
    _require_schema(element, "array element")
    return ArraySchema(element)


def object(shape: Mapping[str, Schema[Any]]) -> ObjectSchema:
    """
    Schema for a plain dict with the given fields.

    Args:
        shape: Field name -> schema. Iteration order is the check order.

    Raises:
        TypeError: If shape is not a mapping, a key is not a string,
                   or a value is not a schema
    """
    if not isinstance(shape, Mapping):
        raise TypeError(f"object shape must be a mapping, got {_type_name(shape)}")
    for key, field in shape.items():
        if not isinstance(key, str):
            raise TypeError(f"object field names must be str, got {_type_name(key)}")
        _require_schema(field, f"object field {key!r}")
    return ObjectSchema(MappingProxyType(dict(shape)))


def optional(schema: Schema[T]) -> OptionalSchema[T]:
    _require_schema(schema, "optional inner")
    return OptionalSchema(schema)


def defaulted(schema: Schema[T], default: T) -> DefaultedSchema[T]:
    """Use ``default`` whenever the input is None. The default is trusted."""
    _require_schema(schema, "defaulted inner")
    return DefaultedSchema(schema, default)
