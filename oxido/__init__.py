"""
oxido - Option/Result containers and a fail-fast schema validation engine.

Usage:
    from oxido import Err, Ok, array, number, object, string

    schema = object({"name": string(), "scores": array(number())})

    match schema.validate(data):
        case Ok(value):
            ...
        case Err(error):
            print(error)  # e.g. "scores.2: Expecting number"
"""

from .context import current_max_depth, validation_context
from .errors import UnwrapError
from .option import NOTHING, Nothing, Option, Some, from_nullable
from .result import Err, Ok, Result
from .schema import (
    ArraySchema,
    BooleanSchema,
    DateSchema,
    DefaultedSchema,
    NumberSchema,
    ObjectSchema,
    OptionalSchema,
    ParseError,
    Schema,
    StringSchema,
    array,
    boolean,
    date,
    defaulted,
    number,
    object,
    optional,
    string,
)

__all__ = [
    # Option
    "Option",
    "Some",
    "Nothing",
    "NOTHING",
    "from_nullable",
    # Result
    "Result",
    "Ok",
    "Err",
    "UnwrapError",
    # Schema
    "Schema",
    "ParseError",
    "string",
    "number",
    "boolean",
    "date",
    "array",
    "object",
    "optional",
    "defaulted",
    "StringSchema",
    "NumberSchema",
    "BooleanSchema",
    "DateSchema",
    "ArraySchema",
    "ObjectSchema",
    "OptionalSchema",
    "DefaultedSchema",
    # Configuration
    "validation_context",
    "current_max_depth",
]
