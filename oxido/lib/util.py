"""
Small helpers shared by the containers and the schema engine.
"""

from typing import Any, NoReturn

from ..errors import UnwrapError


def is_nil(value: Any) -> bool:
    """Check if a value is absent."""
    return value is None


def is_present(value: Any) -> bool:
    return not is_nil(value)


def is_plain_object(value: Any) -> bool:
    """
    Check if a value is a plain keyed record.

    Only values whose type is exactly ``dict`` qualify. Lists, dates,
    ``dict`` subclasses (``OrderedDict``, ``defaultdict``) and arbitrary
    class instances are rejected even when they behave like mappings.
    """
    return type(value) is dict


def raise_unwrap(message: str, value: Any = None) -> NoReturn:
    """Raise an UnwrapError for a wrong-variant access."""
    raise UnwrapError(message, value)
