"""
Exceptions raised by oxido.

Validation failures are never raised: they travel as ParseError values inside
Err. The exceptions here are reserved for programming errors.
"""

from typing import Any


class UnwrapError(RuntimeError):
    """
    Raised when a container is unwrapped as the wrong variant.

    E.g. calling ``unwrap()`` on an ``Err`` or ``unwrap_err()`` on an ``Ok``.
    The contents of the container are kept on ``value`` for debugging.
    """

    def __init__(self, message: str, value: Any = None):
        super().__init__(message)
        self.value = value
