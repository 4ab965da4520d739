"""
Context manager for validation configuration (e.g., depth limit).
"""

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Optional

# None means unlimited
_max_depth: ContextVar[Optional[int]] = ContextVar("max_depth", default=None)

# Number of array/object levels entered by the running validation
_depth: ContextVar[int] = ContextVar("depth", default=0)


def current_max_depth() -> Optional[int]:
    """Return the active nesting limit, or None if unlimited."""
    return _max_depth.get()


@contextmanager
def validation_context(*, max_depth: Optional[int] = None) -> Iterator[None]:
    """
    Context manager for validation configuration.

    Args:
        max_depth: Maximum number of nested array/object levels a single
                   validation may enter. Deeper input fails with a ParseError
                   ("Maximum depth exceeded") instead of recursing further.
                   None (default) leaves nesting unlimited.

    Example:
        from oxido import array, number, validation_context

        nested = array(array(number()))

        with validation_context(max_depth=1):
            nested.validate([[1]])  # Err: ("0",) Maximum depth exceeded

        nested.validate([[1]])  # Ok([[1]])
    """
    if max_depth is not None:
        if isinstance(max_depth, bool) or not isinstance(max_depth, int):
            raise TypeError(
                f"max_depth must be an int or None, got {type(max_depth).__name__}"
            )
        if max_depth < 1:
            raise ValueError(f"max_depth must be >= 1, got {max_depth}")

    token = _max_depth.set(max_depth)
    try:
        yield
    finally:
        _max_depth.reset(token)


@contextmanager
def descend() -> Iterator[bool]:
    """
    Enter one array/object level for the duration of the block.

    Yields True when the new level is beyond the active ``max_depth``.
    """
    depth = _depth.get() + 1
    token = _depth.set(depth)
    try:
        limit = _max_depth.get()
        yield limit is not None and depth > limit
    finally:
        _depth.reset(token)
