"""
Exceptions raised by lenses and their combinators
"""
from typing import Any, Hashable


class LensError(Exception):
    """
    Base class for all lens errors
    """


class ReadOnlyLensError(LensError, TypeError):
    """
    Raised when a value is written through a lens that has no put function
    """


# Older name for the same condition
ReadOnlyWriteError = ReadOnlyLensError


class EmptyCompositionError(LensError, ValueError):
    """
    Raised when composing zero lenses or zero reducers
    """


class NotARecordError(LensError, TypeError):
    """
    Raised by a strict path lens when a write would have to replace
    a value that cannot hold the next key of the path
    """

    def __init__(self, key: Hashable, value: Any):
        self.key = key
        self.value = value
        super().__init__(
            f"Cannot write key {key!r} into value of type "
            f"{type(value).__name__}")
