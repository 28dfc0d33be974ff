""" Implementation of Maybe in Python."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Generic, TypeVar, Union

A = TypeVar("A")
B = TypeVar("B")


class _Nothing(Enum):
    NOTHING = "Nothing"

    def map(self, f: Callable[[A], B]) -> "_Nothing":
        return Nothing

    def __rshift__(self, m: Callable[[A], "Maybe[B]"]) -> "_Nothing":
        return Nothing

    def __bool__(self) -> bool:
        return False

    def __repr__(self):
        """String representation of Nothing."""
        return "Nothing"

# singleton instance
Nothing: _Nothing = _Nothing.NOTHING


@dataclass(frozen=True)
class Just(Generic[A]):
    a: A

    def map(self, f: Callable[[A], B]) -> "Just[B]":
        return Just(f(self.a))

    def __rshift__(self, m: Callable[[A], Maybe[B]]) -> Maybe[B]:
        """Chains computations by passing the value inside Just to function m."""
        return m(self.a)

    def __bool__(self) -> bool:
        return True

    def __repr__(self):
        """String representation of the Just."""
        return f"Just({self.a!r})"


Maybe = Union[Just[A], _Nothing]


def from_maybe(default: A, m: Maybe[A]) -> A:
    """Extracts the value from a Maybe, or returns a default value."""
    match m:
        case Just(value):
            return value
        case _:
            return default


def is_nothing(m: object) -> bool:
    """True only for the Nothing singleton."""
    return m is Nothing
