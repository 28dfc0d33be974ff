"""
Lenses: composable accessor/updater pairs over immutable structures.

A lens is called with one argument to read its focus and with two
arguments to write a new focus:

    a_lens = create_lens(lambda s: s["a"], lambda s, a: {**s, "a": a})
    a_lens({"a": 1})        # => 1
    a_lens({"a": 1}, 2)     # => {"a": 2}

Dispatch counts the arguments, so a_lens(s, None) writes None.
"""
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from functools import reduce
from typing import Any, Callable, Generic, TypeVar

from .errors import EmptyCompositionError, ReadOnlyLensError
from .maybe import from_maybe
from .records import lookup

S = TypeVar("S")  # whole structure
T = TypeVar("T")  # focused value

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Lens(Generic[S, T]):
    """
    Allows for focused access and modification of a value
    within a larger structure.
    """
    get: Callable[[S], T]  # function to read the focus
    put: Callable[[S, T], S] | None = None  # function to write the focus

    @property
    def read_only(self) -> bool:
        """True if the lens cannot write."""
        return self.put is None

    def peek(self, value: S) -> T:
        """Returns the focus of value."""
        return self.get(value)

    def set(self, value: S, focus: T) -> S:
        """Returns a copy of value with its focus replaced."""
        if self.put is None:
            logger.debug("Rejected write through read-only lens %r", self)
            raise ReadOnlyLensError("Cannot write through a read-only lens")
        return self.put(value, focus)

    def __call__(self, value: S, *focus: T) -> S | T:
        match focus:
            case ():
                return self.peek(value)
            case (new_focus,):
                return self.set(value, new_focus)
            case _:
                raise TypeError(
                    f"A lens takes 1 or 2 arguments ({len(focus) + 1} given)")

    def __matmul__(self, other: Callable) -> "Lens":
        """self @ other looks through other first, then through self."""
        return compose(self, other)

    def __rmatmul__(self, other: Callable) -> "Lens":
        """other @ self for a plain callable following the lens convention."""
        return compose(other, self)


def create_lens(peek: Callable[[S], T],
                put: Callable[[S, T], S] | None = None) -> Lens[S, T]:
    """
    Create a lens from a read function and an optional write function.
    Without a write function the lens is read-only.
    """
    return Lens(peek, put)


def _is_read_only(l: Callable) -> bool:
    return isinstance(l, Lens) and l.read_only


# --- Applying functions through lenses ---

def view(l: Callable[[S], T], value: S) -> T:
    """
    Get the focus of value.
    """
    return l(value)


def set_(l: Callable[[S, T], S], value: S, focus: T) -> S:
    """
    Set the focus of value.
    """
    return l(value, focus)


def lift(l: Callable, f: Callable[..., T]) -> Callable[..., S]:
    """
    "Lift" f into the world of lens l.
    If l is a lens from S to T and f is a function from T to T,
        then lift(l, f) is a function from S to S.
    Extra arguments of the lifted function are passed on to f,
        which is how a reducer receives its action:
            lift(a_lens, lambda a, action: a + action["value"])
    """
    def lifted(value: S, *args, **kwargs) -> S:
        return l(value, f(l(value), *args, **kwargs))
    return lifted


def over(l: Callable, f: Callable[..., T], value: S, *args, **kwargs) -> S:
    """
    Modify the focus of value using a function.
    Equivalent to lifting f and then applying it.
    """
    return lift(l, f)(value, *args, **kwargs)


map = over  # pylint: disable=redefined-builtin


# --- Composition ---

@dataclass(frozen=True)
class ComposedLens(Lens):
    """
    A chain of lenses applied right to left.
    The chain is kept flat, so grouping of compose calls does not matter.
    """
    lenses: tuple[Callable, ...] = field(default=())


def compose(*lenses: Callable) -> Lens:
    """
    Compose a sequence of lenses, from right to left.
    compose(c_lens, b_lens, a_lens) reads like x.a.b.c:
        the last lens is applied to the structure first.
    A single lens is returned as is.
    """
    if not lenses:
        raise EmptyCompositionError("compose requires at least one lens")
    if len(lenses) == 1:
        return lenses[0]

    chain: tuple[Callable, ...] = reduce(
        lambda acc, l: acc + (l.lenses if isinstance(l, ComposedLens) else (l,)),
        lenses,
        ())

    def peek(value):
        for l in reversed(chain):
            value = l(value)
        return value

    def put(value, focus):
        # structures seen by chain[1:], innermost last
        outer = [value]
        for l in reversed(chain[1:]):
            outer.append(l(outer[-1]))
        for l, structure in zip(chain, reversed(outer)):
            focus = l(structure, focus)
        return focus

    read_only = any(_is_read_only(l) for l in chain)
    return ComposedLens(peek, None if read_only else put, chain)


# --- Combining independent lenses ---

def combine_lenses(lenses: Mapping[str, Callable]) -> Lens:
    """
    Given a mapping of lenses, creates a lens whose focus is a dict with
    the same keys, holding the focus of each lens.
    The lenses should not overlap for this to behave sensibly.
    Example:
        l = combine_lenses({"a": from_path("hello"),
                            "b": from_path("goodbye", "farewell")})
        l({"hello": 1, "goodbye": {"farewell": 2}})
        => {"a": 1, "b": 2}
        l({"hello": 1, "goodbye": {"farewell": 2}}, {"a": 3, "b": 4})
        => {"hello": 3, "goodbye": {"farewell": 4}}
    The written focus may be a mapping or any record (model, dataclass,
        named tuple). Every lens is written; a key missing from the
        focus writes None.
    """
    members = dict(lenses)

    def peek(value) -> dict[str, Any]:
        return {k: l(value) for k, l in members.items()}

    def put(value, focus: Any):
        return reduce(
            lambda v, k: members[k](v, from_maybe(None, lookup(focus, k))),
            members,
            value)

    read_only = any(_is_read_only(l) for l in members.values())
    return Lens(peek, None if read_only else put)
