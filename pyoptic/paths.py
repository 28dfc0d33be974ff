"""
Lenses derived from a path of keys.

    ab_lens = from_path("a", "b")
    ab_lens({"a": {"b": 3}})       # => 3
    ab_lens({"a": {"b": 3}}, 4)    # => {"a": {"b": 4}}
    ab_lens({})                    # => None
    ab_lens({}, 4)                 # => {"a": {"b": 4}}

Keys go in the order of attribute access (x.a.b), which is the reverse
of compose(b_lens, a_lens).

Two stores share the same lens construction:
    RecordStore walks plain records (dicts, models, dataclasses, tuples...)
    PersistentStore delegates to a collection exposing get_in / set_in
"""
import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Callable, Hashable, Protocol, Sequence, runtime_checkable

from .errors import NotARecordError
from .hashmap import HashMap
from .lens import Lens
from .maybe import Just, Maybe, Nothing, from_maybe
from . import records

Path = tuple[Hashable, ...]

logger = logging.getLogger(__name__)


class PathPolicy(str, Enum):
    """
    What a path write does when a value on the path cannot hold the next key
    """
    PERMISSIVE = "permissive"  # convert it to a dict, scalars to an empty one
    STRICT = "strict"  # raise NotARecordError


@runtime_checkable
class SupportsPathAccess(Protocol):
    """
    A persistent collection addressed by paths
    """
    def get_in(self, path: Sequence[Hashable], default: Any = None) -> Any: ...

    def set_in(self, path: Sequence[Hashable], value: Any) -> Any: ...


def as_path(keys: tuple) -> Path:
    """
    Normalizes variadic keys: a single list or tuple argument is the path.
    """
    if len(keys) == 1 and isinstance(keys[0], (list, tuple)):
        return tuple(keys[0])
    return tuple(keys)


class PathStore(ABC):
    """
    Read and write access to the value at a path inside a structure.
    """

    @abstractmethod
    def lookup(self, value: Any, path: Path) -> Maybe[Any]:
        """Just the value at path, or Nothing if the path does not resolve."""

    @abstractmethod
    def update(self, value: Any, path: Path, focus: Any) -> Any:
        """A new structure with the value at path replaced by focus."""

    def lens(self, path: Path) -> Lens:
        """
        Lens onto the value at path.
        Reading a path that does not resolve gives None.
        """
        path = tuple(path)
        return Lens(
            get=lambda value: from_maybe(None, self.lookup(value, path)),
            put=lambda value, focus: self.update(value, path, focus)
        )


class RecordStore(PathStore):
    """
    Path access over nested records.
    Writes rebuild only the records along the path; every other branch
    of the result is the same object as in the input.
    """

    def __init__(self, policy: PathPolicy = PathPolicy.PERMISSIVE):
        self.policy = PathPolicy(policy)

    def lookup(self, value: Any, path: Path) -> Maybe[Any]:
        current: Maybe[Any] = Just(value)
        for key in path:
            current = current >> (lambda v, k=key: records.lookup(v, k))
        return current

    def _container(self, value: Any, key: Hashable) -> Any:
        if value is None:
            return {}
        if records.can_hold(value, key):
            return value
        if self.policy is PathPolicy.STRICT:
            raise NotARecordError(key, value)
        entries = records.widen(value)
        if entries is None:
            logger.debug("Replacing %s with an empty dict to write key %r",
                         type(value).__name__, key)
            return {}
        logger.debug("Converting %s to a dict to write key %r",
                     type(value).__name__, key)
        return entries

    def update(self, value: Any, path: Path, focus: Any) -> Any:
        spine = []
        current = value
        for key in path:
            container = self._container(current, key)
            spine.append((container, key))
            current = from_maybe(None, records.lookup(container, key))
        for container, key in reversed(spine):
            focus = records.assoc(container, key, focus)
        return focus


class PersistentStore(PathStore):
    """
    Path access over a persistent collection that supports
    get_in(path, default) and set_in(path, value).
    A None structure is replaced by empty() before writing.
    """

    _missing = object()

    def __init__(self, empty: Callable[[], SupportsPathAccess] = HashMap.empty):
        self.empty = empty

    def lookup(self, value: Any, path: Path) -> Maybe[Any]:
        if value is None:
            return Nothing
        found = value.get_in(path, self._missing)
        return Nothing if found is self._missing else Just(found)

    def update(self, value: Any, path: Path, focus: Any) -> Any:
        if value is None:
            value = self.empty()
        return value.set_in(path, focus)


RECORDS = RecordStore()
STRICT_RECORDS = RecordStore(PathPolicy.STRICT)


def from_path(*keys: Hashable, policy: PathPolicy = PathPolicy.PERMISSIVE) -> Lens:
    """
    Create a lens which looks into a deeply nested record.
    Keys can be given one by one or as a single list or tuple.
    """
    store = STRICT_RECORDS if PathPolicy(policy) is PathPolicy.STRICT else RECORDS
    return store.lens(as_path(keys))


def lookup_path(value: Any, *keys: Hashable) -> Maybe[Any]:
    """
    Just the value at the path, or Nothing.
    Unlike reading through from_path, this tells a missing key apart from
    a key holding None.
    """
    return RECORDS.lookup(value, as_path(keys))


def from_path_persistent(
        *keys: Hashable,
        empty: Callable[[], SupportsPathAccess] = HashMap.empty) -> Lens:
    """
    Like from_path, but for persistent collections such as HashMap.
    """
    return PersistentStore(empty).lens(as_path(keys))
