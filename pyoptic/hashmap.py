"""Implements an immutable, nested HashMap with path access."""
from __future__ import annotations

from collections.abc import Hashable, Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Callable, Iterator, ItemsView, KeysView, ValuesView, TypeVar, Self, Generic

from .maybe import Just, Maybe, Nothing

K = TypeVar("K")
A = TypeVar("A")
B = TypeVar("B")


@dataclass(frozen=True)
class HashMap(Generic[K, A]):
    """
    Represents an immutable HashMap backed by a Python dict.
    Values may themselves be HashMaps, addressed with get_in / set_in.
    Every update returns a new HashMap that shares all untouched values.
    """

    data: Mapping[K, A]

    def __iter__(self) -> Iterator[K]:
        """Iterates over keys."""
        return iter(self.data)

    def __len__(self) -> int:
        """Returns the number of entries in the HashMap."""
        return len(self.data)

    def __getitem__(self, key: K) -> A:
        """Returns the value associated with the given key."""
        return self.data[key]

    def __contains__(self, key: K) -> bool:
        """Returns True if the key exists in the HashMap."""
        return key in self.data

    def items(self) -> ItemsView[K, A]:
        """Returns a view of the HashMap's items."""
        return self.data.items()

    def keys(self) -> KeysView[K]:
        """Returns a view of the HashMap's keys."""
        return self.data.keys()

    def values(self) -> ValuesView[A]:
        """Returns a view of the HashMap's values."""
        return self.data.values()

    def get(self, key: K, default: A | None = None) -> A | None:
        """Returns the value for key if present, otherwise default."""
        return self.data.get(key, default)

    def lookup(self, key: K) -> Maybe[A]:
        """Returns Just the value for key, or Nothing."""
        return Just(self.data[key]) if key in self.data else Nothing

    @classmethod
    def make(cls, data: Mapping[K, A]) -> HashMap[K, A]:
        """Creates a new instance of HashMap with a copy of the mapping."""
        return cls(dict(data))

    @classmethod
    def empty(cls) -> HashMap[K, A]:
        """Creates an empty HashMap."""
        return cls({})

    @classmethod
    def from_nested(cls, data: Mapping) -> HashMap:
        """
        Builds a HashMap from nested mappings,
        converting every inner mapping into a HashMap as well.
        """
        return cls({k: cls.from_nested(v) if isinstance(v, Mapping) else v
                    for k, v in data.items()})

    def to_dict(self) -> dict:
        """Converts back to nested plain dicts."""
        return {k: v.to_dict() if isinstance(v, HashMap) else v
                for k, v in self.data.items()}

    def union(self: Self, other: HashMap[K, A]) -> HashMap[K, A]:
        """Left-biased union of two HashMaps."""
        if not other.data:
            return self
        if not self.data:
            return other
        data = dict(other.data)
        data.update(self.data)
        return self.__class__(data)

    def set(self: Self, key: K, value: A) -> Self:
        """Returns a new HashMap with the key set to the given value."""
        new_data = dict(self.data)
        new_data[key] = value
        return self.__class__(new_data)

    def delete(self: Self, key: K) -> Self:
        """Returns a new HashMap with the key removed (if present)."""
        if key not in self.data:
            return self
        new_data = dict(self.data)
        del new_data[key]
        return self.__class__(new_data)

    def map(self: Self, f: Callable[[A], B]) -> HashMap[K, B]:
        """Maps a function over values while preserving keys."""
        return HashMap({k: f(v) for k, v in self.data.items()})

    def get_in(self, path: Iterable[Hashable], default: Any = None) -> Any:
        """
        Follows path through nested HashMaps.
        Returns default as soon as a key is missing or a value on the way
        is not a HashMap.
        """
        value: Any = self
        for key in path:
            if not isinstance(value, HashMap) or key not in value:
                return default
            value = value[key]
        return value

    def set_in(self: Self, path: Sequence[Hashable], value: Any) -> Any:
        """
        Returns a new HashMap with the value at path replaced.
        Missing or non-HashMap intermediate values become empty HashMaps.
        An empty path returns value itself.
        """
        if not path:
            return value
        key, rest = path[0], path[1:]
        child = self.data.get(key)
        if not isinstance(child, HashMap):
            child = self.empty()
        return self.set(key, child.set_in(rest, value))

    def __repr__(self) -> str:
        """String representation of the HashMap."""
        return f"HashMap({dict(self.data)})"

    def __eq__(self, other) -> bool:
        """Equality check for HashMap."""
        return isinstance(other, HashMap) and self.data == other.data
