"""
Tests for path lenses.

Tests cover:
- Reading and writing nested dicts, including missing paths
- Variadic and sequence forms of the path
- Structural sharing of untouched branches
- Record shapes: immutabledict, pydantic models, dataclasses,
  named tuples, lists and tuples
- Permissive and strict handling of non-record intermediate values
- lookup_path
- Persistent path lenses over HashMap
"""

from dataclasses import dataclass
from typing import NamedTuple

import pytest
from immutabledict import immutabledict
from pydantic import BaseModel

from pyoptic import (
    HashMap,
    Just,
    NotARecordError,
    Nothing,
    PathPolicy,
    PersistentStore,
    RecordStore,
    from_path,
    from_path_persistent,
    lookup_path,
)


class Point(BaseModel):
    x: int
    y: int


@dataclass(frozen=True)
class Box:
    corner: Point
    label: str


class Pair(NamedTuple):
    left: object
    right: object


# =============================================================================
# Nested dicts
# =============================================================================


class TestFromPath:
    """Tests for from_path over plain dicts."""

    def test_creates_lens_from_path_of_keys(self):
        lens = from_path("a", "b")
        obj = {"a": {"b": 1}}

        assert lens(obj) == 1
        assert lens(obj, 3) == {"a": {"b": 3}}

    def test_sequence_form_is_equivalent(self):
        obj = {"a": {"b": 1}}
        assert from_path(["a", "b"])(obj) == from_path("a", "b")(obj)
        assert from_path(("a", "b"))(obj, 2) == from_path("a", "b")(obj, 2)

    def test_is_safe(self):
        lens = from_path(["a", "b"])

        assert lens({}) is None
        assert lens({}, 3) == {"a": {"b": 3}}

    def test_reads_none_structure(self):
        assert from_path("a")(None) is None

    def test_writes_into_none_structure(self):
        assert from_path("a", "b")(None, 1) == {"a": {"b": 1}}

    def test_read_through_scalar(self):
        assert from_path("a", "b")({"a": 5}) is None

    def test_read_does_not_use_inherited_attributes(self):
        """Only keys owned by the value count, not methods."""
        assert from_path("keys")({}) is None
        assert from_path("a", "real")({"a": 1j}) is None

    def test_empty_path_is_identity(self, nested):
        lens = from_path()
        assert lens(nested) is nested
        assert lens(nested, 4) == 4

    def test_write_does_not_mutate(self, nested):
        before = {"a": {"b": 1, "c": [10, 20]}, "d": {"e": {"f": "deep"}}, "g": 3}
        from_path("a", "b")(nested, 99)
        assert nested == before

    def test_writes_new_key(self, nested):
        result = from_path("d", "e", "new")(nested, 1)
        assert result["d"]["e"] == {"f": "deep", "new": 1}


class TestStructuralSharing:
    """Writes rebuild only the path and keep every other branch."""

    def test_siblings_are_same_objects(self, nested):
        result = from_path("a", "b")(nested, 2)

        assert result is not nested
        assert result["a"] is not nested["a"]
        assert result["d"] is nested["d"]
        assert result["a"]["c"] is nested["a"]["c"]

    def test_deep_write_shares_other_levels(self, nested):
        result = from_path("d", "e", "f")(nested, "changed")

        assert result["a"] is nested["a"]
        assert result["d"]["e"] == {"f": "changed"}


# =============================================================================
# Record shapes
# =============================================================================


class TestRecordShapes:
    """Tests for records other than plain dicts."""

    def test_immutabledict(self):
        obj = immutabledict({"a": immutabledict({"b": 1}), "z": 0})
        lens = from_path("a", "b")

        assert lens(obj) == 1
        result = lens(obj, 2)
        assert isinstance(result, immutabledict)
        assert isinstance(result["a"], immutabledict)
        assert result == {"a": {"b": 2}, "z": 0}
        assert obj["a"]["b"] == 1

    def test_pydantic_model(self):
        box = Box(corner=Point(x=1, y=2), label="origin")
        lens = from_path("corner", "x")

        assert lens(box) == 1
        result = lens(box, 5)
        assert result == Box(corner=Point(x=5, y=2), label="origin")
        assert box.corner.x == 1

    def test_missing_model_field(self):
        assert from_path("z")(Point(x=1, y=2)) is None

    def test_dataclass(self):
        box = Box(corner=Point(x=1, y=2), label="origin")
        result = from_path("label")(box, "moved")

        assert result.label == "moved"
        assert result.corner is box.corner

    def test_named_tuple(self):
        pair = Pair(left={"v": 1}, right={"v": 2})
        lens = from_path("right", "v")

        assert lens(pair) == 2
        result = lens(pair, 3)
        assert isinstance(result, Pair)
        assert result.right == {"v": 3}
        assert result.left is pair.left

    def test_list_index(self, nested):
        lens = from_path("a", "c", 1)

        assert lens(nested) == 20
        result = lens(nested, 21)
        assert result["a"]["c"] == [10, 21]
        assert nested["a"]["c"] == [10, 20]

    def test_list_index_out_of_range_reads_none(self, nested):
        assert from_path("a", "c", 2)(nested) is None
        assert from_path("a", "c", -1)(nested) is None

    def test_list_append_at_length(self, nested):
        result = from_path("a", "c", 2)(nested, 30)
        assert result["a"]["c"] == [10, 20, 30]

    def test_tuple_index(self):
        obj = {"t": (1, 2, 3)}
        result = from_path("t", 0)(obj, 0)
        assert result == {"t": (0, 2, 3)}

    def test_string_is_not_a_record(self):
        assert from_path("s", 0)({"s": "abc"}) is None


# =============================================================================
# Path policies
# =============================================================================


class TestPathPolicy:
    """Tests for writes through values that cannot hold the next key."""

    def test_permissive_replaces_scalar(self):
        lens = from_path("a", "b")
        assert lens({"a": 5, "c": 1}, 3) == {"a": {"b": 3}, "c": 1}

    def test_permissive_keeps_list_items_for_string_key(self):
        lens = from_path("a", "b")
        assert lens({"a": [1, 2]}, 3) == {"a": {0: 1, 1: 2, "b": 3}}

    def test_permissive_keeps_list_items_past_end(self):
        items = [{"v": 1}, {"v": 2}]
        result = from_path("a", 5)({"a": items}, 9)

        assert result == {"a": {0: {"v": 1}, 1: {"v": 2}, 5: 9}}
        assert result["a"][0] is items[0]

    def test_permissive_keeps_model_fields(self):
        result = from_path("p", "z")({"p": Point(x=1, y=2)}, 9)
        assert result == {"p": {"x": 1, "y": 2, "z": 9}}

    def test_permissive_keeps_dataclass_fields(self):
        box = Box(corner=Point(x=1, y=2), label="origin")
        result = from_path("b", "extra")({"b": box}, True)

        assert result["b"]["label"] == "origin"
        assert result["b"]["corner"] is box.corner
        assert result["b"]["extra"] is True

    def test_permissive_keeps_named_tuple_fields(self):
        pair = Pair(left=1, right=2)
        assert from_path("extra")(pair, 3) == {"left": 1, "right": 2, "extra": 3}

    def test_strict_raises_for_record_that_cannot_hold_key(self):
        lens = from_path("a", 5, policy=PathPolicy.STRICT)
        with pytest.raises(NotARecordError):
            lens({"a": [1, 2]}, 9)

    def test_strict_raises(self):
        lens = from_path("a", "b", policy=PathPolicy.STRICT)
        with pytest.raises(NotARecordError) as info:
            lens({"a": 5}, 3)
        assert info.value.key == "b"
        assert info.value.value == 5

    def test_strict_accepts_string_policy(self):
        lens = from_path("a", "b", policy="strict")
        with pytest.raises(NotARecordError):
            lens({"a": "text"}, 3)

    def test_strict_still_fills_missing(self):
        lens = from_path("a", "b", policy=PathPolicy.STRICT)
        assert lens({}, 3) == {"a": {"b": 3}}

    def test_strict_reads_are_safe(self):
        lens = from_path("a", "b", policy=PathPolicy.STRICT)
        assert lens({"a": 5}) is None


class TestLookupPath:
    """Tests for lookup_path, which tells missing from None."""

    def test_present(self, nested):
        assert lookup_path(nested, "a", "b") == Just(1)

    def test_present_none(self):
        assert lookup_path({"a": None}, "a") == Just(None)

    def test_missing(self):
        assert lookup_path({"a": None}, "a", "b") is Nothing
        assert lookup_path({}, ["x"]) is Nothing

    def test_store_lookup(self):
        assert RecordStore().lookup({"a": [5]}, ("a", 0)) == Just(5)


# =============================================================================
# Persistent collections
# =============================================================================


class TestFromPathPersistent:
    """Tests for path lenses over collections with get_in / set_in."""

    def test_reads_and_writes_hashmap(self):
        obj = HashMap.from_nested({"a": {"b": 1}, "z": {"q": 0}})
        lens = from_path_persistent("a", "b")

        assert lens(obj) == 1
        result = lens(obj, 2)
        assert isinstance(result, HashMap)
        assert result.to_dict() == {"a": {"b": 2}, "z": {"q": 0}}
        assert result["z"] is obj["z"]
        assert obj.to_dict()["a"]["b"] == 1

    def test_missing_path_reads_none(self):
        assert from_path_persistent("a", "b")(HashMap.empty()) is None

    def test_none_structure(self):
        lens = from_path_persistent("a")
        assert lens(None) is None
        assert lens(None, 1) == HashMap({"a": 1})

    def test_custom_empty(self):
        lens = from_path_persistent(["a"], empty=lambda: HashMap({"seed": 0}))
        assert lens(None, 1).to_dict() == {"seed": 0, "a": 1}

    def test_store_distinguishes_stored_none(self):
        store = PersistentStore()
        assert store.lookup(HashMap({"a": None}), ("a",)) == Just(None)
        assert store.lookup(HashMap({}), ("a",)) is Nothing

    def test_same_lens_construction_as_records(self):
        """Both stores derive their lenses the same way."""
        path = ("a", "b")
        record_lens = RecordStore().lens(path)
        persistent_lens = PersistentStore().lens(path)

        plain = record_lens({}, 1)
        persistent = persistent_lens(HashMap.empty(), 1)
        assert persistent.to_dict() == plain
