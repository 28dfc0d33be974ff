"""
Single-level access to record-shaped values.

A record is any value that can own a key and be rebuilt with one key
replaced:
    mappings (dict, immutabledict, other Mapping types)
    pydantic models, by field name
    dataclass instances, by field name
    named tuples, by field name
    lists, tuples and other mutable sequences, by integer index

Strings and bytes are scalars even though they are sequences.
Rebuilding is always shallow: every other field of the new record is the
same object as in the old one.
"""
import copy
import operator
from collections.abc import Mapping, MutableMapping, MutableSequence
from dataclasses import fields, is_dataclass, replace
from typing import Any, Hashable

from immutabledict import immutabledict
from pydantic import BaseModel

from .maybe import Just, Maybe, Nothing


def _index(key: Hashable) -> int | None:
    """Returns key as a sequence index, or None if it is not integer-like."""
    if isinstance(key, bool):
        return None
    try:
        return operator.index(key)
    except TypeError:
        return None


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (tuple, MutableSequence)) \
        and not hasattr(value, "_fields")


def _field_names(value: Any) -> tuple[str, ...]:
    """Names of the declared fields of a model, dataclass or named tuple."""
    if isinstance(value, BaseModel):
        return tuple(type(value).model_fields)
    if is_dataclass(value) and not isinstance(value, type):
        return tuple(f.name for f in fields(value))
    if isinstance(value, tuple) and hasattr(value, "_fields"):
        return value._fields
    return ()


def lookup(value: Any, key: Hashable) -> Maybe[Any]:
    """
    Returns Just the value owned by `value` at `key`, or Nothing.
    Never raises for a missing key or a non-record value.
    """
    if value is None:
        return Nothing
    if isinstance(value, Mapping):
        return Just(value[key]) if key in value else Nothing
    if key in _field_names(value):
        return Just(getattr(value, key))
    if _is_sequence(value):
        index = _index(key)
        if index is not None and 0 <= index < len(value):
            return Just(value[index])
    return Nothing


def can_hold(value: Any, key: Hashable) -> bool:
    """
    True if `value` can be rebuilt with `key` set.
    A sequence can hold any index from 0 up to and including its length.
    """
    if isinstance(value, Mapping):
        return True
    if key in _field_names(value):
        return True
    if _is_sequence(value):
        index = _index(key)
        return index is not None and 0 <= index <= len(value)
    return False


def widen(value: Any) -> dict | None:
    """
    Returns the entries of a record as a new dict, or None for a scalar.
    Used when a record has to take a key it cannot hold:
        sequences are keyed by index
        models, dataclasses and named tuples by field name
    The values are the same objects as in the record.
    """
    if isinstance(value, Mapping):
        return dict(value)
    names = _field_names(value)
    if names:
        return {name: getattr(value, name) for name in names}
    if _is_sequence(value):
        return dict(enumerate(value))
    return None


def assoc(record: Any, key: Hashable, value: Any) -> Any:
    """
    Returns a shallow copy of `record` with `key` set to `value`.
    The caller is expected to have checked can_hold(record, key).
    """
    if isinstance(record, immutabledict):
        return immutabledict({**record, key: value})
    if isinstance(record, MutableMapping):
        new_record = copy.copy(record)
        new_record[key] = value
        return new_record
    if isinstance(record, Mapping):
        return type(record)({**record, key: value})
    if isinstance(record, BaseModel):
        return record.model_copy(update={key: value})
    if is_dataclass(record):
        return replace(record, **{key: value})
    if hasattr(record, "_replace"):
        return record._replace(**{key: value})
    index = _index(key)
    if isinstance(record, tuple):
        return record[:index] + (value,) + record[index + 1:]
    new_seq = copy.copy(record)
    if index == len(new_seq):
        new_seq.append(value)
    else:
        new_seq[index] = value
    return new_seq
