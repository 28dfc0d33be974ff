"""
Reducers built from lenses.

A Reducer is a function that has a state and an event as arguments
and returns an updated state:
    new_state = reducer(state, event)
"""
import logging
from collections.abc import Callable, Mapping
from functools import reduce
from typing import Any

from .errors import EmptyCompositionError
from .maybe import Nothing

Reducer = Callable[[Any, Any], Any]
# An Update computes the new focus of the write lens from the focus of
# the read lens, the current focus of the write lens and the event
Update = Callable[[Any, Any, Any], Any]

logger = logging.getLogger(__name__)


def event_type(event: Any) -> Any:
    """
    The type of an event:
        event["type"] for mappings
        event.type for objects with a type attribute
        the event itself otherwise
    """
    if isinstance(event, Mapping):
        return event.get("type")
    return getattr(event, "type", event)


def init_event_matcher(*prefixes: str) -> Callable[[Any], bool]:
    """
    Builds a predicate recognizing initialization events,
    i.e. events whose type is a string starting with one of prefixes
    """
    def is_init(event: Any) -> bool:
        kind = event_type(event)
        return isinstance(kind, str) and kind.startswith(prefixes)
    return is_init


is_init_event = init_event_matcher("@@INIT", "@@redux/INIT")


def lift_reducer(read_lens: Callable, write_lens: Callable, update: Update,
                 is_init: Callable[[Any], bool] = is_init_event) -> Reducer:
    """
    Turns two lenses and an update function into a reducer.
    The reducer computes
        update(read_lens(state), write_lens(state), event)
    and writes the result through write_lens.
    On an initialization event the read lens is not called at all and
        update receives Nothing in its place, so that it can supply
        the initial value itself.
    """
    def lens_reducer(state: Any, event: Any) -> Any:
        if is_init(event):
            logger.debug("Initialization event %r, read lens skipped",
                         event_type(event))
            read = Nothing
        else:
            read = read_lens(state)
        return write_lens(state, update(read, write_lens(state), event))
    return lens_reducer


def compose_lens_reducers(*reducers: Reducer) -> Reducer:
    """
    Combines multiple reducers into one.
    The reducers run right to left, each one receiving the state
        returned by the one after it in the argument list,
        and all receiving the same event.
    """
    if not reducers:
        raise EmptyCompositionError(
            "compose_lens_reducers requires at least one reducer")

    def composed_reducer(state: Any, event: Any) -> Any:
        return reduce(lambda s, r: r(s, event), reversed(reducers), state)
    return composed_reducer
