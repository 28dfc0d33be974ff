""" imports for pyoptic """
from .errors import LensError, ReadOnlyLensError, ReadOnlyWriteError, \
    EmptyCompositionError, NotARecordError
from .hashmap import HashMap
from .lens import Lens, ComposedLens, create_lens, view, set_, lift, over, \
    map, compose, combine_lenses  # pylint:disable=redefined-builtin
from .log import configure_logging
from .maybe import Maybe, Just, Nothing, from_maybe, is_nothing
from .memo import PeekCache, create_lens_memoized
from .paths import PathPolicy, PathStore, RecordStore, PersistentStore, \
    SupportsPathAccess, from_path, from_path_persistent, lookup_path
from .reducer import Reducer, Update, event_type, init_event_matcher, \
    is_init_event, lift_reducer, compose_lens_reducers
