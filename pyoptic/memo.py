"""
One-slot memoization of a lens's read function
"""
import logging
from threading import RLock
from typing import Callable, Generic, TypeVar

from .lens import Lens
from .maybe import Just, Maybe, Nothing

S = TypeVar("S")
T = TypeVar("T")

logger = logging.getLogger(__name__)


class PeekCache(Generic[S, T]):
    """
    Wraps a read function and remembers its last input and output.

    The input is compared by identity, not equality, so a structure that
    is mutated in place after being read will return a stale result.
    Only use it on data that is never mutated.
    """

    def __init__(self, peek: Callable[[S], T]):
        self._peek = peek
        self._lock = RLock()
        self._slot: Maybe[tuple[S, T]] = Nothing
        self.hits = 0
        self.misses = 0

    def __call__(self, value: S) -> T:
        with self._lock:
            match self._slot:
                case Just((cached_input, cached_output)) if cached_input is value:
                    self.hits += 1
                    logger.debug("Peek cache hit for %s", type(value).__name__)
                    return cached_output
            self.misses += 1
            output = self._peek(value)
            self._slot = Just((value, output))
            return output

    @property
    def cached_input(self) -> Maybe[S]:
        """Just the input currently cached, or Nothing."""
        return self._slot.map(lambda entry: entry[0])

    def clear(self) -> None:
        """Empties the slot."""
        with self._lock:
            self._slot = Nothing


def create_lens_memoized(peek: Callable[[S], T],
                         put: Callable[[S, T], S] | None = None) -> Lens[S, T]:
    """
    The same as create_lens, however it caches one invocation of the
    read function. The write function is not cached.
    The cache is reachable as lens.get.
    """
    return Lens(PeekCache(peek), put)
