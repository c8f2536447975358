"""
Single-slot cache for the table index.

Owned by a TableApp session. Mutating calls clear it before they return, so
the next read fetches fresh state.
"""

import logging
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")

logger = logging.getLogger(__name__)


class TableCache(Generic[T]):
    """Holds at most one value, produced on demand by a caller-supplied fetch."""

    def __init__(self) -> None:
        self._value: Optional[T] = None

    @property
    def is_populated(self) -> bool:
        return self._value is not None

    def get_or_populate(self, fetch_fn: Callable[[], T]) -> T:
        """Return the cached value, calling ``fetch_fn`` only on a miss.

        If ``fetch_fn`` raises, the cache stays empty.
        """
        if self._value is None:
            logger.debug("Table cache miss; fetching")
            self._value = fetch_fn()
        return self._value

    def invalidate(self) -> None:
        if self._value is not None:
            logger.debug("Table cache invalidated")
        self._value = None
