"""In-process memo that holds one value per calendar day."""

from __future__ import annotations

import threading
from concurrent.futures import Future
from datetime import date, datetime
from typing import Callable, Dict, Generic, Optional, TypeVar

from cnb_rates.utils.dates import truncate_to_day
from cnb_rates.utils.logger import get_logger

LOGGER = get_logger(__name__)

T = TypeVar("T")


class DailyCache(Generic[T]):
    """Get-or-compute store keyed by day.

    The first caller for a missing day runs the fill function while concurrent
    callers for the same day block on that in-flight result. Successful values
    are kept for the lifetime of the cache. A failed fill is raised to every
    caller waiting on it and leaves the day empty, so the next call retries.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._entries: Dict[date, Future[T]] = {}

    def get_or_fetch(self, day: date | datetime, fill: Callable[[], T]) -> T:
        key = truncate_to_day(day)
        with self._lock:
            future = self._entries.get(key)
            owner = future is None
            if owner:
                future = Future()
                self._entries[key] = future

        if not owner:
            if future.done():
                LOGGER.debug("Cache hit for %s", key)
            else:
                LOGGER.debug("Waiting for in-flight fill of %s", key)
            return future.result()

        LOGGER.info("Filling cache entry for %s", key)
        try:
            value = fill()
        except BaseException as exc:
            with self._lock:
                if self._entries.get(key) is future:
                    del self._entries[key]
            future.set_exception(exc)
            raise
        future.set_result(value)
        return value

    def peek(self, day: date | datetime) -> Optional[T]:
        """Return the stored value for ``day`` without filling or waiting."""

        with self._lock:
            future = self._entries.get(truncate_to_day(day))
        if future is None or not future.done() or future.exception() is not None:
            return None
        return future.result()

    def invalidate(self, day: date | datetime) -> None:
        with self._lock:
            self._entries.pop(truncate_to_day(day), None)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __contains__(self, day: object) -> bool:
        if not isinstance(day, date):
            return False
        return self.peek(day) is not None

    def __len__(self) -> int:
        with self._lock:
            return sum(
                1
                for future in self._entries.values()
                if future.done() and future.exception() is None
            )


__all__ = ["DailyCache"]
