import threading
from typing import Optional

from .schemas import FeedResponse


class FeedCache:
    """Single-slot cache holding one day's feed.

    Storing a new day replaces the previous entry; nothing else is ever
    evicted. Callers share the stored response object, so in-place
    enrichment after :meth:`store` is visible to later readers.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._date: Optional[str] = None
        self._data: Optional[FeedResponse] = None

    @property
    def date(self) -> Optional[str]:
        with self._lock:
            return self._date

    def get(self, day: str) -> Optional[FeedResponse]:
        with self._lock:
            if self._data is not None and self._date == day:
                return self._data
            return None

    def store(self, day: str, data: FeedResponse) -> None:
        with self._lock:
            self._date = day
            self._data = data

    def clear(self) -> None:
        with self._lock:
            self._date = None
            self._data = None

    def __repr__(self) -> str:
        return f"<FeedCache {self._date}>"
