"""In-memory response cache with time-based expiry."""

import time
from dataclasses import dataclass
from typing import Any, Callable

DEFAULT_TTL_SECONDS = 10 * 60


@dataclass
class CacheEntry:
    """Cached JSON payload and the clock reading when it was stored."""

    key: str
    payload: Any
    stored_at: float


class ResponseCache:
    """
    Memoizes parsed JSON bodies by request signature.
    Entries older than ttl are ignored on lookup but never removed; there is
    no size bound. The clock is injectable so expiry can be tested.
    """

    def __init__(
        self,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, key: str) -> CacheEntry | None:
        """Return the live entry for key, or None when absent or stale."""
        entry = self._entries.get(key)
        if entry is None:
            return None
        if self._clock() - entry.stored_at >= self.ttl_seconds:
            return None
        return entry

    def set(self, key: str, payload: Any) -> CacheEntry:
        """Store payload under key, replacing any previous entry."""
        entry = CacheEntry(key=key, payload=payload, stored_at=self._clock())
        self._entries[key] = entry
        return entry

    def clear(self) -> None:
        """Drop every entry."""
        self._entries.clear()
