"""In-memory response cache with a fixed time-to-live."""

import time
from dataclasses import dataclass
from typing import Any, Callable, Dict

DEFAULT_TTL = 300.0

# Returned by get() for absent keys when passed as the default
MISSING = object()


@dataclass
class CacheEntry:
    value: Any
    expires_at: float


class TTLCache:
    """
    Process-local key/value store where every entry expires after the same TTL.

    Expired entries are removed the first time they are read; there is no
    background sweep and no size limit. Intended for use from a single event
    loop: concurrent writers to the same key simply overwrite each other.
    """

    def __init__(self, ttl: float = DEFAULT_TTL, clock: Callable[[], float] = time.monotonic):
        self.ttl = ttl
        self._clock = clock
        self._entries: Dict[str, CacheEntry] = {}

    def get(self, key: str, default: Any = None) -> Any:
        """
        Look up a cached value.

        Args:
            key: Request path including its query string
            default: Value to return when the key is missing or expired

        Returns:
            The stored value, or default if missing or expired
        """
        entry = self._entries.get(key)
        if entry is None:
            return default
        if self._clock() >= entry.expires_at:
            del self._entries[key]
            return default
        return entry.value

    def set(self, key: str, value: Any) -> Any:
        """Store a value under key and return it unchanged."""
        self._entries[key] = CacheEntry(value=value, expires_at=self._clock() + self.ttl)
        return value

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: str) -> bool:
        # Raw membership, expired entries included
        return key in self._entries
