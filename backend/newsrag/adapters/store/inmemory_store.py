# newsrag/adapters/store/inmemory_store.py
"""
In-Memory Key-Value Store for testing and local development
"""
import time
from fnmatch import fnmatchcase
from typing import Callable, Dict, List, Optional, Tuple


class InMemoryKeyValueStore:
    """
    Dict-backed TTL store

    Expiry is evaluated lazily against an injectable clock, so tests can
    move time forward without sleeping.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._data: Dict[str, Tuple[str, float]] = {}

    def get(self, key: str) -> Optional[str]:
        entry = self._data.get(key)
        if entry is None:
            return None
        value, expires_at = entry
        if self._clock() >= expires_at:
            self._data.pop(key, None)
            return None
        return value

    def set(self, key: str, value: str, ttl_seconds: int) -> None:
        self._data[key] = (value, self._clock() + ttl_seconds)

    def keys(self, pattern: str = "*") -> List[str]:
        now = self._clock()
        return [
            key for key, (_, expires_at) in list(self._data.items())
            if expires_at > now and fnmatchcase(key, pattern)
        ]

    def ttl(self, key: str) -> Optional[float]:
        """Seconds left before expiry, or None if the key is not live"""
        if self.get(key) is None:
            return None
        return self._data[key][1] - self._clock()

    def clear(self):
        """Clear all keys"""
        self._data.clear()
