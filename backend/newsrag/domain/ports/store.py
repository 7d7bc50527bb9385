# newsrag/domain/ports/store.py

"""
Key-Value Store Port - Interface for TTL-aware persistence

Both the session store and the cache layer are built on this contract.
"""

from typing import List, Optional, Protocol


class IKeyValueStore(Protocol):
    """
    Interface for a string key-value store with per-key expiry

    Implementations must raise StoreUnavailable on connectivity or
    backend failures instead of returning empty data.
    """

    def get(self, key: str) -> Optional[str]:
        """
        Read a value

        Args:
            key: Opaque string key

        Returns:
            Stored string, or None if the key is missing or expired

        Note:
            Reading never extends the key's TTL.
        """
        ...

    def set(self, key: str, value: str, ttl_seconds: int) -> None:
        """
        Write a value with an expiry

        Args:
            key: Opaque string key
            value: String payload (replaces any previous value)
            ttl_seconds: Seconds until expiry, counted from this write

        Raises:
            StoreUnavailable: If the store cannot be written
        """
        ...

    def keys(self, pattern: str = "*") -> List[str]:
        """
        List live keys matching a glob pattern

        Args:
            pattern: Glob pattern (e.g. "*", "embed:*")

        Returns:
            Matching keys in no particular order
        """
        ...
