# newsrag/domain/services/cache.py

"""
Cache Layer - TTL cache for derived artifacts

Values are always JSON-encoded, strings included, so every value
reads back with the type it was written with.
"""

import json
import logging
from typing import Any, Optional

from newsrag.domain.fingerprint import fingerprint
from newsrag.domain.ports.store import IKeyValueStore

logger = logging.getLogger(__name__)

EMBED_PREFIX = "embed:"
RETRIEVE_PREFIX = "retrieve:"

EMBEDDING_TTL = 60 * 60 * 24
RETRIEVAL_TTL = 60 * 5


def embedding_key(text: str) -> str:
    return f"{EMBED_PREFIX}{fingerprint(text)}"


def retrieval_key(query: str, k: int) -> str:
    return f"{RETRIEVE_PREFIX}{fingerprint(query)}:k{k}"


class Cache:
    """
    JSON cache over the shared key-value store

    Reads do not refresh TTL.
    """

    def __init__(self, store: IKeyValueStore):
        self._store = store

    def set(self, key: str, value: Any, ttl_seconds: int) -> None:
        """
        Store a JSON-serializable value

        Args:
            key: Cache key (should carry a cache namespace prefix)
            value: Any JSON-serializable value
            ttl_seconds: Expiry in seconds
        """
        self._store.set(key, json.dumps(value), ttl_seconds)

    def get(self, key: str) -> Optional[Any]:
        """
        Read a cached value

        Args:
            key: Cache key

        Returns:
            Decoded value, or None on miss
        """
        raw = self._store.get(key)
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except ValueError:
            logger.warning(f"Undecodable cache entry {key}, treating as miss")
            return None
