# newsrag/adapters/store/redis_store.py
"""
Redis Key-Value Store Adapter

Implements IKeyValueStore on redis-py.
"""
import logging
from typing import List, Optional

import redis

from newsrag.domain.models import StoreUnavailable

logger = logging.getLogger(__name__)


class RedisKeyValueStore:
    """
    Redis-backed TTL store

    One client per process; the connection pool inside redis-py is
    shared by the session store and the cache layer.
    """

    def __init__(
        self,
        url: Optional[str] = None,
        client: Optional[redis.Redis] = None,
        socket_timeout: float = 5.0,
    ):
        """
        Initialize Redis store

        Args:
            url: Redis URL (redis://[:password@]host:port/db)
            client: Pre-built client (takes precedence over url)
            socket_timeout: Socket timeout in seconds
        """
        if client is None:
            if not url:
                raise ValueError("Redis URL is required")
            client = redis.Redis.from_url(
                url,
                decode_responses=True,
                socket_timeout=socket_timeout,
                socket_connect_timeout=socket_timeout,
            )
        self.client = client

    def get(self, key: str) -> Optional[str]:
        try:
            return self.client.get(key)
        except redis.exceptions.RedisError as e:
            logger.error(f"Redis GET {key} failed: {e}")
            raise StoreUnavailable(f"Redis unavailable: {e}") from e

    def set(self, key: str, value: str, ttl_seconds: int) -> None:
        try:
            self.client.set(key, value, ex=int(ttl_seconds))
        except redis.exceptions.RedisError as e:
            logger.error(f"Redis SET {key} failed: {e}")
            raise StoreUnavailable(f"Redis unavailable: {e}") from e

    def keys(self, pattern: str = "*") -> List[str]:
        """List matching keys with SCAN instead of blocking KEYS"""
        try:
            return list(self.client.scan_iter(match=pattern))
        except redis.exceptions.RedisError as e:
            logger.error(f"Redis SCAN {pattern} failed: {e}")
            raise StoreUnavailable(f"Redis unavailable: {e}") from e
