# newsrag/infrastructure/health.py
"""
Store health check

Explicit probe of the key-value store: write a short-lived value and
read it back.
"""
import logging
import time
import uuid
from typing import Any, Dict

from newsrag.domain.models import StoreUnavailable
from newsrag.domain.ports.store import IKeyValueStore

logger = logging.getLogger(__name__)

# Shorter than the minimum session key length, so never listed as a session
PROBE_KEY = "ping"
PROBE_TTL = 10


def check_store_health(store: IKeyValueStore) -> Dict[str, Any]:
    """
    Probe the store with a set/get round-trip

    Args:
        store: Key-value store to probe

    Returns:
        {"status": "healthy"|"unhealthy", "latency_ms": float, ["error": str]}
    """
    start_time = time.time()
    token = uuid.uuid4().hex

    try:
        store.set(PROBE_KEY, token, PROBE_TTL)
        value = store.get(PROBE_KEY)
    except StoreUnavailable as e:
        latency_ms = round((time.time() - start_time) * 1000, 2)
        logger.error(f"Store health check failed: {e}")
        return {"status": "unhealthy", "error": str(e), "latency_ms": latency_ms}

    latency_ms = round((time.time() - start_time) * 1000, 2)

    if value != token:
        logger.error("Store health check read back a different value")
        return {
            "status": "unhealthy",
            "error": "probe value mismatch",
            "latency_ms": latency_ms,
        }

    if latency_ms > 100:
        logger.warning(f"Store health check latency is high: {latency_ms}ms")

    return {"status": "healthy", "latency_ms": latency_ms}
