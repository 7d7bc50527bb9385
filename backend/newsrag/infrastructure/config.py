# newsrag/infrastructure/config.py

"""
Configuration Management

Environment-specific configurations for different deployment contexts.
"""

import os
from typing import Any, Dict

from newsrag.adapters.feeds.rss import DEFAULT_FEEDS


def get_environment() -> str:
    """
    Get current environment from environment variable

    Returns:
        Environment name: 'test', 'development', or 'production'
    """
    return os.getenv("ENVIRONMENT", "development")


def get_config() -> Dict[str, Any]:
    """
    Get configuration for current environment

    Returns:
        Fresh copy of the configuration dictionary for active environment
    """
    env = get_environment()

    configs = {
        "test": build_test_config,
        "development": build_development_config,
        "production": build_production_config,
    }

    config = configs.get(env, build_development_config)()
    config["environment"] = env

    return config


def _env_int(name: str, default: int) -> int:
    return int(os.getenv(name, str(default)))


def _shared() -> Dict[str, Any]:
    return {
        "session": {"ttl": _env_int("SESSION_TTL_SECONDS", 1800)},
        "cache": {"embedding_ttl": 60 * 60 * 24, "retrieval_ttl": 60 * 5},
        "retrieval": {"top_k": _env_int("DEFAULT_TOP_K", 5), "max_top_k": 50},
        "ingest": {
            "feeds": list(DEFAULT_FEEDS),
            "limit": _env_int("INGEST_LIMIT", 100),
            "timeout": 15,
        },
        "prompt_version": "v1.0",
    }


# ============================================================
# TEST CONFIGURATION
# ============================================================

def build_test_config() -> Dict[str, Any]:
    config = _shared()
    config.update(
        {
            "store": {"type": "memory"},
            "embedding": {"type": "fake", "dimension": 8},
            "llm": {"type": "fake", "response": "Test response from fake LLM"},
            "retriever": {"type": "memory", "collection": "test_articles"},
        }
    )
    return config


# ============================================================
# DEVELOPMENT CONFIGURATION
# ============================================================

def build_development_config() -> Dict[str, Any]:
    config = _shared()
    config.update(
        {
            "store": {
                "type": os.getenv("STORE_TYPE", "redis"),
                "url": os.getenv("REDIS_URL", "redis://localhost:6379/0"),
            },
            "embedding": {
                "type": os.getenv("EMBEDDING_PROVIDER", "jina"),
                "api_key": os.getenv("JINA_API_KEY", ""),
                "model": os.getenv("EMBEDDING_MODEL", "jina-embeddings-v2-base-en"),
                "dimension": _env_int("EMBEDDING_SIZE", 768),
            },
            "llm": {
                "type": os.getenv("LLM_PROVIDER", "gemini"),
                "api_url": os.getenv("GEMINI_API_URL", ""),
                "api_key": os.getenv("GEMINI_API_KEY", ""),
            },
            "retriever": {
                "type": os.getenv("RETRIEVER_TYPE", "qdrant"),
                "url": os.getenv("QDRANT_URL", "http://localhost:6333"),
                "api_key": os.getenv("QDRANT_API_KEY", ""),
                "collection": os.getenv("COLLECTION_NAME", "news_articles"),
            },
        }
    )
    return config


# ============================================================
# PRODUCTION CONFIGURATION
# ============================================================

def build_production_config() -> Dict[str, Any]:
    config = build_development_config()
    config["store"]["type"] = "redis"
    config["retriever"]["type"] = "qdrant"
    config["ingest"]["timeout"] = 30
    return config
