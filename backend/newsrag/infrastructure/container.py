# newsrag/infrastructure/container.py

"""
Dependency Injection Container

Simple factory functions for creating fully-wired services.
No magic, no framework - just explicit construction.
"""

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Dict, Optional

from newsrag.domain.models import DomainException
from newsrag.infrastructure.config import get_config

logger = logging.getLogger(__name__)


# ============================================================
# ADAPTER FACTORIES
# ============================================================

def create_kv_store(config: Dict[str, Any]):
    """
    Factory for key-value store based on configuration

    Args:
        config: Store configuration dict with 'type' key

    Returns:
        Implementation of IKeyValueStore

    Raises:
        ValueError: If store type is unknown
    """
    store_type = config.get('type', 'memory')

    if store_type == 'memory':
        from newsrag.adapters.store.inmemory_store import InMemoryKeyValueStore
        return InMemoryKeyValueStore()

    elif store_type == 'redis':
        from newsrag.adapters.store.redis_store import RedisKeyValueStore
        return RedisKeyValueStore(url=config.get('url'))

    else:
        raise ValueError(f"Unknown store type: {store_type}")


def create_embedding_provider(config: Dict[str, Any]):
    """
    Factory for embedding provider based on configuration

    Args:
        config: Embedding configuration dict with 'type' key

    Returns:
        Implementation of IEmbeddingProvider

    Raises:
        ValueError: If provider type is unknown
    """
    provider_type = config.get('type', 'fake')

    if provider_type == 'fake':
        from newsrag.adapters.embeddings.fake import FakeEmbedding
        return FakeEmbedding(dimension=config.get('dimension', 384))

    elif provider_type == 'jina':
        from newsrag.adapters.embeddings.jina import JinaEmbedding
        return JinaEmbedding(
            api_key=config.get('api_key'),
            model=config.get('model', 'jina-embeddings-v2-base-en'),
            dimension=config.get('dimension', 768),
        )

    elif provider_type == 'sentence_transformers':
        from newsrag.adapters.embeddings.sentence_transformers import SentenceTransformersEmbedding
        return SentenceTransformersEmbedding(
            model_name=config.get('model', 'all-MiniLM-L6-v2'),
            device=config.get('device', 'cpu')
        )

    else:
        raise ValueError(f"Unknown embedding provider type: {provider_type}")


def create_llm_provider(config: Dict[str, Any]):
    """
    Factory for LLM provider based on configuration

    Args:
        config: LLM configuration dict with 'type' key

    Returns:
        Implementation of ILLMProvider

    Raises:
        ValueError: If provider type is unknown
    """
    provider_type = config.get('type', 'fake')

    if provider_type == 'fake':
        from newsrag.adapters.llm.fake import FakeLLM
        return FakeLLM(response=config.get('response', 'Test response'))

    elif provider_type == 'gemini':
        from newsrag.adapters.llm.gemini import GeminiLLM
        return GeminiLLM(api_url=config.get('api_url'), api_key=config.get('api_key'))

    elif provider_type == 'openrouter':
        from newsrag.adapters.llm.openrouter import OpenRouterLLM
        return OpenRouterLLM(
            api_key=config.get('api_key'),
            base_url=config.get('base_url', 'https://openrouter.ai/api/v1'),
            model=config.get('model', 'gpt-4o-mini'),
            temperature=config.get('temperature', 0.1),
            max_tokens=config.get('max_tokens', 1000)
        )

    else:
        raise ValueError(f"Unknown LLM provider type: {provider_type}")


def create_vector_index(config: Dict[str, Any]):
    """
    Factory for vector index based on configuration
    """
    index_type = config.get('type', 'memory')

    if index_type == 'memory':
        from newsrag.adapters.retrieval.numpy_index import NumPyVectorIndex
        return NumPyVectorIndex()

    elif index_type == 'qdrant':
        from newsrag.adapters.retrieval.qdrant_index import QdrantVectorIndex
        return QdrantVectorIndex(
            collection=config.get('collection', 'news_articles'),
            url=config.get('url'),
            api_key=config.get('api_key'),
        )

    elif index_type == 'fake':
        from newsrag.adapters.retrieval.fake import FakeVectorIndex
        return FakeVectorIndex()

    else:
        raise ValueError(f"Unknown vector index type: {index_type}")


def create_feed_reader(config: Dict[str, Any]):
    """Factory for the RSS feed reader"""
    from newsrag.adapters.feeds.rss import RssFeedReader
    return RssFeedReader(feeds=config.get('feeds'), timeout=config.get('timeout', 15))


# ============================================================
# SERVICE FACTORIES
# ============================================================

@dataclass
class Services:
    """Process-wide wired services sharing one store and one index"""
    store: Any
    index: Any
    chat_service: Any
    ingest_service: Any
    config: Dict[str, Any]


def build_services(
    config: Optional[Dict] = None,
    store=None,
    index=None,
    embedder=None,
    llm=None,
    feed_reader=None,
) -> Services:
    """
    Create fully-wired chat and ingest services

    Adapters can be passed in to override the configured ones (tests).

    Args:
        config: Optional configuration dict. If None, uses environment config.

    Returns:
        Services bundle

    Example:
        >>> services = build_services()
        >>> result = services.chat_service.handle_chat_turn(
        ...     session_id="abc-123",
        ...     query="What happened in Geneva?",
        ...     k=5
        ... )
    """
    config = config or get_config()

    try:
        validate_config(config)

        from newsrag.domain.prompts.template import PromptTemplate
        from newsrag.domain.services.cache import Cache
        from newsrag.domain.services.chat_service import ChatService
        from newsrag.domain.services.embedding_resolver import EmbeddingResolver
        from newsrag.domain.services.ingest_service import IngestService
        from newsrag.domain.services.retrieval import RetrievalEngine
        from newsrag.domain.services.sessions import SessionStore

        store = store if store is not None else create_kv_store(config['store'])
        index = index if index is not None else create_vector_index(config['retriever'])
        embedder = embedder if embedder is not None else create_embedding_provider(config['embedding'])
        llm = llm if llm is not None else create_llm_provider(config['llm'])
        feed_reader = feed_reader if feed_reader is not None else create_feed_reader(config['ingest'])

        cache = Cache(store)
        cache_config = config['cache']
        resolver = EmbeddingResolver(embedder, cache, ttl=cache_config['embedding_ttl'])
        retrieval = RetrievalEngine(resolver, index, cache, ttl=cache_config['retrieval_ttl'])

        chat_service = ChatService(
            session_store=SessionStore(store, default_ttl=config['session']['ttl']),
            retrieval=retrieval,
            llm=llm,
            prompt_template=PromptTemplate(version=config.get('prompt_version', 'v1.0')),
            default_top_k=config['retrieval']['top_k'],
        )
        ingest_service = IngestService(
            feed_reader=feed_reader,
            retrieval=retrieval,
            index=index,
            dimension=resolver.dimension(),
        )

        logger.info(
            f"Created services with store={config['store']['type']}, "
            f"llm={config['llm']['type']}, "
            f"embedding={config['embedding']['type']}, "
            f"retriever={config['retriever']['type']}"
        )

        return Services(
            store=store,
            index=index,
            chat_service=chat_service,
            ingest_service=ingest_service,
            config=config,
        )

    except (ValueError, DomainException) as e:
        logger.error(f"Failed to create services: {e}")
        raise DomainException(f"Service initialization failed: {e}") from e


@lru_cache(maxsize=1)
def get_services() -> Services:
    """
    Process-wide services for the HTTP layer

    Built once on first use; call get_services.cache_clear() to rebuild.
    """
    return build_services()


# ============================================================
# VALIDATION
# ============================================================

def validate_config(config: Dict[str, Any]) -> bool:
    """
    Validate configuration structure

    Args:
        config: Configuration dictionary to validate

    Returns:
        True if valid

    Raises:
        ValueError: If configuration is invalid
    """
    required_keys = ['store', 'embedding', 'llm', 'retriever', 'session', 'cache', 'retrieval', 'ingest']

    for key in required_keys:
        if key not in config:
            raise ValueError(f"Missing required config key: {key}")

    for key in ('store', 'embedding', 'llm', 'retriever'):
        if 'type' not in config[key]:
            raise ValueError(f"{key} config missing 'type' key")

    if config['store']['type'] == 'redis' and not config['store'].get('url'):
        raise ValueError("Redis store requires 'url'")

    if config['retriever']['type'] == 'qdrant' and not config['retriever'].get('url'):
        raise ValueError("Qdrant retriever requires 'url'")

    if config['retrieval']['top_k'] < 1:
        raise ValueError("retrieval.top_k must be positive")

    return True


# ============================================================
# HELPER FUNCTIONS
# ============================================================

def get_service_info(config: Optional[Dict] = None) -> Dict[str, Any]:
    """
    Get information about configured services

    Args:
        config: Optional config dict, uses environment config if None

    Returns:
        Dict with service configuration info
    """
    config = config or get_config()

    return {
        'environment': config.get('environment', 'unknown'),
        'store': {'type': config['store'].get('type')},
        'llm': {'type': config['llm'].get('type')},
        'embedding': {
            'type': config['embedding'].get('type'),
            'model': config['embedding'].get('model', 'N/A'),
            'dimension': config['embedding'].get('dimension', 'N/A'),
        },
        'retriever': {
            'type': config['retriever'].get('type'),
            'collection': config['retriever'].get('collection', 'N/A'),
        },
        'session_ttl': config['session']['ttl'],
        'prompt_version': config.get('prompt_version', 'v1.0'),
    }
