# newsrag/domain/services/embedding_resolver.py

"""
Embedding Resolver - Cache-through access to the embedding provider
"""

import logging
from typing import List, Optional

from newsrag.domain.models import EmbeddingUnavailable
from newsrag.domain.ports.embeddings import IEmbeddingProvider
from newsrag.domain.services.cache import EMBEDDING_TTL, Cache, embedding_key

logger = logging.getLogger(__name__)


class EmbeddingResolver:
    """
    Resolves text to vectors, reusing cached embeddings

    Embeddings of fixed text never change, so entries live for a day.
    """

    def __init__(
        self,
        provider: IEmbeddingProvider,
        cache: Cache,
        ttl: int = EMBEDDING_TTL,
    ):
        self._provider = provider
        self._cache = cache
        self._ttl = ttl

    def embed(self, text: Optional[str]) -> Optional[List[float]]:
        """
        Embed text

        Args:
            text: Text to embed

        Returns:
            Embedding vector, or None for empty/whitespace-only text
            (the provider is not called in that case)

        Raises:
            EmbeddingUnavailable: If the provider returns no vector
        """
        if not text or not text.strip():
            return None

        key = embedding_key(text)
        cached = self._cache.get(key)
        if cached is not None:
            logger.debug(f"Embedding cache hit {key}")
            return cached

        logger.debug(f"Embedding cache miss {key}")
        vector = self._provider.embed_query(text)
        if not vector:
            raise EmbeddingUnavailable("No embedding returned")

        vector = list(vector)
        self._cache.set(key, vector, self._ttl)
        return vector

    def dimension(self) -> int:
        return self._provider.dimension()
