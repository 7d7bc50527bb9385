# newsrag/domain/services/retrieval.py

"""
Retrieval Engine - Query embedding, vector search and result caching
"""

import logging
from typing import List

from newsrag.domain.models import Article, EmbeddingUnavailable, InvalidRequest, Passage
from newsrag.domain.ports.retriever import IVectorIndex
from newsrag.domain.services.cache import RETRIEVAL_TTL, Cache, retrieval_key
from newsrag.domain.services.embedding_resolver import EmbeddingResolver

logger = logging.getLogger(__name__)


class RetrievalEngine:
    """
    Top-k passage retrieval with cache-through results

    Results are cached briefly because ingestion changes the index.
    """

    def __init__(
        self,
        resolver: EmbeddingResolver,
        index: IVectorIndex,
        cache: Cache,
        ttl: int = RETRIEVAL_TTL,
    ):
        """
        Initialize retrieval engine

        Args:
            resolver: Embedding resolver for queries and articles
            index: Vector index holding article payloads
            cache: Cache for retrieval results
            ttl: Retrieval cache TTL in seconds
        """
        self._resolver = resolver
        self._index = index
        self._cache = cache
        self._ttl = ttl

    def retrieve_top_k(self, query: str, k: int = 5) -> List[Passage]:
        """
        Retrieve the k most similar passages

        Args:
            query: User query
            k: Number of passages (part of the cache key)

        Returns:
            Passages in the index's rank order

        Raises:
            InvalidRequest: If query is blank or k is not positive
            EmbeddingUnavailable: If the query cannot be embedded
        """
        if not query or not query.strip():
            raise InvalidRequest("Query cannot be empty")
        if not isinstance(k, int) or isinstance(k, bool) or k < 1:
            raise InvalidRequest(f"k must be a positive integer, got {k!r}")

        key = retrieval_key(query, k)
        cached = self._cache.get(key)
        if cached is not None:
            logger.debug(f"Retrieval cache hit {key}")
            return [Passage.from_payload(p) for p in cached]

        vector = self._resolver.embed(query)
        if vector is None:
            raise EmbeddingUnavailable("Query produced no embedding")

        payloads = self._index.search(vector, limit=k)
        passages = [Passage.from_payload(p or {}) for p in payloads]

        self._cache.set(key, [p.to_payload() for p in passages], self._ttl)
        logger.info(f"Retrieved {len(passages)} passages for k={k}")
        return passages

    def index_articles(self, articles: List[Article]) -> int:
        """
        Embed articles and upsert them into the index

        Args:
            articles: Articles to index

        Returns:
            Number of points written (articles without content are skipped)
        """
        points = []
        for article in articles:
            vector = self._resolver.embed(article.content)
            if vector is None:
                logger.warning(f"Skipping article {article.id}: empty content")
                continue
            points.append(
                {
                    "id": article.id,
                    "vector": vector,
                    "payload": article.to_passage().to_payload(),
                }
            )

        if points:
            self._index.upsert(points)
        logger.info(f"Indexed {len(points)} of {len(articles)} articles")
        return len(points)
