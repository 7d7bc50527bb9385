# newsrag/domain/services/ingest_service.py

"""
Ingest Service - Feed articles into the vector index
"""

import logging

from newsrag.domain.models import IngestionError
from newsrag.domain.ports.feeds import IFeedReader
from newsrag.domain.ports.retriever import IVectorIndex
from newsrag.domain.services.retrieval import RetrievalEngine

logger = logging.getLogger(__name__)


class IngestService:
    """
    Fetches articles, prepares the collection and indexes them
    """

    def __init__(
        self,
        feed_reader: IFeedReader,
        retrieval: RetrievalEngine,
        index: IVectorIndex,
        dimension: int,
    ):
        """
        Initialize ingest service

        Args:
            feed_reader: Source of articles
            retrieval: Engine used to embed and upsert articles
            index: Vector index (collection management)
            dimension: Embedding dimension for the collection
        """
        self._feed_reader = feed_reader
        self._retrieval = retrieval
        self._index = index
        self._dimension = dimension

    def ingest(self, limit: int = 100, recreate: bool = True) -> int:
        """
        Run one ingestion pass

        Args:
            limit: Maximum number of articles to fetch
            recreate: Drop and recreate the collection before indexing

        Returns:
            Number of articles written to the index

        Raises:
            IngestionError: If no articles could be fetched
        """
        articles = self._feed_reader.fetch_articles(limit=limit)
        if not articles:
            raise IngestionError("No articles fetched from any feed")

        logger.info(f"Fetched {len(articles)} articles, indexing")

        self._index.ensure_collection(self._dimension, recreate=recreate)
        return self._retrieval.index_articles(articles)
