# newsrag/adapters/retrieval/qdrant_index.py
"""
Qdrant Vector Index Adapter

Implements IVectorIndex on qdrant-client with cosine distance.
"""
import logging
from typing import Any, Dict, List, Optional

from qdrant_client import QdrantClient
from qdrant_client.models import Distance, PointStruct, VectorParams

from newsrag.domain.models import RetrieverError

logger = logging.getLogger(__name__)


class QdrantVectorIndex:
    """
    Article index stored in a single Qdrant collection
    """

    def __init__(
        self,
        collection: str = "news_articles",
        url: Optional[str] = None,
        api_key: Optional[str] = None,
        client: Optional[QdrantClient] = None,
        timeout: int = 30,
    ):
        """
        Initialize Qdrant index

        Args:
            collection: Collection name
            url: Qdrant URL; ":memory:" runs the embedded local mode
            api_key: Qdrant API key
            client: Pre-built client (takes precedence over url)
            timeout: Request timeout in seconds
        """
        self.collection = collection
        if client is None:
            if not url:
                raise ValueError("Qdrant URL is required")
            if url == ":memory:":
                client = QdrantClient(location=":memory:")
            else:
                client = QdrantClient(url=url, api_key=api_key or None, timeout=timeout)
        self.client = client

    def ensure_collection(self, dimension: int, recreate: bool = False) -> None:
        try:
            exists = self.client.collection_exists(self.collection)
            if exists and recreate:
                logger.info(f"Dropping collection {self.collection}")
                self.client.delete_collection(self.collection)
                exists = False
            if not exists:
                logger.info(f"Creating collection {self.collection} (size={dimension}, cosine)")
                self.client.create_collection(
                    collection_name=self.collection,
                    vectors_config=VectorParams(size=dimension, distance=Distance.COSINE),
                )
        except Exception as e:
            logger.error(f"Failed to prepare collection {self.collection}: {e}")
            raise RetrieverError(f"Collection setup failed: {e}") from e

    def upsert(self, points: List[Dict[str, Any]]) -> None:
        structs = [
            PointStruct(id=p["id"], vector=p["vector"], payload=p.get("payload") or {})
            for p in points
        ]
        try:
            self.client.upsert(collection_name=self.collection, points=structs, wait=True)
        except Exception as e:
            logger.error(f"Qdrant upsert failed: {e}")
            raise RetrieverError(f"Upsert failed: {e}") from e
        logger.debug(f"Upserted {len(structs)} points into {self.collection}")

    def search(self, vector: List[float], limit: int) -> List[Dict[str, Any]]:
        try:
            response = self.client.query_points(
                collection_name=self.collection,
                query=vector,
                limit=limit,
                with_payload=True,
            )
        except Exception as e:
            logger.error(f"Qdrant search failed: {e}")
            raise RetrieverError(f"Search failed: {e}") from e

        return [point.payload or {} for point in response.points]
