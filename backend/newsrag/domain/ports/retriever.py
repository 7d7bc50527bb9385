# newsrag/domain/ports/retriever.py

"""
Vector Index Port - Interface for similarity search

This port defines the contract for the vector index holding articles.
"""

from typing import Any, Dict, List, Protocol


class IVectorIndex(Protocol):
    """
    Interface for vector similarity search

    Points are dicts of the form {"id": str, "vector": [...], "payload": {...}}.
    """

    def ensure_collection(self, dimension: int, recreate: bool = False) -> None:
        """
        Make sure the collection exists with cosine distance

        Args:
            dimension: Vector size fixed at creation
            recreate: Drop and recreate the collection first

        Raises:
            RetrieverError: If the index cannot be prepared
        """
        ...

    def upsert(self, points: List[Dict[str, Any]]) -> None:
        """
        Insert or replace points

        Args:
            points: List of {"id", "vector", "payload"} dicts

        Raises:
            RetrieverError: If the write fails
        """
        ...

    def search(self, vector: List[float], limit: int) -> List[Dict[str, Any]]:
        """
        Find the most similar points

        Args:
            vector: Query vector
            limit: Maximum number of results

        Returns:
            Payload dicts in rank order (highest similarity first)

        Raises:
            RetrieverError: If search fails
        """
        ...
