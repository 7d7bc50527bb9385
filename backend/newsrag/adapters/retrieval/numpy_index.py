# newsrag/adapters/retrieval/numpy_index.py
"""
NumPy Vector Index - In-memory similarity search

In-memory vector index for development and testing.
"""
from typing import Any, Dict, List, Optional

import numpy as np

from newsrag.domain.models import RetrieverError


class NumPyVectorIndex:
    """
    In-memory vector index using NumPy

    Uses brute-force cosine similarity for search.
    Suitable for development and small datasets.
    """

    def __init__(self):
        """Initialize empty index"""
        self.ids: List[str] = []
        self.vectors: List[List[float]] = []
        self.payloads: List[Dict[str, Any]] = []
        self._dimension: Optional[int] = None

    def ensure_collection(self, dimension: int, recreate: bool = False) -> None:
        if recreate or self._dimension is None:
            self.clear()
            self._dimension = dimension
        elif self._dimension != dimension:
            raise RetrieverError(
                f"Collection dimension {self._dimension} doesn't match {dimension}"
            )

    def upsert(self, points: List[Dict[str, Any]]) -> None:
        """
        Insert or replace points by id

        Raises:
            RetrieverError: If a vector has the wrong dimension
        """
        for point in points:
            vector = list(point["vector"])
            if self._dimension is None:
                self._dimension = len(vector)
            if len(vector) != self._dimension:
                raise RetrieverError(
                    f"Vector dimension {len(vector)} doesn't match "
                    f"collection dimension {self._dimension}"
                )

            payload = dict(point.get("payload") or {})
            if point["id"] in self.ids:
                idx = self.ids.index(point["id"])
                self.vectors[idx] = vector
                self.payloads[idx] = payload
            else:
                self.ids.append(point["id"])
                self.vectors.append(vector)
                self.payloads.append(payload)

    def search(self, vector: List[float], limit: int) -> List[Dict[str, Any]]:
        """
        Find similar vectors using cosine similarity

        Returns:
            Payloads sorted by similarity (highest first); ties keep
            insertion order
        """
        if not self.vectors:
            return []

        if len(vector) != self._dimension:
            raise RetrieverError(
                f"Query dimension {len(vector)} doesn't match "
                f"collection dimension {self._dimension}"
            )

        query = np.asarray(vector, dtype=float)
        matrix = np.asarray(self.vectors, dtype=float)

        norms = np.linalg.norm(matrix, axis=1) * np.linalg.norm(query)
        norms[norms == 0] = 1.0
        similarities = matrix @ query / norms

        top_indices = np.argsort(-similarities, kind="stable")[:limit]
        return [dict(self.payloads[idx]) for idx in top_indices]

    def count(self) -> int:
        return len(self.vectors)

    def clear(self) -> None:
        """Clear all vectors from index"""
        self.ids.clear()
        self.vectors.clear()
        self.payloads.clear()
        self._dimension = None
