# newsrag/adapters/retrieval/fake.py

"""
Fake Vector Index for testing
"""

from typing import Any, Dict, List, Optional


class FakeVectorIndex:
    """
    Fake vector index that returns predetermined payloads
    """

    def __init__(self, results: Optional[List[Dict[str, Any]]] = None):
        """
        Initialize fake index

        Args:
            results: Predetermined payloads to return, in rank order
        """
        self.results = results or []
        self.searches: List[Dict[str, Any]] = []
        self.points: List[Dict[str, Any]] = []
        self.collection_dimension: Optional[int] = None
        self.recreated = False

    @property
    def search_called(self) -> bool:
        return bool(self.searches)

    def ensure_collection(self, dimension: int, recreate: bool = False) -> None:
        self.collection_dimension = dimension
        self.recreated = self.recreated or recreate

    def upsert(self, points: List[Dict[str, Any]]) -> None:
        """Track upserted points"""
        self.points.extend(points)

    def search(self, vector: List[float], limit: int) -> List[Dict[str, Any]]:
        """Return predetermined results"""
        self.searches.append({"vector": vector, "limit": limit})
        return self.results[:limit]
