# newsrag/adapters/embeddings/fake.py
"""
Fake Embedding Provider for testing

Generates deterministic embeddings without computation.
"""
import hashlib
from typing import List, Optional


class FakeEmbedding:
    """
    Fake embedding implementation for unit testing

    Generates deterministic vectors based on text hash and counts calls.
    """

    def __init__(self, dimension: int = 384, vector: Optional[List[float]] = None):
        """
        Initialize fake embeddings

        Args:
            dimension: Vector dimension to generate
            vector: Fixed vector to return for every call (may be empty
                to simulate a provider that returns nothing)
        """
        self._dimension = dimension
        self._vector = vector
        self.embedding_model = "fake"
        self.calls: List[str] = []

    @property
    def call_count(self) -> int:
        return len(self.calls)

    def embed_query(self, text: str) -> List[float]:
        self.calls.append(text)
        if self._vector is not None:
            return list(self._vector)
        return self._generate_embedding(text)

    def dimension(self) -> int:
        return self._dimension

    def _generate_embedding(self, text: str) -> List[float]:
        """
        Generate deterministic embedding from text

        Uses hash of text to generate consistent vectors.
        """
        hash_val = int(hashlib.md5(text.encode()).hexdigest(), 16)

        embedding = []
        for i in range(self._dimension):
            # Value between -1 and 1
            val = ((hash_val + i) % 1000) / 500.0 - 1.0
            embedding.append(val)

        return embedding
