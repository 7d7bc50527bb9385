# newsrag/domain/ports/embeddings.py

"""
Embedding Provider Port - Interface for vector embeddings

This port defines the contract for converting text to vector embeddings.
"""

from typing import List, Protocol


class IEmbeddingProvider(Protocol):
    """
    Interface for embedding providers

    Implementations must convert text to fixed-dimension vectors.
    """

    def embed_query(self, text: str) -> List[float]:
        """
        Generate embedding for a single text

        Args:
            text: Text string to embed (non-blank)

        Returns:
            Embedding vector as list of floats

        Raises:
            EmbeddingUnavailable: If the provider returns no vector
        """
        ...

    def dimension(self) -> int:
        """
        Get the dimension of embeddings produced by this provider

        Returns:
            Integer dimension (e.g., 384, 768)

        Note:
            Must match the vector index collection size.
        """
        ...
