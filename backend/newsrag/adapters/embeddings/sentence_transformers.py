# newsrag/adapters/embeddings/sentence_transformers.py
"""
SentenceTransformers Embedding Adapter

Implements IEmbeddingProvider using local SentenceTransformers models.
"""
import logging
from typing import List

import numpy as np
from sentence_transformers import SentenceTransformer

from newsrag.domain.models import EmbeddingUnavailable

logger = logging.getLogger(__name__)


class SentenceTransformersEmbedding:
    """
    Local embedding provider using SentenceTransformers

    Runs models locally without API calls.
    """

    def __init__(self, model_name: str = "all-MiniLM-L6-v2", device: str = "cpu"):
        """
        Initialize SentenceTransformers embeddings

        Args:
            model_name: Model identifier (e.g., "all-MiniLM-L6-v2")
            device: Device to use ("cpu" or "cuda")
        """
        self.embedding_model = model_name
        self.device = device

        try:
            logger.info(f"Loading embedding model: {model_name}")
            self.model = SentenceTransformer(model_name, device=device)
            self._dimension = self.model.get_sentence_embedding_dimension()
            logger.info(f"Model loaded. Dimension: {self._dimension}")

        except Exception as e:
            logger.error(f"Failed to load embedding model: {e}")
            raise EmbeddingUnavailable(f"Model loading failed: {e}") from e

    def embed_query(self, text: str) -> List[float]:
        """
        Generate embedding for single text

        Raises:
            EmbeddingUnavailable: If embedding generation fails
        """
        try:
            embedding = self.model.encode(
                text.strip(),
                normalize_embeddings=True,
                show_progress_bar=False,
                convert_to_numpy=True,
            )
        except Exception as e:
            logger.error(f"Error embedding query: {e}")
            raise EmbeddingUnavailable(f"Query embedding failed: {e}") from e

        if isinstance(embedding, np.ndarray):
            embedding = embedding.tolist()

        return embedding

    def dimension(self) -> int:
        return self._dimension
