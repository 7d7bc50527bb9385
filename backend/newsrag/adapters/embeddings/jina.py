# newsrag/adapters/embeddings/jina.py
"""
Jina AI Embedding Adapter

Implements IEmbeddingProvider over the Jina embeddings REST API.
"""
import logging
from typing import List

import requests

from newsrag.domain.models import EmbeddingUnavailable

logger = logging.getLogger(__name__)

JINA_EMBED_URL = "https://api.jina.ai/v1/embeddings"


class JinaEmbedding:
    """
    Remote embedding provider using Jina AI

    Single attempt per call; no retries.
    """

    def __init__(
        self,
        api_key: str,
        model: str = "jina-embeddings-v2-base-en",
        dimension: int = 768,
        url: str = JINA_EMBED_URL,
        timeout: float = 30.0,
    ):
        """
        Initialize Jina embeddings

        Args:
            api_key: Jina API key
            model: Embedding model identifier
            dimension: Vector size produced by the model
            url: Embeddings endpoint
            timeout: Request timeout in seconds
        """
        if not api_key:
            raise ValueError("Jina API key is required")

        self.api_key = api_key
        self.embedding_model = model
        self.url = url
        self.timeout = timeout
        self._dimension = dimension
        self.session = requests.Session()

    def embed_query(self, text: str) -> List[float]:
        """
        Embed one text

        Args:
            text: Text string

        Returns:
            Embedding vector

        Raises:
            EmbeddingUnavailable: If the request fails or returns no vector
        """
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }
        payload = {"model": self.embedding_model, "input": text}

        try:
            response = self.session.post(
                self.url, headers=headers, json=payload, timeout=self.timeout
            )
            response.raise_for_status()
            data = response.json()
        except (requests.RequestException, ValueError) as e:
            logger.error(f"Jina embedding request failed: {e}")
            raise EmbeddingUnavailable(f"Embedding request failed: {e}") from e

        try:
            embedding = data["data"][0]["embedding"]
        except (KeyError, IndexError, TypeError):
            embedding = None

        if not embedding:
            raise EmbeddingUnavailable("No embedding returned")

        return embedding

    def dimension(self) -> int:
        return self._dimension
