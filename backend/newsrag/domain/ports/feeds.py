# newsrag/domain/ports/feeds.py

"""
Feed Reader Port - Interface for article sources
"""

from typing import List, Protocol

from newsrag.domain.models import Article


class IFeedReader(Protocol):
    """
    Interface for article sources used by ingestion
    """

    def fetch_articles(self, limit: int = 100) -> List[Article]:
        """
        Fetch normalized articles

        Args:
            limit: Maximum number of articles to return

        Returns:
            List of Article objects in feed order
        """
        ...
