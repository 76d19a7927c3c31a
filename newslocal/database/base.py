"""
Article store interface.

Defines the abstract interface the news services depend on. The SQLite
ArticleRepository is the production implementation; tests can supply an
in-memory store with the same contract.
"""

from abc import ABC, abstractmethod

from .models import Counter, DBArticle


class ArticleStore(ABC):
    """
    Abstract read/increment access to the articles table.

    Ordering contract shared by every listing method: ties are broken by
    id ascending, so identical data always yields identical order.
    """

    @abstractmethod
    def get(self, article_id: str) -> DBArticle | None:
        """Get single article by ID."""
        pass

    @abstractmethod
    def find_page(
        self,
        category: str | None = None,
        query: str | None = None,
        limit: int = 20,
        offset: int = 0,
    ) -> tuple[list[DBArticle], int]:
        """
        Get a newest-first slice of matching articles and the total match count.

        Args:
            category: Exact category to filter on
            query: Case-insensitive substring of title, content or summary,
                   or an exact tag
            limit: Maximum articles to return
            offset: Number of matching articles to skip
        """
        pass

    @abstractmethod
    def find_breaking(self, limit: int) -> list[DBArticle]:
        """Newest breaking articles."""
        pass

    @abstractmethod
    def find_trending(self, limit: int) -> list[DBArticle]:
        """Articles ranked by share count, then like count, then recency."""
        pass

    @abstractmethod
    def find_recommended(
        self,
        limit: int,
        min_shares: int,
        min_likes: int,
    ) -> list[DBArticle]:
        """Newest articles with more than min_shares shares or min_likes likes."""
        pass

    @abstractmethod
    def increment_counter(self, article_id: str, counter: Counter) -> int | None:
        """
        Atomically add 1 to a counter.

        Concurrent calls for the same article must never lose an update.
        Returns the counter value after this increment, or None if the
        article does not exist.
        """
        pass
