"""
Database facade - owns the connection and exposes the repositories.
"""

from pathlib import Path

from .connection import DatabaseConnection
from .article_repository import ArticleRepository


class Database:
    """
    Unified database access facade.

    Services are handed ``db.articles`` (an ArticleStore) rather than the
    facade itself, so they can run against any store implementation.
    """

    def __init__(self, db_path: Path, timeout: float = 30.0):
        self._connection = DatabaseConnection(db_path, timeout=timeout)
        self.articles = ArticleRepository(self._connection)

    @property
    def path(self) -> Path:
        return self._connection.db_path

    def add_article(self, **fields) -> str:
        """Insert one article (see ArticleRepository.add)."""
        return self.articles.add(**fields)

    def add_articles(self, articles: list[dict]) -> list[str]:
        """Bulk-insert articles in one transaction."""
        return self.articles.add_many(articles)

    def article_count(self) -> int:
        return self.articles.count()
