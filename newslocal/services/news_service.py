"""
News service: read-only query and ranking operations over the article store.

Handles headline pagination, category filtering, search and the curated
breaking/trending/recommended selections.
"""

import logging
import math

from ..database.base import ArticleStore
from ..database.models import ArticlePage, DBArticle
from ..exceptions import ArticleNotFoundError, ValidationError

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 50
# Largest page whose row offset still fits in a SQLite INTEGER
MAX_PAGE = (2**63 - 1) // MAX_PAGE_SIZE

BREAKING_LIMIT = 10
TRENDING_LIMIT = 10
RECOMMENDED_LIMIT = 15

# An article is recommended once it passes either engagement threshold
RECOMMENDED_MIN_SHARES = 100
RECOMMENDED_MIN_LIKES = 500


class NewsService:
    """Service for article queries and rankings."""

    def __init__(self, store: ArticleStore):
        self.store = store

    # ─────────────────────────────────────────────────────────────
    # Paginated listings
    # ─────────────────────────────────────────────────────────────

    def get_top_headlines(
        self,
        page: int = 1,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> ArticlePage:
        """All articles, newest first."""
        return self._paginate(page, page_size)

    def get_news_by_category(
        self,
        category: str,
        page: int = 1,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> ArticlePage:
        """
        Articles in one category, newest first.

        An unrecognized category is not an error; it simply matches nothing.
        """
        if not category:
            raise ValidationError("Category is required")
        return self._paginate(page, page_size, category=category)

    def search_news(
        self,
        query: str,
        page: int = 1,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> ArticlePage:
        """
        Articles whose title, content or summary contains the query
        (case-insensitive), or whose tags include it exactly.
        """
        if not query or not query.strip():
            raise ValidationError("Search query is required")
        return self._paginate(page, page_size, query=query)

    def _paginate(
        self,
        page: int,
        page_size: int,
        category: str | None = None,
        query: str | None = None,
    ) -> ArticlePage:
        if not 1 <= page <= MAX_PAGE:
            raise ValidationError("Page must be a positive integer")
        if not 1 <= page_size <= MAX_PAGE_SIZE:
            raise ValidationError(f"Page size must be between 1 and {MAX_PAGE_SIZE}")

        articles, total = self.store.find_page(
            category=category,
            query=query,
            limit=page_size,
            offset=(page - 1) * page_size,
        )
        logger.debug(
            f"Page {page} (size {page_size}, category={category!r}, query={query!r}): "
            f"{len(articles)} of {total}"
        )
        return ArticlePage(
            articles=articles,
            total_results=total,
            page=page,
            total_pages=math.ceil(total / page_size),
        )

    # ─────────────────────────────────────────────────────────────
    # Curated selections
    # ─────────────────────────────────────────────────────────────

    def get_breaking_news(self) -> list[DBArticle]:
        return self.store.find_breaking(limit=BREAKING_LIMIT)

    def get_trending_news(self) -> list[DBArticle]:
        """Most shared articles, with likes breaking ties."""
        return self.store.find_trending(limit=TRENDING_LIMIT)

    def get_recommended_news(self) -> list[DBArticle]:
        """Recent articles that crossed an engagement threshold."""
        return self.store.find_recommended(
            limit=RECOMMENDED_LIMIT,
            min_shares=RECOMMENDED_MIN_SHARES,
            min_likes=RECOMMENDED_MIN_LIKES,
        )

    # ─────────────────────────────────────────────────────────────
    # Single article
    # ─────────────────────────────────────────────────────────────

    def get_article(self, article_id: str) -> DBArticle:
        article = self.store.get(article_id)
        if article is None:
            raise ArticleNotFoundError(article_id)
        return article
