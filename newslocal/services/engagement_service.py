"""
Engagement service: like and share counters.
"""

import logging

from ..database.base import ArticleStore
from ..database.models import Counter
from ..exceptions import ArticleNotFoundError

logger = logging.getLogger(__name__)


class EngagementService:
    """
    Service for engagement counter mutations.

    Each call maps to one atomic store increment. The returned count is the
    value the store reports after that increment, so concurrent callers each
    see a distinct, authoritative number.
    """

    def __init__(self, store: ArticleStore):
        self.store = store

    def like_article(self, article_id: str) -> int:
        """Add one like. Returns the new like count."""
        return self._increment(article_id, Counter.LIKES)

    def share_article(self, article_id: str) -> int:
        """Add one share. Returns the new share count."""
        return self._increment(article_id, Counter.SHARES)

    def _increment(self, article_id: str, counter: Counter) -> int:
        value = self.store.increment_counter(article_id, counter)
        if value is None:
            raise ArticleNotFoundError(article_id)
        logger.info(f"Article {article_id}: {counter.value} -> {value}")
        return value
