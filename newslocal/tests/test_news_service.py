"""
Tests for NewsService and EngagementService.

Uses an in-memory article store to exercise ranking and pagination logic
without SQLite.
"""

import math
import threading
import uuid
from dataclasses import replace
from datetime import datetime, timedelta, timezone

import pytest

from newslocal.database.base import ArticleStore
from newslocal.database.models import Counter, DBArticle
from newslocal.exceptions import ArticleNotFoundError, ValidationError
from newslocal.services import EngagementService, NewsService
from newslocal.services.news_service import MAX_PAGE


BASE_TIME = datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)


def build_article(**overrides) -> DBArticle:
    fields = dict(
        id=str(uuid.uuid4()),
        title="Article",
        content="Body",
        summary="Summary",
        author="Author",
        published_at=BASE_TIME,
        category="technology",
        source_id="source_1",
        source_name="Source",
        read_time=3,
        created_at=BASE_TIME,
        updated_at=BASE_TIME,
    )
    fields.update(overrides)
    return DBArticle(**fields)


class InMemoryArticleStore(ArticleStore):
    """Article store backed by a dict, guarded by a lock."""

    def __init__(self, articles: list[DBArticle] | None = None):
        self._articles = {a.id: a for a in articles or []}
        self._lock = threading.Lock()
        self.page_calls: list[dict] = []

    @staticmethod
    def _newest_first(articles):
        # Two stable sorts: id ascending, then published_at descending
        return sorted(
            sorted(articles, key=lambda a: a.id),
            key=lambda a: a.published_at,
            reverse=True,
        )

    def get(self, article_id):
        return self._articles.get(article_id)

    def find_page(self, category=None, query=None, limit=20, offset=0):
        self.page_calls.append(
            {"category": category, "query": query, "limit": limit, "offset": offset}
        )
        matches = list(self._articles.values())
        if category is not None:
            matches = [a for a in matches if a.category == category]
        if query is not None:
            needle = query.casefold()
            matches = [
                a for a in matches
                if needle in a.title.casefold()
                or needle in a.content.casefold()
                or needle in a.summary.casefold()
                or query in a.tags
            ]
        ordered = self._newest_first(matches)
        return ordered[offset:offset + limit], len(ordered)

    def find_breaking(self, limit):
        return self._newest_first(a for a in self._articles.values() if a.is_breaking)[:limit]

    def find_trending(self, limit):
        ordered = sorted(
            self._newest_first(self._articles.values()),
            key=lambda a: (a.share_count, a.like_count),
            reverse=True,
        )
        return ordered[:limit]

    def find_recommended(self, limit, min_shares, min_likes):
        return self._newest_first(
            a for a in self._articles.values()
            if a.share_count > min_shares or a.like_count > min_likes
        )[:limit]

    def increment_counter(self, article_id, counter):
        with self._lock:
            article = self._articles.get(article_id)
            if article is None:
                return None
            field = Counter(counter).value
            value = getattr(article, field) + 1
            self._articles[article_id] = replace(article, **{field: value})
            return value


@pytest.fixture
def store():
    articles = [
        build_article(
            title=f"Article {i}",
            published_at=BASE_TIME - timedelta(hours=i),
            category="technology" if i % 2 == 0 else "sports",
        )
        for i in range(7)
    ]
    return InMemoryArticleStore(articles)


class TestPagination:
    """Pagination arithmetic."""

    @pytest.mark.parametrize("page_size", [1, 2, 3, 7, 10, 50])
    def test_total_pages_is_ceiling(self, store, page_size):
        page = NewsService(store).get_top_headlines(page=1, page_size=page_size)
        assert page.total_results == 7
        assert page.total_pages == math.ceil(7 / page_size)
        assert len(page.articles) <= page_size

    def test_offset(self, store):
        NewsService(store).get_top_headlines(page=3, page_size=2)
        assert store.page_calls[-1]["offset"] == 4
        assert store.page_calls[-1]["limit"] == 2

    def test_pages_cover_all_articles_once(self, store):
        service = NewsService(store)
        seen = []
        for page_number in range(1, 4):
            seen.extend(a.id for a in service.get_top_headlines(page_number, 3).articles)
        assert len(seen) == 7
        assert len(set(seen)) == 7

    def test_headlines_sorted_newest_first(self, store):
        articles = NewsService(store).get_top_headlines(page=1, page_size=50).articles
        dates = [a.published_at for a in articles]
        assert dates == sorted(dates, reverse=True)

    def test_empty_store(self):
        page = NewsService(InMemoryArticleStore()).get_top_headlines()
        assert page.articles == []
        assert page.total_results == 0
        assert page.total_pages == 0

    @pytest.mark.parametrize("page,page_size", [(0, 10), (-1, 10), (MAX_PAGE + 1, 10), (1, 0), (1, 51)])
    def test_invalid_paging_rejected(self, store, page, page_size):
        with pytest.raises(ValidationError):
            NewsService(store).get_top_headlines(page=page, page_size=page_size)
        assert store.page_calls == []


class TestCategoryAndSearch:

    def test_category_filter(self, store):
        page = NewsService(store).get_news_by_category("sports", 1, 10)
        assert page.total_results == 3
        assert all(a.category == "sports" for a in page.articles)

    def test_unknown_category_is_empty(self, store):
        page = NewsService(store).get_news_by_category("nonexistent", 1, 10)
        assert page.articles == []
        assert page.total_results == 0

    def test_search_matches_tag_only(self):
        tagged = build_article(title="Quiet day", tags=["Olympics"])
        other = build_article(title="Other")
        page = NewsService(InMemoryArticleStore([tagged, other])).search_news("Olympics")
        assert [a.id for a in page.articles] == [tagged.id]

    def test_blank_search_rejected(self, store):
        with pytest.raises(ValidationError):
            NewsService(store).search_news("   ")


class TestCuratedSelections:

    def test_trending_scenario(self):
        low = build_article(share_count=50, like_count=100)
        high = build_article(share_count=200, like_count=300)
        mid = build_article(share_count=150, like_count=250)
        trending = NewsService(InMemoryArticleStore([low, high, mid])).get_trending_news()
        assert [a.id for a in trending] == [high.id, mid.id, low.id]

    def test_trending_likes_break_share_ties(self):
        a = build_article(share_count=10, like_count=1)
        b = build_article(share_count=10, like_count=5)
        trending = NewsService(InMemoryArticleStore([a, b])).get_trending_news()
        assert [x.id for x in trending] == [b.id, a.id]

    def test_trending_capped_at_ten(self):
        articles = [build_article(share_count=i) for i in range(15)]
        trending = NewsService(InMemoryArticleStore(articles)).get_trending_news()
        assert len(trending) == 10
        assert trending[0].share_count == 14

    def test_breaking_capped_at_ten(self):
        articles = [
            build_article(is_breaking=True, published_at=BASE_TIME - timedelta(minutes=i))
            for i in range(12)
        ] + [build_article(is_breaking=False)]
        breaking = NewsService(InMemoryArticleStore(articles)).get_breaking_news()
        assert len(breaking) == 10
        assert all(a.is_breaking for a in breaking)
        assert breaking[0].published_at == BASE_TIME

    def test_recommended_thresholds_are_exclusive(self):
        at_shares = build_article(share_count=100)
        at_likes = build_article(like_count=500)
        over_shares = build_article(share_count=101)
        over_likes = build_article(like_count=501)
        store = InMemoryArticleStore([at_shares, at_likes, over_shares, over_likes])
        ids = {a.id for a in NewsService(store).get_recommended_news()}
        assert ids == {over_shares.id, over_likes.id}

    def test_recommended_capped_at_fifteen(self):
        articles = [build_article(share_count=1000) for _ in range(20)]
        assert len(NewsService(InMemoryArticleStore(articles)).get_recommended_news()) == 15


class TestArticleLookup:

    def test_get_article(self, store):
        article_id = next(iter(store._articles))
        assert NewsService(store).get_article(article_id).id == article_id

    def test_get_article_missing(self, store):
        with pytest.raises(ArticleNotFoundError):
            NewsService(store).get_article(str(uuid.uuid4()))


class TestEngagementService:

    def test_like_returns_new_count(self):
        article = build_article(like_count=20)
        service = EngagementService(InMemoryArticleStore([article]))
        assert service.like_article(article.id) == 21
        assert service.like_article(article.id) == 22

    def test_share_leaves_likes_alone(self):
        article = build_article(share_count=5, like_count=7)
        store = InMemoryArticleStore([article])
        assert EngagementService(store).share_article(article.id) == 6
        assert store.get(article.id).like_count == 7

    def test_missing_article(self):
        service = EngagementService(InMemoryArticleStore())
        with pytest.raises(ArticleNotFoundError):
            service.like_article(str(uuid.uuid4()))
        with pytest.raises(ArticleNotFoundError):
            service.share_article(str(uuid.uuid4()))
