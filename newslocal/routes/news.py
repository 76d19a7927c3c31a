"""
News routes: headlines, category, search, curated lists, detail, like/share.
"""

import uuid
from typing import Annotated

from fastapi import APIRouter, Path, Query

from ..exceptions import store_failure
from ..schemas import (
    ArticleResponse,
    ArticleListResponse,
    ArticlePageResponse,
    LikeResponse,
    ShareResponse,
)
from ..services import EngagementServiceDep, NewsServiceDep
from ..services.news_service import DEFAULT_PAGE_SIZE, MAX_PAGE, MAX_PAGE_SIZE

router = APIRouter(prefix="/news", tags=["news"])

# Hyphenated 8-4-4-4-12 form only
ArticleId = Annotated[
    str,
    Path(pattern=r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$"),
]


# ─────────────────────────────────────────────────────────────
# Paginated listings
# ─────────────────────────────────────────────────────────────

@router.get("/headlines")
async def get_top_headlines(
    service: NewsServiceDep,
    page: int = Query(default=1, ge=1, le=MAX_PAGE),
    page_size: int = Query(default=DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE, alias="pageSize"),
) -> ArticlePageResponse:
    """All articles, newest first."""
    with store_failure("Failed to fetch headlines"):
        result = service.get_top_headlines(page=page, page_size=page_size)
    return ArticlePageResponse.from_db(result)


@router.get("/category")
async def get_news_by_category(
    service: NewsServiceDep,
    category: str = Query(min_length=1),
    page: int = Query(default=1, ge=1, le=MAX_PAGE),
    page_size: int = Query(default=DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE, alias="pageSize"),
) -> ArticlePageResponse:
    """Articles in one category. Unknown categories return an empty page."""
    with store_failure("Failed to fetch news by category"):
        result = service.get_news_by_category(category, page=page, page_size=page_size)
    return ArticlePageResponse.from_db(result)


@router.get("/search")
async def search_news(
    service: NewsServiceDep,
    q: str = Query(min_length=1),
    page: int = Query(default=1, ge=1, le=MAX_PAGE),
    page_size: int = Query(default=DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE, alias="pageSize"),
) -> ArticlePageResponse:
    """Search title, content and summary, plus exact tag matches."""
    with store_failure("Failed to search news"):
        result = service.search_news(q, page=page, page_size=page_size)
    return ArticlePageResponse.from_db(result)


# ─────────────────────────────────────────────────────────────
# Curated lists
# ─────────────────────────────────────────────────────────────

@router.get("/breaking")
async def get_breaking_news(service: NewsServiceDep) -> ArticleListResponse:
    with store_failure("Failed to fetch breaking news"):
        articles = service.get_breaking_news()
    return ArticleListResponse.from_db(articles)


@router.get("/trending")
async def get_trending_news(service: NewsServiceDep) -> ArticleListResponse:
    with store_failure("Failed to fetch trending news"):
        articles = service.get_trending_news()
    return ArticleListResponse.from_db(articles)


@router.get("/recommended")
async def get_recommended_news(service: NewsServiceDep) -> ArticleListResponse:
    with store_failure("Failed to fetch recommended news"):
        articles = service.get_recommended_news()
    return ArticleListResponse.from_db(articles)


# ─────────────────────────────────────────────────────────────
# Single article
# ─────────────────────────────────────────────────────────────

@router.get("/detail/{article_id}")
async def get_article_detail(
    article_id: ArticleId,
    service: NewsServiceDep,
) -> ArticleResponse:
    """Full article by id. 404 if it does not exist."""
    with store_failure("Failed to fetch article"):
        article = service.get_article(str(uuid.UUID(article_id)))
    return ArticleResponse.from_db(article)


@router.post("/{article_id}/like")
async def like_article(
    article_id: ArticleId,
    service: EngagementServiceDep,
) -> LikeResponse:
    """Add a like and return the updated count."""
    with store_failure("Failed to like article"):
        like_count = service.like_article(str(uuid.UUID(article_id)))
    return LikeResponse(like_count=like_count)


@router.post("/{article_id}/share")
async def share_article(
    article_id: ArticleId,
    service: EngagementServiceDep,
) -> ShareResponse:
    """Record a share and return the updated count."""
    with store_failure("Failed to share article"):
        share_count = service.share_article(str(uuid.UUID(article_id)))
    return ShareResponse(share_count=share_count)
