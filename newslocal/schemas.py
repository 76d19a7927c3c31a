"""
Pydantic models for API request/response validation.

Field names are snake_case in Python and camelCase on the wire.
"""

import humps
from pydantic import BaseModel, ConfigDict

from .database import ArticlePage, DBArticle


class CamelCaseModel(BaseModel):
    model_config = ConfigDict(alias_generator=humps.camelize, populate_by_name=True)


# ─────────────────────────────────────────────────────────────
# Article Schemas
# ─────────────────────────────────────────────────────────────

class ArticleResponse(CamelCaseModel):
    """Full article as stored."""
    id: str
    title: str
    content: str
    summary: str
    author: str
    published_at: str
    category: str
    image_url: str | None = None
    source_id: str
    source_name: str
    source_logo_url: str | None = None
    is_breaking: bool
    read_time: int
    tags: list[str] = []
    share_count: int
    like_count: int
    created_at: str
    updated_at: str

    @classmethod
    def from_db(cls, article: DBArticle) -> "ArticleResponse":
        return cls(
            id=article.id,
            title=article.title,
            content=article.content,
            summary=article.summary,
            author=article.author,
            published_at=article.published_at.isoformat(),
            category=article.category,
            image_url=article.image_url,
            source_id=article.source_id,
            source_name=article.source_name,
            source_logo_url=article.source_logo_url,
            is_breaking=article.is_breaking,
            read_time=article.read_time,
            tags=list(article.tags),
            share_count=article.share_count,
            like_count=article.like_count,
            created_at=article.created_at.isoformat(),
            updated_at=article.updated_at.isoformat(),
        )


class ArticleListResponse(CamelCaseModel):
    """Bare list of articles (breaking, trending, recommended)."""
    articles: list[ArticleResponse]

    @classmethod
    def from_db(cls, articles: list[DBArticle]) -> "ArticleListResponse":
        return cls(articles=[ArticleResponse.from_db(a) for a in articles])


class ArticlePageResponse(CamelCaseModel):
    """Paginated envelope."""
    articles: list[ArticleResponse]
    total_results: int
    page: int
    total_pages: int

    @classmethod
    def from_db(cls, page: ArticlePage) -> "ArticlePageResponse":
        return cls(
            articles=[ArticleResponse.from_db(a) for a in page.articles],
            total_results=page.total_results,
            page=page.page,
            total_pages=page.total_pages,
        )


# ─────────────────────────────────────────────────────────────
# Engagement Schemas
# ─────────────────────────────────────────────────────────────

class LikeResponse(CamelCaseModel):
    like_count: int


class ShareResponse(CamelCaseModel):
    share_count: int


# ─────────────────────────────────────────────────────────────
# Misc Schemas
# ─────────────────────────────────────────────────────────────

class HealthResponse(CamelCaseModel):
    status: str
    version: str
    article_count: int
