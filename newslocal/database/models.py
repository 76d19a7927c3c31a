"""
Database models - dataclasses for database entities.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class Category(str, Enum):
    """Fixed set of article categories."""
    TECHNOLOGY = "technology"
    BUSINESS = "business"
    SPORTS = "sports"
    HEALTH = "health"
    SCIENCE = "science"
    ENTERTAINMENT = "entertainment"
    POLITICS = "politics"
    WORLD = "world"


class Counter(str, Enum):
    """Engagement counters that can be incremented."""
    LIKES = "like_count"
    SHARES = "share_count"


@dataclass
class DBArticle:
    id: str
    title: str
    content: str
    summary: str
    author: str
    published_at: datetime
    category: str
    source_id: str
    source_name: str
    read_time: int
    created_at: datetime
    updated_at: datetime
    image_url: str | None = None
    source_logo_url: str | None = None
    is_breaking: bool = False
    tags: list[str] = field(default_factory=list)
    share_count: int = 0
    like_count: int = 0


@dataclass
class ArticlePage:
    """One page of a paginated article query."""
    articles: list[DBArticle]
    total_results: int
    page: int
    total_pages: int
