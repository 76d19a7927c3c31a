"""
Service layer for business logic.

Services encapsulate business logic, keeping routes as thin HTTP adapters.
Each service receives its store via constructor injection.

Usage in routes:
    from ..services import NewsServiceDep

    @router.get("/headlines")
    async def headlines(service: NewsServiceDep):
        return service.get_top_headlines()
"""

from typing import Annotated

from fastapi import Depends

from ..config import get_db
from ..database import Database

from .news_service import NewsService
from .engagement_service import EngagementService

__all__ = [
    # Services
    "NewsService",
    "EngagementService",
    # Dependency factories
    "get_news_service",
    "get_engagement_service",
    # Type aliases for dependency injection
    "NewsServiceDep",
    "EngagementServiceDep",
]


def get_news_service(db: Annotated[Database, Depends(get_db)]) -> NewsService:
    """Dependency to get NewsService instance."""
    return NewsService(store=db.articles)


def get_engagement_service(db: Annotated[Database, Depends(get_db)]) -> EngagementService:
    """Dependency to get EngagementService instance."""
    return EngagementService(store=db.articles)


NewsServiceDep = Annotated[NewsService, Depends(get_news_service)]
EngagementServiceDep = Annotated[EngagementService, Depends(get_engagement_service)]
