"""
Miscellaneous routes: health check.
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from .. import __version__
from ..config import get_db
from ..database import Database
from ..exceptions import store_failure
from ..schemas import HealthResponse

router = APIRouter(tags=["misc"])


@router.get("/health")
async def health_check(db: Annotated[Database, Depends(get_db)]) -> HealthResponse:
    """API health check."""
    with store_failure("Database unavailable"):
        count = db.article_count()
    return HealthResponse(status="ok", version=__version__, article_count=count)
