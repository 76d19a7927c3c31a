"""
NewsLocal API Server

FastAPI application providing endpoints for:
- Headlines, category listings and search (paginated)
- Breaking, trending and recommended selections
- Article detail
- Like and share counters
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from . import __version__
from .config import config, state
from .database import Database
from .exceptions import register_exception_handlers
from .rate_limit import setup_rate_limiting
from .routes import misc_router, news_router

logging.basicConfig(
    level=config.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize and cleanup application resources."""
    # Startup - skip if already initialized (e.g., by tests)
    if state.db is None:
        state.db = Database(config.DB_PATH, timeout=config.DB_TIMEOUT_SECONDS)
        logger.info(f"Database ready at {config.DB_PATH}")

    yield

    logger.info("Shutting down")


app = FastAPI(
    title="NewsLocal API",
    version=__version__,
    lifespan=lifespan
)

register_exception_handlers(app)
setup_rate_limiting(app)

# Include routers
app.include_router(misc_router)
app.include_router(news_router, prefix=config.API_PREFIX)
