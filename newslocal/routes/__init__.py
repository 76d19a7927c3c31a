"""
API route modules.
"""

from .news import router as news_router
from .misc import router as misc_router

__all__ = [
    "news_router",
    "misc_router",
]
