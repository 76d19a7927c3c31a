"""
Database module - SQLite storage for news articles.

Uses repository pattern for better separation of concerns.
"""

from .base import ArticleStore
from .connection import DatabaseConnection
from .models import ArticlePage, Category, Counter, DBArticle
from .article_repository import ArticleRepository
from .database import Database

__all__ = [
    "Database",
    "DatabaseConnection",
    "ArticleStore",
    "ArticleRepository",
    "ArticlePage",
    "Category",
    "Counter",
    "DBArticle",
]
