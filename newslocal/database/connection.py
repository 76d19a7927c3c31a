"""
Database connection management and schema initialization.
"""

import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from ..exceptions import StoreError
from .models import Category

_CATEGORY_LIST = ", ".join(f"'{c.value}'" for c in Category)


def _casefold(value: str | None) -> str | None:
    """Unicode-aware lowercasing for SQL, since SQLite lower() only folds ASCII."""
    return value.casefold() if value is not None else None


class DatabaseConnection:
    """Manages database connection and schema."""

    def __init__(self, db_path: Path, timeout: float = 30.0):
        self.db_path = db_path
        self.timeout = timeout
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._init_schema()

    @contextmanager
    def conn(self, immediate: bool = False) -> Iterator[sqlite3.Connection]:
        """
        Get database connection with row factory.

        Commits on success, rolls back on error. Any sqlite3 failure is
        re-raised as StoreError.

        Args:
            immediate: Take the write lock up front (BEGIN IMMEDIATE). Writers
                       must use this; a deferred transaction that later upgrades
                       its read lock can fail with SQLITE_BUSY without waiting.
        """
        try:
            connection = sqlite3.connect(self.db_path, timeout=self.timeout)
        except sqlite3.Error as e:
            raise StoreError(f"Could not open database: {e}") from e
        connection.row_factory = sqlite3.Row
        connection.create_function("casefold", 1, _casefold, deterministic=True)
        try:
            if immediate:
                connection.execute("BEGIN IMMEDIATE")
            yield connection
            connection.commit()
        except sqlite3.Error as e:
            connection.rollback()
            raise StoreError(str(e)) from e
        except Exception:
            connection.rollback()
            raise
        finally:
            connection.close()

    def _init_schema(self):
        """Initialize database schema."""
        with self.conn() as connection:
            connection.executescript(f"""
                CREATE TABLE IF NOT EXISTS articles (
                    id TEXT PRIMARY KEY,
                    title TEXT NOT NULL CHECK (length(title) > 0),
                    content TEXT NOT NULL CHECK (length(content) > 0),
                    summary TEXT NOT NULL CHECK (length(summary) > 0),
                    author TEXT NOT NULL CHECK (length(author) > 0),
                    published_at TIMESTAMP NOT NULL,
                    category TEXT NOT NULL CHECK (category IN ({_CATEGORY_LIST})),
                    image_url TEXT,
                    source_id TEXT NOT NULL,
                    source_name TEXT NOT NULL,
                    source_logo_url TEXT,
                    is_breaking BOOLEAN NOT NULL DEFAULT FALSE,
                    read_time INTEGER NOT NULL CHECK (read_time > 0),
                    tags TEXT NOT NULL DEFAULT '[]',
                    share_count INTEGER NOT NULL DEFAULT 0 CHECK (share_count >= 0),
                    like_count INTEGER NOT NULL DEFAULT 0 CHECK (like_count >= 0),
                    created_at TIMESTAMP NOT NULL,
                    updated_at TIMESTAMP NOT NULL
                );

                CREATE INDEX IF NOT EXISTS idx_articles_published ON articles(published_at DESC);
                CREATE INDEX IF NOT EXISTS idx_articles_category ON articles(category, published_at DESC);
                CREATE INDEX IF NOT EXISTS idx_articles_breaking ON articles(is_breaking, published_at DESC);
                CREATE INDEX IF NOT EXISTS idx_articles_source ON articles(source_id);
                CREATE INDEX IF NOT EXISTS idx_articles_engagement ON articles(share_count DESC, like_count DESC);
            """)
