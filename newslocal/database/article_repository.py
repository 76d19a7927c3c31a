"""
Article repository - SQLite implementation of the article store.
"""

import json
import uuid
from datetime import datetime, timezone
from typing import Any, Iterable

from .base import ArticleStore
from .connection import DatabaseConnection
from .converters import row_to_article, to_db_timestamp
from .models import Category, Counter, DBArticle

_NEWEST_FIRST = "ORDER BY published_at DESC, id ASC"

_SEARCH_CLAUSE = """(
    instr(casefold(title), casefold(:query)) > 0
    OR instr(casefold(content), casefold(:query)) > 0
    OR instr(casefold(summary), casefold(:query)) > 0
    OR EXISTS (SELECT 1 FROM json_each(articles.tags) WHERE json_each.value = :query)
)"""


class ArticleRepository(ArticleStore):
    """Repository for article operations."""

    def __init__(self, db: DatabaseConnection):
        self._db = db

    # ─────────────────────────────────────────────────────────────
    # Ingestion
    # ─────────────────────────────────────────────────────────────

    def add(
        self,
        title: str,
        content: str,
        summary: str,
        author: str,
        published_at: datetime,
        category: str,
        source_id: str,
        source_name: str,
        read_time: int,
        image_url: str | None = None,
        source_logo_url: str | None = None,
        is_breaking: bool = False,
        tags: list[str] | None = None,
        share_count: int = 0,
        like_count: int = 0,
        article_id: str | None = None,
    ) -> str:
        """Add a new article. Returns the article ID."""
        return self.add_many([{
            "title": title,
            "content": content,
            "summary": summary,
            "author": author,
            "published_at": published_at,
            "category": category,
            "source_id": source_id,
            "source_name": source_name,
            "read_time": read_time,
            "image_url": image_url,
            "source_logo_url": source_logo_url,
            "is_breaking": is_breaking,
            "tags": tags,
            "share_count": share_count,
            "like_count": like_count,
            "article_id": article_id,
        }])[0]

    def add_many(self, articles: Iterable[dict[str, Any]]) -> list[str]:
        """
        Insert a batch of articles in one transaction.

        Each dict takes the keyword arguments of add(). Returns the new IDs
        in input order. Raises ValueError on an invalid article, in which
        case nothing is inserted.
        """
        rows = [self._to_row(article) for article in articles]
        if not rows:
            return []

        with self._db.conn(immediate=True) as conn:
            conn.executemany(
                """INSERT INTO articles
                   (id, title, content, summary, author, published_at, category,
                    image_url, source_id, source_name, source_logo_url, is_breaking,
                    read_time, tags, share_count, like_count, created_at, updated_at)
                   VALUES (:id, :title, :content, :summary, :author, :published_at, :category,
                           :image_url, :source_id, :source_name, :source_logo_url, :is_breaking,
                           :read_time, :tags, :share_count, :like_count, :created_at, :updated_at)""",
                rows,
            )
        return [row["id"] for row in rows]

    @staticmethod
    def _to_row(article: dict[str, Any]) -> dict[str, Any]:
        """Validate an incoming article and shape it for INSERT."""
        for name in ("title", "content", "summary", "author", "source_id", "source_name"):
            if not str(article.get(name) or "").strip():
                raise ValueError(f"Article field '{name}' must not be empty")

        try:
            category = Category(article.get("category")).value
        except ValueError:
            raise ValueError(f"Unknown category: {article.get('category')!r}") from None

        read_time = int(article.get("read_time") or 0)
        if read_time <= 0:
            raise ValueError("Article read_time must be a positive number of minutes")

        share_count = int(article.get("share_count") or 0)
        like_count = int(article.get("like_count") or 0)
        if share_count < 0 or like_count < 0:
            raise ValueError("Engagement counters must not be negative")

        published_at = article.get("published_at")
        if not isinstance(published_at, datetime):
            raise ValueError("Article published_at must be a datetime")

        now = to_db_timestamp(datetime.now(timezone.utc))
        return {
            "id": str(uuid.UUID(str(article["article_id"]))) if article.get("article_id") else str(uuid.uuid4()),
            "title": article["title"],
            "content": article["content"],
            "summary": article["summary"],
            "author": article["author"],
            "published_at": to_db_timestamp(published_at),
            "category": category,
            "image_url": article.get("image_url"),
            "source_id": article["source_id"],
            "source_name": article["source_name"],
            "source_logo_url": article.get("source_logo_url"),
            "is_breaking": bool(article.get("is_breaking")),
            "read_time": read_time,
            "tags": json.dumps([str(t) for t in article.get("tags") or []]),
            "share_count": share_count,
            "like_count": like_count,
            "created_at": now,
            "updated_at": now,
        }

    # ─────────────────────────────────────────────────────────────
    # Queries
    # ─────────────────────────────────────────────────────────────

    def get(self, article_id: str) -> DBArticle | None:
        """Get single article by ID."""
        with self._db.conn() as conn:
            row = conn.execute(
                "SELECT * FROM articles WHERE id = ?", (article_id,)
            ).fetchone()
            return row_to_article(row) if row else None

    def count(self) -> int:
        """Total number of stored articles."""
        with self._db.conn() as conn:
            return conn.execute("SELECT COUNT(*) AS cnt FROM articles").fetchone()["cnt"]

    def find_page(
        self,
        category: str | None = None,
        query: str | None = None,
        limit: int = 20,
        offset: int = 0,
    ) -> tuple[list[DBArticle], int]:
        where = "WHERE 1=1"
        params: dict[str, Any] = {"limit": limit, "offset": offset}

        if category is not None:
            where += " AND category = :category"
            params["category"] = category
        if query is not None:
            where += f" AND {_SEARCH_CLAUSE}"
            params["query"] = query

        with self._db.conn() as conn:
            total = conn.execute(
                f"SELECT COUNT(*) AS cnt FROM articles {where}", params
            ).fetchone()["cnt"]
            rows = conn.execute(
                f"SELECT * FROM articles {where} {_NEWEST_FIRST} LIMIT :limit OFFSET :offset",
                params,
            ).fetchall()
            return [row_to_article(row) for row in rows], total

    def find_breaking(self, limit: int) -> list[DBArticle]:
        with self._db.conn() as conn:
            rows = conn.execute(
                f"SELECT * FROM articles WHERE is_breaking = 1 {_NEWEST_FIRST} LIMIT ?",
                (limit,),
            ).fetchall()
            return [row_to_article(row) for row in rows]

    def find_trending(self, limit: int) -> list[DBArticle]:
        with self._db.conn() as conn:
            rows = conn.execute(
                """SELECT * FROM articles
                   ORDER BY share_count DESC, like_count DESC, published_at DESC, id ASC
                   LIMIT ?""",
                (limit,),
            ).fetchall()
            return [row_to_article(row) for row in rows]

    def find_recommended(
        self,
        limit: int,
        min_shares: int,
        min_likes: int,
    ) -> list[DBArticle]:
        with self._db.conn() as conn:
            rows = conn.execute(
                f"""SELECT * FROM articles
                    WHERE share_count > ? OR like_count > ?
                    {_NEWEST_FIRST}
                    LIMIT ?""",
                (min_shares, min_likes, limit),
            ).fetchall()
            return [row_to_article(row) for row in rows]

    # ─────────────────────────────────────────────────────────────
    # Counters
    # ─────────────────────────────────────────────────────────────

    def increment_counter(self, article_id: str, counter: Counter) -> int | None:
        """
        Add 1 to a counter in a single UPDATE and read the result back.

        The increment happens inside SQLite, so concurrent writers serialize
        on the database lock instead of overwriting each other.
        """
        column = Counter(counter).value
        with self._db.conn(immediate=True) as conn:
            rows = conn.execute(
                f"""UPDATE articles
                    SET {column} = {column} + 1, updated_at = ?
                    WHERE id = ?
                    RETURNING {column} AS value""",
                (to_db_timestamp(datetime.now(timezone.utc)), article_id),
            ).fetchall()
            return int(rows[0]["value"]) if rows else None
