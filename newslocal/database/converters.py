"""
Database row converters - convert SQLite rows to dataclasses.
"""

import json
import sqlite3
from datetime import datetime, timezone

from .models import DBArticle


def to_db_timestamp(value: datetime) -> str:
    """
    Serialize a datetime for storage.

    All timestamps are stored as UTC with microsecond precision so that
    string comparison in SQL orders them chronologically. Naive values
    are taken to be UTC already.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat(timespec="microseconds")


def from_db_timestamp(value: str | None) -> datetime:
    if not value:
        return datetime.now(timezone.utc)
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        return datetime.now(timezone.utc)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def row_to_article(row: sqlite3.Row) -> DBArticle:
    """Convert a database row to a DBArticle."""
    tags: list[str] = []
    if row["tags"]:
        try:
            tags = [str(t) for t in json.loads(row["tags"])]
        except (json.JSONDecodeError, TypeError):
            pass

    return DBArticle(
        id=row["id"],
        title=row["title"],
        content=row["content"],
        summary=row["summary"],
        author=row["author"],
        published_at=from_db_timestamp(row["published_at"]),
        category=row["category"],
        image_url=row["image_url"],
        source_id=row["source_id"],
        source_name=row["source_name"],
        source_logo_url=row["source_logo_url"],
        is_breaking=bool(row["is_breaking"]),
        read_time=int(row["read_time"]),
        tags=tags,
        share_count=int(row["share_count"] or 0),
        like_count=int(row["like_count"] or 0),
        created_at=from_db_timestamp(row["created_at"]),
        updated_at=from_db_timestamp(row["updated_at"]),
    )
