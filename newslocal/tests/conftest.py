"""
Pytest fixtures for backend tests.
"""

import os
import tempfile
from datetime import datetime, timedelta, timezone
from pathlib import Path

# Rate limiting is keyed per client IP, and every TestClient shares one
os.environ.setdefault("RATE_LIMIT_PER_MINUTE", "0")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from newslocal.config import state  # noqa: E402
from newslocal.database import Database  # noqa: E402
from newslocal.server import app  # noqa: E402


BASE_TIME = datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)


def make_article(**overrides) -> dict:
    """Build a valid article dict for ingestion, overriding any field."""
    article = {
        "title": "Test Article",
        "content": "This is the content of a test article.",
        "summary": "A test summary.",
        "author": "Test Author",
        "published_at": BASE_TIME,
        "category": "technology",
        "source_id": "source_1",
        "source_name": "Test Source",
        "read_time": 3,
        "image_url": None,
        "source_logo_url": None,
        "is_breaking": False,
        "tags": [],
        "share_count": 0,
        "like_count": 0,
    }
    article.update(overrides)
    return article


@pytest.fixture
def temp_db_path():
    """Create a temporary database file path."""
    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as f:
        yield Path(f.name)
    # Cleanup
    if os.path.exists(f.name):
        os.unlink(f.name)


@pytest.fixture
def test_db(temp_db_path):
    """Create a test database instance."""
    db = Database(temp_db_path)
    yield db


@pytest.fixture
def client(test_db):
    """Create a test client with an isolated, empty database."""
    original_db = state.db
    state.db = test_db

    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client

    state.db = original_db


@pytest.fixture
def client_with_data(test_db):
    """Test client with some sample data pre-populated."""
    original_db = state.db
    state.db = test_db

    ids = test_db.add_articles([
        make_article(
            title="Technology News",
            content="Technology content here",
            summary="Tech summary",
            published_at=BASE_TIME - timedelta(seconds=1),
            category="technology",
            tags=["technology"],
            share_count=50,
            like_count=100,
        ),
        make_article(
            title="Breaking Politics",
            content="Politics content here",
            summary="Politics summary",
            published_at=BASE_TIME - timedelta(seconds=2),
            category="politics",
            is_breaking=True,
            tags=["politics"],
            share_count=200,
            like_count=300,
        ),
        make_article(
            title="Sports News",
            content="Sports content here",
            summary="Sports summary",
            published_at=BASE_TIME - timedelta(seconds=3),
            category="sports",
            tags=["sports", "Olympics"],
            share_count=150,
            like_count=250,
        ),
    ])

    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client, {
            "article_ids": ids,
            "tech_id": ids[0],
            "politics_id": ids[1],
            "sports_id": ids[2],
        }

    state.db = original_db


@pytest.fixture
def article_factory():
    """Factory for valid article dicts (see make_article)."""
    return make_article
