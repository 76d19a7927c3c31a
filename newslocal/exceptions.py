"""
Error types and HTTP error mapping.

Services raise the domain errors defined here; the handlers registered by
register_exception_handlers() turn them into JSON responses with fixed
messages so store internals never reach the client.
"""

import logging
from contextlib import contextmanager
from typing import Iterator

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class NewsError(Exception):
    """Base class for errors raised by the news services."""


class ValidationError(NewsError):
    """A parameter is missing or malformed."""


class ArticleNotFoundError(NewsError):
    """No article exists with the requested id."""

    def __init__(self, article_id: str):
        super().__init__(f"Article not found: {article_id}")
        self.article_id = article_id


class StoreError(NewsError):
    """The underlying data store failed."""


# Client-facing messages for request parameters, keyed by parameter name
FIELD_MESSAGES = {
    "page": "Page must be a positive integer",
    "pageSize": "Page size must be between 1 and 50",
    "category": "Category is required",
    "q": "Search query is required",
    "article_id": "Invalid article ID",
}


@contextmanager
def store_failure(detail: str) -> Iterator[None]:
    """
    Convert a StoreError raised inside the block into a 500 with a fixed message.

    Usage:
        with store_failure("Failed to fetch headlines"):
            return service.get_top_headlines(page, page_size)
    """
    try:
        yield
    except StoreError as e:
        logger.exception(detail)
        raise HTTPException(status_code=500, detail=detail) from e


def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report parameter validation failures as 400 instead of FastAPI's 422."""
    errors = []
    for error in exc.errors():
        field = str(error["loc"][-1]) if error.get("loc") else ""
        errors.append({
            "field": field,
            "message": FIELD_MESSAGES.get(field, "Invalid value"),
        })
    return JSONResponse(
        status_code=400,
        content={"detail": "Invalid request parameters", "errors": errors},
    )


def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"detail": str(exc)})


def not_found_handler(request: Request, exc: ArticleNotFoundError) -> JSONResponse:
    return JSONResponse(status_code=404, content={"detail": "Article not found"})


def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
    """Fallback for store failures not wrapped by store_failure()."""
    logger.error(f"Unhandled store error on {request.url.path}: {exc}")
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


def register_exception_handlers(app: FastAPI):
    """Install the error-to-response mapping on a FastAPI app."""
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(ArticleNotFoundError, not_found_handler)
    app.add_exception_handler(StoreError, store_error_handler)
