"""
Per-client rate limiting.

Uses slowapi with an in-memory window keyed by client IP. Every route gets
the default limit. Setting RATE_LIMIT_PER_MINUTE to 0 turns limiting off.
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address

from .config import config

DEFAULT_RETRY_AFTER = 60


def get_rate_limit(per_minute: int | None = None) -> str:
    """Limit string for slowapi, e.g. '100/minute'."""
    if per_minute is None:
        per_minute = config.RATE_LIMIT_PER_MINUTE
    return f"{max(per_minute, 1)}/minute"


def create_limiter(per_minute: int | None = None) -> Limiter:
    if per_minute is None:
        per_minute = config.RATE_LIMIT_PER_MINUTE
    return Limiter(
        key_func=get_remote_address,
        default_limits=[get_rate_limit(per_minute)],
        enabled=per_minute > 0,
        storage_uri="memory://",  # resets on restart
    )


limiter = create_limiter()


def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    retry_after = getattr(exc, "retry_after", DEFAULT_RETRY_AFTER)
    return JSONResponse(
        status_code=429,
        content={"detail": f"Rate limit exceeded: {exc.detail}", "retry_after": retry_after},
        headers={"Retry-After": str(retry_after)},
    )


def setup_rate_limiting(app: FastAPI, app_limiter: Limiter | None = None):
    """Attach a limiter, its middleware and the 429 handler to an app."""
    app.state.limiter = app_limiter or limiter
    app.add_middleware(SlowAPIMiddleware)
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
