"""Per-IP rate limiting middleware for Starlette using throttled-py."""

import logging
from collections.abc import Awaitable, Callable
from typing import Any

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from throttled import RateLimiterType, Throttled, rate_limiter, store

logger = logging.getLogger(__name__)

DEFAULT_RETRY_AFTER_SECONDS = 60.0
UNLIMITED_PATHS = frozenset({"/health"})


def extract_client_ip(request: Request) -> str:
    """Return the original client IP, honouring X-Forwarded-For.

    The first address in an X-Forwarded-For chain is the client; proxies
    append themselves after it.
    """
    forwarded_for = request.headers.get("X-Forwarded-For")
    if forwarded_for:
        client_ip = forwarded_for.split(",")[0].strip()
        if client_ip:
            return client_ip

    if request.client and request.client.host:
        return request.client.host

    logger.warning("Could not determine client IP, using 'unknown'")
    return "unknown"


def retry_after_seconds(result: Any) -> float:
    """Read the retry delay from a throttled-py result, with a default."""
    state = getattr(result, "state", None)
    retry_after = getattr(state, "retry_after", None)
    if retry_after is None:
        return DEFAULT_RETRY_AFTER_SECONDS
    return float(retry_after)


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Token bucket rate limit per client IP for the price API."""

    def __init__(self, app: Callable, requests_per_minute: int = 100) -> None:
        """Initialize rate limiting middleware.

        Args:
            app: The ASGI application to wrap.
            requests_per_minute: Requests allowed per IP per minute.
        """
        super().__init__(app)
        self.requests_per_minute = requests_per_minute
        self.quota = rate_limiter.per_min(requests_per_minute, burst=requests_per_minute)
        self.rate_limiter_store = store.MemoryStore()
        logger.info(f"Rate limiting enabled: {requests_per_minute} requests per minute per IP")

    def _is_limited(self, client_ip: str) -> tuple[bool, float]:
        throttle = Throttled(
            key=client_ip,
            using=RateLimiterType.TOKEN_BUCKET.value,
            quota=self.quota,
            store=self.rate_limiter_store,
        )
        result = throttle.limit()
        if not result.limited:
            return False, 0.0
        return True, retry_after_seconds(result)

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        """Reject the request with 429 when the client's bucket is empty."""
        if request.url.path in UNLIMITED_PATHS:
            return await call_next(request)

        client_ip = extract_client_ip(request)
        limited, retry_after = self._is_limited(client_ip)
        if limited:
            logger.warning(
                f"Rate limit exceeded for IP {client_ip}, retry after {retry_after} seconds"
            )
            return JSONResponse(
                {"error": "Rate limit exceeded. Please try again later."},
                status_code=429,
                headers={"Retry-After": str(int(retry_after))},
            )

        response: Response = await call_next(request)
        return response
