"""Transport Middleware - rate limiting and security headers for every response.

Invariants:
    - Security headers set on ALL responses, including errors, 429s and unexpected 500s
    - Unexpected exceptions become 500 {"error": "Internal server error"} INSIDE
      the header middlewares, so CORS and security headers still apply
    - Rate limit keyed by client host; over-budget → 429 + Retry-After, handler not called
    - 429 body comes from RateLimitExceededError.to_response() (single message source)

Design Decisions:
    - BaseHTTPMiddleware: simple request/response hooks, no streaming bodies here
    - Limiter instance passed in (not global) so each app/test gets its own window
"""

import logging

from fastapi import Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from zodiac_api.core.errors import INTERNAL_ERROR_MESSAGE, RateLimitExceededError
from zodiac_api.infrastructure.rate_limiter import SlidingWindowRateLimiter

logger = logging.getLogger(__name__)

CONTENT_SECURITY_POLICY = (
    "default-src 'self'; "
    "style-src 'self' 'unsafe-inline'; "
    "script-src 'self'; "
    "img-src 'self' data: https:"
)

SECURITY_HEADERS: dict[str, str] = {
    "Content-Security-Policy": CONTENT_SECURITY_POLICY,
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "Referrer-Policy": "no-referrer",
    "Cross-Origin-Opener-Policy": "same-origin",
}


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Attach the fixed security header set to every response."""

    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        for name, value in SECURITY_HEADERS.items():
            response.headers.setdefault(name, value)
        return response


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Reject requests once a client exceeds its sliding-window budget."""

    def __init__(self, app, limiter: SlidingWindowRateLimiter):
        super().__init__(app)
        self.limiter = limiter

    async def dispatch(self, request: Request, call_next):
        client = request.client.host if request.client else "unknown"
        decision = await self.limiter.hit(client)
        if not decision.allowed:
            exc = RateLimitExceededError(decision.retry_after_seconds)
            logger.warning(
                "Rate limit exceeded",
                extra={
                    "error_code": exc.code,
                    "client": client,
                    "path": request.url.path,
                },
            )
            return JSONResponse(
                status_code=exc.http_status,
                content=exc.to_response(),
                headers={"Retry-After": str(exc.retry_after_seconds)},
            )
        response = await call_next(request)
        response.headers["X-RateLimit-Limit"] = str(self.limiter.max_requests)
        response.headers["X-RateLimit-Remaining"] = str(decision.remaining)
        return response


class UnhandledErrorMiddleware(BaseHTTPMiddleware):
    """Turn unexpected exceptions into the generic 500 inside the header middlewares."""

    async def dispatch(self, request: Request, call_next):
        try:
            return await call_next(request)
        except Exception as exc:
            logger.error(
                f"Unhandled exception on {request.url.path}: {exc}",
                exc_info=True,
                extra={"path": request.url.path},
            )
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={"error": INTERNAL_ERROR_MESSAGE},
            )
