"""Zodiac API - FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map ZodiacError → flat JSON error responses
    - CORS, rate limit and security headers configured from settings
    - Entry store created per app, attached to app.state, initialized on startup

Design Decisions:
    - create_app(settings) factory: tests build isolated apps with their own
      data file and limiter; module-level `app` serves uvicorn
    - Middleware order: CORS outermost, then security headers, then rate limit,
      then the unhandled-error guard innermost,
      so 429 and unexpected 500 responses still carry CORS and security headers
    - Static client mounted AFTER API routes so /api/* takes precedence
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from zodiac_api.api.error_handlers import register_error_handlers
from zodiac_api.api.middleware import (
    RateLimitMiddleware, SecurityHeadersMiddleware, UnhandledErrorMiddleware,
)
from zodiac_api.api.routes import calculate, entries, health, signs
from zodiac_api.config import Settings, get_settings
from zodiac_api.infrastructure.entry_store import JsonFileEntryStore
from zodiac_api.infrastructure.observability import setup_logging
from zodiac_api.infrastructure.rate_limiter import SlidingWindowRateLimiter

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).parent / "static"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    await app.state.entry_store.initialize()
    logger.info(
        f"Zodiac API started, data file: {settings.data_file}",
        extra={"path": settings.data_file},
    )
    yield
    logger.info("Zodiac API shutting down")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build a fully wired application."""
    settings = settings or get_settings()
    app = FastAPI(title="Zodiac API", version="1.0.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.entry_store = JsonFileEntryStore(
        settings.data_file,
        retention_cap=settings.entry_retention_cap,
        recent_limit=settings.recent_entries_limit,
    )

    app.add_middleware(UnhandledErrorMiddleware)
    if settings.rate_limit_enabled:
        app.state.rate_limiter = SlidingWindowRateLimiter(
            max_requests=settings.rate_limit_max_requests,
            window_seconds=settings.rate_limit_window_seconds,
        )
        app.add_middleware(RateLimitMiddleware, limiter=app.state.rate_limiter)
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    app.include_router(health.router)
    app.include_router(entries.router)
    app.include_router(calculate.router)
    app.include_router(signs.router)

    if STATIC_DIR.is_dir():
        app.mount("/", StaticFiles(directory=STATIC_DIR, html=True), name="static")

    return app


app = create_app()
