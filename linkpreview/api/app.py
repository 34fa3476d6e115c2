"""FastAPI application factory.

Lifespan
--------
On startup the app builds a single :class:`~linkpreview.scraper.Fetcher`
(shared across all requests via ``request.app.state.fetcher``).  On shutdown
it closes the fetcher's connection pool.

Routers
-------
    /        — link preview (``GET /?url=...``)
    /health  — liveness probe
"""

from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager
from typing import AsyncIterator, Awaitable, Callable

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from linkpreview.config import settings
from linkpreview.logging_setup import configure_logging
from linkpreview.scraper.fetcher import Fetcher

from linkpreview.api.routers import preview as preview_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Create the shared fetcher on startup and close it on shutdown."""
    fetcher = Fetcher(
        default_user_agent=settings.default_user_agent,
        timeout=settings.fetch_timeout,
    )
    app.state.fetcher = fetcher
    logger.info("Link preview service ready (default UA %r)", settings.default_user_agent)
    try:
        yield
    finally:
        await fetcher.aclose()


async def _log_requests(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    """Write one access-log line per request once the response is ready."""
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info(
        "%s %s -> %s (%.1f ms)",
        request.method,
        request.url.path,
        response.status_code,
        elapsed_ms,
    )
    return response


def create_app() -> FastAPI:
    """Return a fully-configured FastAPI application instance."""
    if not logging.root.handlers:
        configure_logging(settings.log_level)

    app = FastAPI(
        title="Link Preview API",
        description=(
            "Fetches a web page and returns its link-preview metadata: title, "
            "description, domain, favicon, Open Graph image, canonical URL, "
            "site name and content type."
        ),
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(_log_requests)

    app.include_router(preview_router.router, tags=["preview"])

    @app.get("/health", tags=["system"])
    def healthcheck() -> dict[str, str]:
        return {"status": "ok"}

    return app


# Module-level instance used by uvicorn:
#   uvicorn linkpreview.api.app:app --reload
app = create_app()
