"""Main FastAPI application entry point."""

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import timedelta

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import ORJSONResponse
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from api.exception_handlers import setup_exception_handlers
from api.middleware.logging import RequestLoggingMiddleware
from api.middleware.request_id import RequestIDMiddleware
from api.middleware.security import SecurityHeadersMiddleware
from api.routes.health import router as health_router
from api.v1 import router as v1_router
from api.v1.dependencies import get_storage_service
from core.config import settings
from core.logging import setup_logging
from core.rate_limit import limiter, rate_limit_exceeded_handler

logger = structlog.get_logger()

# Initialize structured logging
setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan manager for startup/shutdown tasks."""

    async def orphan_blob_sweep_loop() -> None:
        """Periodically delete uploads that no content record references.

        Uploading a file and creating the record that points at it are two
        separate requests; this sweep removes the leftovers of abandoned
        forms and replaced images.
        """
        grace = timedelta(hours=settings.orphan_blob_grace_hours)
        while True:
            await asyncio.sleep(settings.orphan_sweep_interval_seconds)
            try:
                deleted = await get_storage_service().purge_orphans(grace)
                logger.info("orphan_sweep_completed", deleted_count=deleted)
            except Exception:
                logger.exception("orphan_sweep_failed")

    sweep_task = asyncio.create_task(orphan_blob_sweep_loop())
    yield
    sweep_task.cancel()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        lifespan=lifespan,
        default_response_class=ORJSONResponse,
        title=settings.app_name,
        description=(
            "## Portfolio Content Management API\n\n"
            "Stores the content of a personal portfolio site: hero header, "
            "introduction, per-section copy, skills, projects, services, "
            "work experience and technologies, plus the images they show.\n\n"
            "### Features\n"
            "- **Content collections**: create, list, get, partial update and delete\n"
            "- **Blob storage**: signed upload URLs and time-bounded download URLs\n"
            "- **Latest-record reads**: the newest header or introduction is the live one\n\n"
            "### Authentication\n"
            "Reads are public. Writes need an admin token from "
            "`POST /api/v1/auth/session`:\n"
            "```\nAuthorization: Bearer <your_token>\n```\n\n"
            "### Rate Limits\n"
            "- GET endpoints: 60 requests/minute\n"
            "- POST/PATCH/PUT/DELETE: 20 requests/minute\n"
            "- Passkey check: 5 requests/minute"
        ),
        version="1.0.0",
        debug=settings.debug,
        license_info={
            "name": "MIT",
        },
        openapi_tags=[
            {"name": "health", "description": "Health check endpoints"},
            {"name": "auth", "description": "Admin passkey sessions"},
            {"name": "storage", "description": "Uploaded images and icons"},
            {"name": "headers", "description": "Hero header copy"},
            {"name": "introductions", "description": "Introduction copy"},
            {"name": "project-details", "description": "Per-section title and description"},
            {"name": "skills", "description": "Skill cards"},
            {"name": "projects", "description": "Portfolio projects"},
            {"name": "services", "description": "Service offerings"},
            {"name": "work-experiences", "description": "Experience timeline"},
            {"name": "technologies", "description": "Technology badges"},
        ],
    )

    # Rate limiting
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)

    # Security & tracking middleware (LIFO order - last added = outermost)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # GZip compression for responses > 1KB
    app.add_middleware(GZipMiddleware, minimum_size=1000)

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Setup exception handlers
    setup_exception_handlers(app)

    # Include routers
    app.include_router(health_router)
    app.include_router(v1_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=not settings.is_production,
    )
