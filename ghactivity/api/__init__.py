"""ghactivity REST API — FastAPI application factory."""

from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ghactivity import __version__
from ghactivity.api.deps import close_github_client, init_github_client
from ghactivity.api.errors import register_error_handlers
from ghactivity.api.middleware.request_id import RequestIDMiddleware
from ghactivity.api.routers import activity
from ghactivity.core.config import Settings
from ghactivity.core.logging import setup_logging


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build and return the FastAPI application."""
    setup_logging()
    settings = settings or Settings.from_env()

    @asynccontextmanager
    async def _lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Startup: open the shared GitHub client. Shutdown: close it."""
        init_github_client(settings)
        yield
        await close_github_client()

    app = FastAPI(
        title="ghactivity",
        version=__version__,
        docs_url="/api/v1/docs",
        openapi_url="/api/v1/openapi.json",
        lifespan=_lifespan,
    )

    register_error_handlers(app)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_methods=["GET"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestIDMiddleware)

    @app.get("/health", tags=["ops"])
    async def health() -> JSONResponse:
        return JSONResponse({"status": "ok"})

    app.include_router(activity.router, prefix="/api/v1/activity", tags=["activity"])

    return app
