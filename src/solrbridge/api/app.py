"""FastAPI application factory and lifecycle management."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from solrbridge import __version__
from solrbridge.adapters.opensearch.adapter import OpenSearchBackend
from solrbridge.api.deps import set_backend
from solrbridge.api.solr.select import router as solr_router
from solrbridge.api.v1.router import router as v1_router
from solrbridge.config.settings import Settings, load_settings
from solrbridge.observability.logging import setup_logging

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Application settings. If None, loads them with ``load_settings``.

    Returns:
        Configured FastAPI application.
    """
    if settings is None:
        settings = load_settings()

    setup_logging(settings.observability)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """Manage application lifecycle (startup/shutdown)."""
        logger.info("Starting solrbridge v%s", __version__)

        backend = create_backend(settings)
        await backend.initialize()
        set_backend(backend)

        logger.info("solrbridge is ready to serve requests on port %d", settings.server.port)
        yield

        logger.info("Shutting down solrbridge...")
        await backend.shutdown()
        set_backend(None)
        logger.info("solrbridge shutdown complete")

    app = FastAPI(
        title="solrbridge",
        description="Solr query protocol served from OpenSearch.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.server.cors_origins,
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    app.include_router(solr_router)
    app.include_router(v1_router, prefix="/v1")

    return app


def create_backend(settings: Settings) -> OpenSearchBackend:
    """Build the OpenSearch backend from ``settings.backend``."""
    cfg = settings.backend
    return OpenSearchBackend(
        hosts=cfg.hosts,
        username=cfg.username,
        password=cfg.password,
        verify_certs=cfg.verify_certs,
        timeout=cfg.timeout,
        kind_field=cfg.kind_field,
        **cfg.extra,
    )
