"""Health check endpoints — Service and backend health monitoring."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from solrbridge import __version__
from solrbridge.adapters.base.adapter import AdapterHealth, SearchBackend
from solrbridge.api.deps import get_backend

router = APIRouter()


class HealthResponse(BaseModel):
    """Service health check response."""

    status: str = Field(description="Health status (e.g. 'healthy')")
    version: str = Field(description="solrbridge server version")
    service: str = Field(description="Service name ('solrbridge')")
    backend: str = Field(description="Name of the native search backend")


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service Health Check",
    description="Returns service health, server version and the active search backend.",
)
async def health_check(
    backend: SearchBackend = Depends(get_backend),
) -> HealthResponse:
    """Basic health check endpoint."""
    return HealthResponse(
        status="healthy",
        version=__version__,
        service="solrbridge",
        backend=backend.name,
    )


@router.get(
    "/health/backend",
    response_model=AdapterHealth,
    summary="Backend Health Check",
    description="Runs a health check against the native search engine.",
)
async def backend_health(
    backend: SearchBackend = Depends(get_backend),
) -> AdapterHealth:
    """Check health of the search backend."""
    return await backend.health_check()
