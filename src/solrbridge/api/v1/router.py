"""API v1 Router — Service endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from solrbridge.api.v1.endpoints.health import router as health_router

router = APIRouter(tags=["v1"])
router.include_router(health_router)
