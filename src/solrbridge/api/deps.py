"""API dependencies — Dependency injection for FastAPI endpoints."""

from __future__ import annotations

from fastapi import Request

from solrbridge.adapters.base.adapter import SearchBackend
from solrbridge.core.translator import RequestTranslator

# Global backend instance (set during application lifespan)
_backend: SearchBackend | None = None


def set_backend(backend: SearchBackend | None) -> None:
    """Set the global backend instance (called during app lifespan)."""
    global _backend
    _backend = backend


def get_backend() -> SearchBackend:
    """Get the global search backend.

    Raises:
        RuntimeError: If the backend is not initialized.
    """
    if _backend is None:
        raise RuntimeError("Search backend not initialized. Is the server running?")
    return _backend


def get_translator(request: Request) -> RequestTranslator:
    """Build a translator using the configured fallback scope."""
    select = request.app.state.settings.select
    return RequestTranslator(default_index=select.default_index, default_kind=select.default_kind)
