"""Base search backend — Abstract interface for native engine execution.

A backend takes a ``NativeSearchRequest`` produced by the translator, runs it
against the native engine, and returns a ``NativeResult`` for the mapper.
Failures are raised as ``AdapterError`` subclasses so the API layer can
answer with an error response without ever invoking the mapper.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from pydantic import BaseModel, Field

from solrbridge.models.request import NativeSearchRequest
from solrbridge.models.result import NativeResult


class AdapterHealth(BaseModel):
    """Health status of a search backend."""

    status: str = Field(description="Health status: healthy, degraded, unhealthy")
    latency_ms: int = Field(default=0, description="Latency of last health check in ms")
    last_check: str | None = Field(default=None, description="ISO timestamp of last health check")
    message: str | None = Field(default=None, description="Additional health message")


class SearchBackend(ABC):
    """Abstract base class for native search engines.

    Backends hold a client connection but no per-request state, so one
    instance serves all concurrent requests.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique backend name (e.g., 'opensearch')."""

    @abstractmethod
    async def initialize(self) -> None:
        """Open connections. Called once during application startup."""

    @abstractmethod
    async def shutdown(self) -> None:
        """Close connections. Called during application shutdown."""

    @abstractmethod
    async def execute(self, request: NativeSearchRequest) -> NativeResult:
        """Run a search.

        Args:
            request: The translated native request.

        Returns:
            The native result set.

        Raises:
            ConnectionError: If the backend is not initialized.
            QueryError: If the engine rejects or fails the search.
        """

    @abstractmethod
    async def health_check(self) -> AdapterHealth:
        """Report the backend's current health."""
