"""OpenSearch backend — Executes translated Solr queries on OpenSearch (v2+).

Uses the async ``opensearch-py`` client. The request body comes straight from
``NativeSearchRequest.to_body()``; the raw response is parsed with
``NativeResult.from_opensearch()``.
"""

from __future__ import annotations

import logging
import time
from datetime import UTC, datetime
from typing import Any

from opensearchpy import AsyncOpenSearch

from solrbridge.adapters.base.adapter import AdapterHealth, SearchBackend
from solrbridge.adapters.base.exceptions import ConnectionError, QueryError
from solrbridge.models.request import NativeSearchRequest
from solrbridge.models.result import NativeResult

logger = logging.getLogger(__name__)


class OpenSearchBackend(SearchBackend):
    """Search backend for OpenSearch (v2+).

    Args:
        hosts: List of OpenSearch node URLs.
        username: Optional HTTP basic-auth username.
        password: Optional HTTP basic-auth password.
        verify_certs: Whether to verify TLS certificates.
        timeout: Per-request timeout in seconds.
        kind_field: Document field holding the Solr ``type``; when unset the
            requested kinds are not sent to OpenSearch.
        **kwargs: Additional keyword arguments forwarded to ``AsyncOpenSearch``.
    """

    def __init__(
        self,
        hosts: list[str] | None = None,
        username: str | None = None,
        password: str | None = None,
        verify_certs: bool = True,
        timeout: float = 30.0,
        kind_field: str | None = None,
        **kwargs: Any,
    ) -> None:
        self._hosts = hosts or ["https://localhost:9200"]
        self._username = username
        self._password = password
        self._verify_certs = verify_certs
        self._timeout = timeout
        self._kind_field = kind_field
        self._extra_kwargs = kwargs
        self._client: Any = None

    @property
    def name(self) -> str:
        return "opensearch"

    async def initialize(self) -> None:
        """Create and verify the ``AsyncOpenSearch`` client."""
        client_kwargs: dict[str, Any] = {
            "hosts": self._hosts,
            "verify_certs": self._verify_certs,
            "ssl_show_warn": False,
            "timeout": self._timeout,
        }
        if self._username and self._password:
            client_kwargs["http_auth"] = (self._username, self._password)

        client_kwargs.update(self._extra_kwargs)

        try:
            self._client = AsyncOpenSearch(**client_kwargs)
            info = await self._client.info()
            version = info.get("version", {}).get("number", "unknown")
            cluster = info.get("cluster_name", "unknown")
            logger.info("Connected to OpenSearch cluster: %s (v%s)", cluster, version)
        except Exception as e:
            raise ConnectionError(f"Failed to connect to OpenSearch: {e}") from e

    async def shutdown(self) -> None:
        """Close the OpenSearch client."""
        if self._client:
            await self._client.close()
            self._client = None

    # ── Search ───────────────────────────────────────────────────────────

    async def execute(self, request: NativeSearchRequest) -> NativeResult:
        """Run a translated request against OpenSearch."""
        if not self._client:
            raise ConnectionError("OpenSearch client not initialized.")

        body = request.to_body(kind_field=self._kind_field)
        index = ",".join(request.indices)

        try:
            start = time.monotonic()
            response = await self._client.search(index=index, body=body)
            elapsed_ms = int((time.monotonic() - start) * 1000)
        except Exception as e:
            raise QueryError(f"OpenSearch query failed: {e}") from e

        shards = response.get("_shards", {})
        if shards.get("failed", 0):
            reasons = [
                failure.get("reason", {}).get("reason", "unknown")
                for failure in shards.get("failures", [])
            ]
            raise QueryError(
                f"OpenSearch query failed on {shards['failed']} of {shards.get('total', '?')} shards: "
                + "; ".join(reasons)
            )

        logger.debug("OpenSearch search on '%s' took %d ms (round trip %d ms)", index, response.get("took", 0), elapsed_ms)
        return NativeResult.from_opensearch(response)

    # ── Health ───────────────────────────────────────────────────────────

    async def health_check(self) -> AdapterHealth:
        """Check OpenSearch cluster health."""
        if not self._client:
            return AdapterHealth(status="unhealthy", message="Client not initialized")

        try:
            start = time.monotonic()
            health = await self._client.cluster.health()
            latency_ms = int((time.monotonic() - start) * 1000)

            status_map = {"green": "healthy", "yellow": "degraded", "red": "unhealthy"}

            return AdapterHealth(
                status=status_map.get(health.get("status", "red"), "unhealthy"),
                latency_ms=latency_ms,
                last_check=datetime.now(UTC).isoformat(),
                message=f"Cluster: {health.get('cluster_name')}, Nodes: {health.get('number_of_nodes')}",
            )
        except Exception as e:
            return AdapterHealth(status="unhealthy", message=str(e))
