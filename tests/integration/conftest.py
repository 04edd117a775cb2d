"""Integration test fixtures — a live OpenSearch node seeded with mock data.

Expects OpenSearch to be reachable at ``SOLRBRIDGE_TEST_OPENSEARCH`` (default
``http://localhost:9201``), e.g.::

    docker run -p 9201:9200 -e discovery.type=single-node \
        -e DISABLE_SECURITY_PLUGIN=true opensearchproject/opensearch:2
"""

from __future__ import annotations

import asyncio
import os
import time
from typing import Any

import httpx
import pytest

INDEX = "solr-test"

MOCK_DOCUMENTS: list[dict[str, Any]] = [
    {
        "id": "doc-001",
        "title": "Advances in Solar Nowcasting Using Deep Learning",
        "author": "Alice Johnson",
        "tags": ["solar energy", "deep learning", "nowcasting"],
        "year": 2024,
        "published_date": "2024-06-15T00:00:00Z",
    },
    {
        "id": "doc-002",
        "title": "Transformer Models for Natural Language Understanding",
        "author": "Bob Smith",
        "tags": ["NLP", "transformers"],
        "year": 2024,
        "published_date": "2024-03-20T00:00:00Z",
    },
    {
        "id": "doc-003",
        "title": "Federated Learning for Privacy-Preserving Medical Imaging",
        "author": "Carol Zhang",
        "tags": ["federated learning", "medical imaging"],
        "year": 2023,
        "published_date": "2023-11-02T00:00:00Z",
    },
    {
        "id": "doc-004",
        "title": "Solar Panel Degradation in Desert Climates",
        "author": "Dan Okafor",
        "tags": ["solar energy", "materials"],
        "year": 2022,
        "published_date": "2022-08-09T00:00:00Z",
    },
]


def _wait_for_service(url: str, timeout: float = 10.0) -> bool:
    """Block until *url* returns HTTP 200, or timeout."""
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        try:
            r = httpx.get(url, timeout=5)
            if r.status_code == 200:
                return True
        except httpx.HTTPError:
            pass
        time.sleep(1)
    return False


async def _seed_opensearch(host: str, index: str = INDEX) -> None:
    async with httpx.AsyncClient(base_url=host, timeout=30) as client:
        await client.delete(f"/{index}", params={"ignore_unavailable": "true"})

        mapping = {
            "mappings": {
                "properties": {
                    "title": {"type": "text"},
                    "author": {"type": "keyword"},
                    "tags": {"type": "keyword"},
                    "year": {"type": "integer"},
                    "published_date": {"type": "date"},
                }
            }
        }
        resp = await client.put(f"/{index}", json=mapping)
        resp.raise_for_status()

        for doc in MOCK_DOCUMENTS:
            resp = await client.put(f"/{index}/_doc/{doc['id']}", json=doc)
            resp.raise_for_status()

        await client.post(f"/{index}/_refresh")


@pytest.fixture(scope="session")
def opensearch_ready() -> str:
    """Ensure OpenSearch is running and seeded."""
    host = os.environ.get("SOLRBRIDGE_TEST_OPENSEARCH", "http://localhost:9201")
    if not _wait_for_service(host):
        pytest.skip(f"OpenSearch not available at {host}")
    asyncio.run(_seed_opensearch(host))
    return host
