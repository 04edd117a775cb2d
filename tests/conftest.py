"""Shared test fixtures and configuration."""

from __future__ import annotations

from typing import Any

import pytest

from solrbridge.config.settings import Settings
from solrbridge.models.result import NativeHit, NativeResult


@pytest.fixture
def settings() -> Settings:
    """Create a test Settings instance with defaults."""
    return Settings(
        _env_file=None,  # type: ignore[call-arg]
        debug=True,
        backend={"hosts": ["http://localhost:9200"]},
        observability={"log_level": "debug", "log_format": "console"},
    )


@pytest.fixture
def opensearch_response() -> dict[str, Any]:
    """Raw OpenSearch _search response with two source hits."""
    return {
        "took": 7,
        "timed_out": False,
        "_shards": {"total": 1, "successful": 1, "skipped": 0, "failed": 0},
        "hits": {
            "total": {"value": 5, "relation": "eq"},
            "max_score": 1.0,
            "hits": [
                {
                    "_index": "solr",
                    "_id": "doc-001",
                    "_score": 1.0,
                    "_source": {
                        "title": "Advances in Solar Nowcasting",
                        "date": "2021-06-01T12:00:00Z",
                        "tags": ["solar", "nowcasting"],
                        "pages": 12,
                    },
                },
                {
                    "_index": "solr",
                    "_id": "doc-002",
                    "_score": 0.5,
                    "_source": {
                        "title": "Transformer Models",
                        "date": "2020-01-15",
                        "pages": 8,
                    },
                },
            ],
        },
    }


@pytest.fixture
def projected_result() -> NativeResult:
    """Native result for ``fl=title,date`` with two hits."""
    return NativeResult(
        total_hits=5,
        max_score=1.0,
        took_ms=3,
        hits=[
            NativeHit(
                score=1.0,
                fields={"title": ["A test title"], "date": ["2021-06-01T12:00:00.000Z"]},
            ),
            NativeHit(
                score=0.8,
                fields={"title": ["Another test"], "date": ["2021-05-20T08:30:00Z"]},
            ),
        ],
    )
