"""Native result model — What the native engine hands back for one search."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class NativeHit(BaseModel):
    """A single search hit.

    ``fields`` holds explicitly projected values (always lists, as the
    OpenSearch fields API returns them); ``source`` holds the stored source
    document when it was requested.
    """

    score: float | None = Field(default=None, description="Relevance score of this hit")
    fields: dict[str, list[Any]] = Field(default_factory=dict, description="Projected field values")
    source: dict[str, Any] | None = Field(default=None, description="Full stored source document")


class NativeResult(BaseModel):
    """A native result set."""

    total_hits: int = Field(default=0, description="Total number of matching documents")
    max_score: float | None = Field(default=None, description="Highest score across all matches")
    took_ms: int = Field(default=0, description="Engine-reported query time in ms")
    hits: list[NativeHit] = Field(default_factory=list, description="Returned page of hits")

    @classmethod
    def from_opensearch(cls, response: dict[str, Any]) -> NativeResult:
        """Parse a raw OpenSearch ``_search`` response body."""
        hits_section = response.get("hits", {})
        total = hits_section.get("total", 0)
        if isinstance(total, dict):
            total = total.get("value", 0)

        hits = [
            NativeHit(
                score=hit.get("_score"),
                fields={name: _as_list(values) for name, values in (hit.get("fields") or {}).items()},
                source=hit.get("_source"),
            )
            for hit in hits_section.get("hits", [])
        ]

        return cls(
            total_hits=total or 0,
            max_score=hits_section.get("max_score"),
            took_ms=response.get("took", 0),
            hits=hits,
        )


def _as_list(values: Any) -> list[Any]:
    return values if isinstance(values, list) else [values]
