"""Native search request — The OpenSearch-side object model a Solr query becomes.

The request is a frozen description of what to search.
:meth:`NativeSearchRequest.to_body` renders it as OpenSearch query DSL.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# Relevance-score field understood by the native engine's sort API.
RELEVANCE_FIELD = "_score"


class SortOrder(str, Enum):
    """Sort direction."""

    ASC = "asc"
    DESC = "desc"


class ProjectionMode(str, Enum):
    """Which stored values each hit should carry back."""

    SOURCE = "source"  # full _source document
    NONE = "none"  # scores only
    FIELDS = "fields"  # explicit field list


class QueryStringClause(BaseModel):
    """A clause in Lucene query-string syntax, passed through verbatim."""

    model_config = ConfigDict(frozen=True)

    query: str = Field(description="Raw query-string expression, e.g. 'title:test AND year:2021'")

    def to_dsl(self) -> dict[str, Any]:
        return {"query_string": {"query": self.query}}


class SortKey(BaseModel):
    """One ``(field, direction)`` sort criterion."""

    model_config = ConfigDict(frozen=True)

    field: str = Field(description="Field to sort on; '_score' for relevance")
    order: SortOrder = Field(default=SortOrder.ASC, description="Sort direction")

    def to_dsl(self) -> dict[str, Any]:
        return {self.field: {"order": self.order.value}}


class Projection(BaseModel):
    """Field projection for returned hits."""

    model_config = ConfigDict(frozen=True)

    mode: ProjectionMode = Field(default=ProjectionMode.SOURCE, description="Projection mode")
    fields: tuple[str, ...] = Field(default=(), description="Requested fields (mode=fields only)")

    @classmethod
    def all_source(cls) -> Projection:
        return cls(mode=ProjectionMode.SOURCE)

    @classmethod
    def no_fields(cls) -> Projection:
        return cls(mode=ProjectionMode.NONE)

    @classmethod
    def of(cls, fields: list[str] | tuple[str, ...]) -> Projection:
        return cls(mode=ProjectionMode.FIELDS, fields=tuple(fields))


class NativeSearchRequest(BaseModel):
    """A complete native search request.

    Attributes:
        query: Ranked query clause; ``None`` means match everything.
        filters: Unranked constraints, all of which must match.
        sort: Ordered sort keys.
        projection: Which values to return per hit.
        offset: Index of the first hit to return.
        limit: Maximum number of hits to return.
        indices: Target collections.
        kinds: Target document kinds.
    """

    model_config = ConfigDict(frozen=True)

    query: QueryStringClause | None = Field(default=None, description="Ranked query clause")
    filters: tuple[QueryStringClause, ...] = Field(default=(), description="AND-combined filter clauses")
    sort: tuple[SortKey, ...] = Field(
        default=(SortKey(field=RELEVANCE_FIELD, order=SortOrder.DESC),),
        description="Ordered sort keys",
    )
    projection: Projection = Field(default_factory=Projection.all_source, description="Field projection")
    offset: int = Field(default=0, ge=0, description="Offset of the first hit")
    limit: int = Field(default=10, ge=0, description="Maximum hits to return")
    indices: tuple[str, ...] = Field(default=("solr",), description="Target collections")
    kinds: tuple[str, ...] = Field(default=("docs",), description="Target document kinds")

    # ── DSL rendering ────────────────────────────────────────────────────

    def filter_clause(self) -> dict[str, Any] | None:
        """Combine the filters into a single clause.

        No filter gives ``None``, one filter is used as-is, and two or more are
        ANDed inside a ``bool.filter`` list.
        """
        if not self.filters:
            return None
        if len(self.filters) == 1:
            return self.filters[0].to_dsl()
        return {"bool": {"filter": [f.to_dsl() for f in self.filters]}}

    def to_body(self, kind_field: str | None = None) -> dict[str, Any]:
        """Render the request as an OpenSearch ``_search`` body.

        Args:
            kind_field: Document field holding the kind. When set, ``kinds``
                become a ``terms`` filter on it; otherwise kinds are not sent.

        Returns:
            The search body dict.
        """
        query = self.query.to_dsl() if self.query else {"match_all": {}}

        filter_clauses: list[dict[str, Any]] = []
        combined = self.filter_clause()
        if combined is not None:
            filter_clauses.append(combined)
        if kind_field and self.kinds:
            filter_clauses.append({"terms": {kind_field: list(self.kinds)}})

        if filter_clauses:
            query = {"bool": {"must": [query], "filter": filter_clauses}}

        body: dict[str, Any] = {
            "query": query,
            "from": self.offset,
            "size": self.limit,
            "track_scores": True,
        }
        if self.sort:
            body["sort"] = [key.to_dsl() for key in self.sort]

        if self.projection.mode is ProjectionMode.SOURCE:
            body["_source"] = True
        elif self.projection.mode is ProjectionMode.NONE:
            body["_source"] = False
        else:
            body["_source"] = False
            body["fields"] = list(self.projection.fields)

        return body
