"""Tests for rendering native requests as OpenSearch query DSL."""

from __future__ import annotations

from solrbridge.models.request import (
    NativeSearchRequest,
    Projection,
    QueryStringClause,
    SortKey,
    SortOrder,
)


class TestToBody:
    def test_defaults(self) -> None:
        body = NativeSearchRequest().to_body()
        assert body == {
            "query": {"match_all": {}},
            "from": 0,
            "size": 10,
            "track_scores": True,
            "sort": [{"_score": {"order": "desc"}}],
            "_source": True,
        }

    def test_query_and_single_filter(self) -> None:
        request = NativeSearchRequest(
            query=QueryStringClause(query="title:test"),
            filters=(QueryStringClause(query="type:book"),),
        )
        assert request.to_body()["query"] == {
            "bool": {
                "must": [{"query_string": {"query": "title:test"}}],
                "filter": [{"query_string": {"query": "type:book"}}],
            }
        }

    def test_multiple_filters_nested_as_and(self) -> None:
        request = NativeSearchRequest(filters=(QueryStringClause(query="a"), QueryStringClause(query="b")))
        query = request.to_body()["query"]
        assert query["bool"]["must"] == [{"match_all": {}}]
        assert query["bool"]["filter"] == [
            {"bool": {"filter": [{"query_string": {"query": "a"}}, {"query_string": {"query": "b"}}]}}
        ]

    def test_sort_order_preserved(self) -> None:
        request = NativeSearchRequest(
            sort=(SortKey(field="date", order=SortOrder.ASC), SortKey(field="_score", order=SortOrder.DESC))
        )
        assert request.to_body()["sort"] == [{"date": {"order": "asc"}}, {"_score": {"order": "desc"}}]

    def test_empty_sort_omitted(self) -> None:
        assert "sort" not in NativeSearchRequest(sort=()).to_body()

    def test_projection_none(self) -> None:
        body = NativeSearchRequest(projection=Projection.no_fields()).to_body()
        assert body["_source"] is False
        assert "fields" not in body

    def test_projection_fields(self) -> None:
        body = NativeSearchRequest(projection=Projection.of(["title", "date"])).to_body()
        assert body["_source"] is False
        assert body["fields"] == ["title", "date"]

    def test_pagination(self) -> None:
        body = NativeSearchRequest(offset=20, limit=5).to_body()
        assert body["from"] == 20
        assert body["size"] == 5


class TestKinds:
    def test_kinds_not_sent_without_kind_field(self) -> None:
        body = NativeSearchRequest(kinds=("book",)).to_body()
        assert body["query"] == {"match_all": {}}

    def test_kinds_become_terms_filter(self) -> None:
        body = NativeSearchRequest(kinds=("book", "article")).to_body(kind_field="doc_type")
        assert body["query"]["bool"]["filter"] == [{"terms": {"doc_type": ["book", "article"]}}]

    def test_kinds_filter_appended_after_fq(self) -> None:
        request = NativeSearchRequest(filters=(QueryStringClause(query="a"),), kinds=("book",))
        filters = request.to_body(kind_field="doc_type")["query"]["bool"]["filter"]
        assert filters == [{"query_string": {"query": "a"}}, {"terms": {"doc_type": ["book"]}}]
