"""Tests for the Solr → native request translator."""

from __future__ import annotations

import pytest

from solrbridge.core.exceptions import InvalidParameterError
from solrbridge.core.translator import (
    RequestTranslator,
    parse_field_list,
    parse_sort,
    split_scope,
    translate,
)
from solrbridge.models.params import SolrParams
from solrbridge.models.request import (
    RELEVANCE_FIELD,
    NativeSearchRequest,
    ProjectionMode,
    QueryStringClause,
    SortKey,
    SortOrder,
)


def _translate(query_string: str) -> NativeSearchRequest:
    return translate(SolrParams.from_query_string(query_string))


# ── Query clause ─────────────────────────────────────────────────────────────


class TestQueryClause:
    def test_q_passed_through_verbatim(self) -> None:
        request = _translate("q=title:test AND year:[2000 TO 2010]")
        assert request.query == QueryStringClause(query="title:test AND year:[2000 TO 2010]")

    def test_q_absent_means_match_all(self) -> None:
        assert _translate("rows=5").query is None

    def test_q_empty_means_match_all(self) -> None:
        assert _translate("q=").query is None
        assert _translate("q=%20%20").query is None


# ── Pagination ───────────────────────────────────────────────────────────────


class TestPagination:
    def test_defaults(self) -> None:
        request = _translate("")
        assert request.offset == 0
        assert request.limit == 10

    def test_explicit_values(self) -> None:
        request = _translate("start=20&rows=5")
        assert request.offset == 20
        assert request.limit == 5

    def test_rows_zero_allowed(self) -> None:
        assert _translate("rows=0").limit == 0

    @pytest.mark.parametrize(
        "query_string,param",
        [
            ("start=abc", "start"),
            ("rows=1.5", "rows"),
            ("rows=-1", "rows"),
            ("rows=1_0", "rows"),
            ("start=%D9%A3", "start"),
        ],
    )
    def test_malformed_values_raise(self, query_string: str, param: str) -> None:
        with pytest.raises(InvalidParameterError) as exc_info:
            _translate(query_string)
        assert exc_info.value.param == param
        assert param in str(exc_info.value)


# ── Field list ───────────────────────────────────────────────────────────────


class TestFieldList:
    def test_absent_returns_all_source(self) -> None:
        assert parse_field_list(None).mode is ProjectionMode.SOURCE

    def test_empty_returns_no_fields(self) -> None:
        assert parse_field_list("").mode is ProjectionMode.NONE
        assert parse_field_list(" , ").mode is ProjectionMode.NONE

    def test_mixed_separators(self) -> None:
        projection = parse_field_list("a,b c")
        assert projection.mode is ProjectionMode.FIELDS
        assert projection.fields == ("a", "b", "c")

    def test_repeated_separators_ignored(self) -> None:
        assert parse_field_list("title, date ,  id").fields == ("title", "date", "id")

    def test_empty_fl_parameter_survives_decoding(self) -> None:
        assert _translate("fl=").projection.mode is ProjectionMode.NONE


# ── Sort ─────────────────────────────────────────────────────────────────────


class TestSort:
    def test_absent_defaults_to_relevance_desc(self) -> None:
        assert parse_sort(None) == (SortKey(field=RELEVANCE_FIELD, order=SortOrder.DESC),)

    def test_blank_defaults_to_relevance_desc(self) -> None:
        assert parse_sort("  ") == (SortKey(field=RELEVANCE_FIELD, order=SortOrder.DESC),)

    @pytest.mark.parametrize("sort", [",", " , ,"])
    def test_only_separators_defaults_to_relevance_desc(self, sort: str) -> None:
        assert parse_sort(sort) == (SortKey(field=RELEVANCE_FIELD, order=SortOrder.DESC),)

    def test_only_separators_in_request_sorts_by_relevance(self) -> None:
        assert _translate("sort=,").sort == (SortKey(field=RELEVANCE_FIELD, order=SortOrder.DESC),)

    def test_score_desc(self) -> None:
        assert parse_sort("score desc") == (SortKey(field="_score", order=SortOrder.DESC),)

    def test_multiple_clauses_keep_order(self) -> None:
        assert parse_sort("date asc,score desc") == (
            SortKey(field="date", order=SortOrder.ASC),
            SortKey(field="_score", order=SortOrder.DESC),
        )

    def test_bare_field_ascending(self) -> None:
        assert parse_sort("price") == (SortKey(field="price", order=SortOrder.ASC),)

    def test_bare_score_is_relevance_descending(self) -> None:
        assert parse_sort("score") == (SortKey(field="_score", order=SortOrder.DESC),)

    def test_split_at_last_whitespace(self) -> None:
        assert parse_sort("date   desc") == (SortKey(field="date", order=SortOrder.DESC),)

    def test_unknown_direction_keeps_whole_clause_as_field(self) -> None:
        assert parse_sort("my field") == (SortKey(field="my field", order=SortOrder.ASC),)

    def test_direction_is_case_sensitive(self) -> None:
        assert parse_sort("date DESC") == (SortKey(field="date DESC", order=SortOrder.ASC),)

    def test_spaces_around_commas_and_empty_clauses(self) -> None:
        assert parse_sort(" price desc , , title asc ,") == (
            SortKey(field="price", order=SortOrder.DESC),
            SortKey(field="title", order=SortOrder.ASC),
        )


# ── Filters ──────────────────────────────────────────────────────────────────


class TestFilters:
    def test_no_fq(self) -> None:
        request = _translate("q=*:*")
        assert request.filters == ()
        assert request.filter_clause() is None

    def test_single_fq(self) -> None:
        request = _translate("fq=type:book")
        assert request.filter_clause() == {"query_string": {"query": "type:book"}}

    def test_multiple_fq_are_anded(self) -> None:
        request = _translate("fq=type:book&fq=year:2021")
        assert request.filter_clause() == {
            "bool": {
                "filter": [
                    {"query_string": {"query": "type:book"}},
                    {"query_string": {"query": "year:2021"}},
                ]
            }
        }

    def test_fq_order_does_not_change_filter_set(self) -> None:
        ab = _translate("fq=a:1&fq=b:2")
        ba = _translate("fq=b:2&fq=a:1")
        assert set(ab.filters) == set(ba.filters)

    def test_blank_fq_ignored(self) -> None:
        assert _translate("fq=&fq=a:1").filters == (QueryStringClause(query="a:1"),)


# ── Scope ────────────────────────────────────────────────────────────────────


class TestScope:
    def test_defaults(self) -> None:
        request = _translate("q=x")
        assert request.indices == ("solr",)
        assert request.kinds == ("docs",)

    def test_explicit_multi_target_scope(self) -> None:
        request = _translate("index=books,articles&type=doc")
        assert request.indices == ("books", "articles")
        assert request.kinds == ("doc",)

    def test_translator_defaults_are_configurable(self) -> None:
        translator = RequestTranslator(default_index="products", default_kind="item")
        request = translator.translate(SolrParams())
        assert request.indices == ("products",)
        assert request.kinds == ("item",)

    def test_split_scope_blank_falls_back(self) -> None:
        assert split_scope(" , ", "solr") == ("solr",)


# ── Determinism ──────────────────────────────────────────────────────────────


class TestDeterminism:
    def test_identical_input_identical_output(self) -> None:
        query_string = "q=title:test&fq=a:1&fq=b:2&fl=title,date&sort=date desc&start=3&rows=2"
        first = _translate(query_string)
        second = _translate(query_string)
        assert first == second
        assert first.to_body() == second.to_body()
