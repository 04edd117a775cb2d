"""Request Translator — Turns Solr ``/select`` parameters into a native request.

Handled parameters:
  - ``q``: ranked query in Lucene query-string syntax (passed through)
  - ``fq``: repeatable filter queries, ANDed together
  - ``fl``: field list, comma or whitespace separated
  - ``sort``: ``field dir[, field dir ...]``
  - ``start`` / ``rows``: pagination
  - ``index`` / ``type``: target scope, comma separated

Query and filter syntax is not validated here; the native engine's own
query-string parser reports any syntax problem at execution time.
"""

from __future__ import annotations

import logging
import re

from solrbridge.models.params import SolrParams
from solrbridge.models.request import (
    RELEVANCE_FIELD,
    NativeSearchRequest,
    Projection,
    QueryStringClause,
    SortKey,
    SortOrder,
)

logger = logging.getLogger(__name__)

DEFAULT_START = 0
DEFAULT_ROWS = 10
DEFAULT_INDEX = "solr"
DEFAULT_KIND = "docs"

# Solr's relevance pseudo-field in sort and fl.
SCORE_FIELD = "score"

_FIELD_LIST_SEPARATOR = re.compile(r"[\s,]+")
_DEFAULT_SORT = (SortKey(field=RELEVANCE_FIELD, order=SortOrder.DESC),)


class RequestTranslator:
    """Translates Solr query parameters into a ``NativeSearchRequest``.

    Instances hold only the fallback scope, so one translator can serve any
    number of concurrent requests.

    Args:
        default_index: Collection searched when no ``index`` is given.
        default_kind: Document kind searched when no ``type`` is given.
    """

    def __init__(self, default_index: str = DEFAULT_INDEX, default_kind: str = DEFAULT_KIND) -> None:
        self.default_index = default_index
        self.default_kind = default_kind

    def translate(self, params: SolrParams) -> NativeSearchRequest:
        """Build the native search request for ``params``.

        Args:
            params: Decoded request parameters.

        Returns:
            The native search request.

        Raises:
            InvalidParameterError: If ``start`` or ``rows`` is not a
                non-negative integer.
        """
        offset = params.get_int("start", DEFAULT_START)
        limit = params.get_int("rows", DEFAULT_ROWS)

        q = params.get("q")
        query = QueryStringClause(query=q) if q and q.strip() else None

        request = NativeSearchRequest(
            query=query,
            filters=tuple(QueryStringClause(query=fq) for fq in params.filter_queries()),
            sort=parse_sort(params.get("sort")),
            projection=parse_field_list(params.get("fl")),
            offset=offset,
            limit=limit,
            indices=split_scope(params.get("index"), self.default_index),
            kinds=split_scope(params.get("type"), self.default_kind),
        )
        logger.debug("Translated %r into %r", params, request)
        return request


def translate(params: SolrParams) -> NativeSearchRequest:
    """Translate ``params`` using the default scope (``solr`` / ``docs``)."""
    return RequestTranslator().translate(params)


# ── Parameter parsers ────────────────────────────────────────────────────


def parse_field_list(fl: str | None) -> Projection:
    """Parse ``fl``.

    Absent means the whole source document, an empty value means scores
    only, and anything else is an explicit field list.
    """
    if fl is None:
        return Projection.all_source()
    fields = [name for name in _FIELD_LIST_SEPARATOR.split(fl) if name]
    if not fields:
        return Projection.no_fields()
    return Projection.of(fields)


def parse_sort(sort: str | None) -> tuple[SortKey, ...]:
    """Parse a Solr ``sort`` expression into ordered sort keys.

    Each comma-separated clause is split at its last whitespace. If the token
    after it is exactly ``asc`` or ``desc`` it is the direction; otherwise the
    whole clause is a field name sorted ascending. ``score`` always means the
    relevance field and sorts descending when no direction is given.
    """
    if sort is None:
        return _DEFAULT_SORT

    keys: list[SortKey] = []
    for clause in sort.split(","):
        clause = clause.strip()
        if not clause:
            continue
        field, order = _split_sort_clause(clause)
        keys.append(SortKey(field=field, order=order))
    # Blank or separator-only expressions sort by relevance.
    return tuple(keys) or _DEFAULT_SORT


def _split_sort_clause(clause: str) -> tuple[str, SortOrder]:
    parts = clause.rsplit(None, 1)
    if len(parts) == 2 and parts[1] in (SortOrder.ASC.value, SortOrder.DESC.value):
        field = parts[0].strip()
        order = SortOrder(parts[1])
        return _engine_field(field), order

    if clause == SCORE_FIELD:
        return RELEVANCE_FIELD, SortOrder.DESC
    return _engine_field(clause), SortOrder.ASC


def _engine_field(field: str) -> str:
    return RELEVANCE_FIELD if field == SCORE_FIELD else field


def split_scope(value: str | None, default: str) -> tuple[str, ...]:
    """Split a comma-separated scope selector, falling back to ``default``."""
    if value is None:
        return (default,)
    targets = tuple(part.strip() for part in value.split(",") if part.strip())
    return targets or (default,)
