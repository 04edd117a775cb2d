"""Response Mapper — Turns a native result set into Solr's response tree.

The tree mirrors what Solr's ``SolrResponseWriter`` serialises::

    {
        "responseHeader": {"status": 0, "QTime": 3, "params": {...}},
        "response": SolrDocumentList[SolrDocument, ...],
    }

Two shapes are kept exactly as legacy clients expect them, even though they
look irregular:

- a single ``fq`` is echoed as a scalar, several as a list;
- a hit's projected fields replace its source document entirely whenever at
  least one projected field came back.
"""

from __future__ import annotations

import logging
from typing import Any

from solrbridge.core.dates import coerce_value
from solrbridge.core.translator import DEFAULT_ROWS, DEFAULT_START, SCORE_FIELD
from solrbridge.models.params import SolrParams
from solrbridge.models.response import ResponseTree, SolrDocument, SolrDocumentList
from solrbridge.models.result import NativeHit, NativeResult

logger = logging.getLogger(__name__)

STATUS_OK = 0

# Parameters echoed in responseHeader.params, in wire order.
_ECHOED_SCALARS = ("q", "fl", "sort")


def map_response(params: SolrParams, result: NativeResult) -> ResponseTree:
    """Build the Solr response tree for a successful search.

    Args:
        params: The request parameters the search was translated from.
        result: The native result set.

    Returns:
        An ordered ``responseHeader`` / ``response`` tree.
    """
    tree: ResponseTree = {
        "responseHeader": build_response_header(params, result),
        "response": build_document_list(params, result),
    }
    logger.debug(
        "Mapped %d of %d hits into Solr response",
        len(result.hits),
        result.total_hits,
    )
    return tree


def build_response_header(params: SolrParams, result: NativeResult) -> dict[str, Any]:
    """Status, query time and the echo of the parameters the translator used."""
    return {
        "status": STATUS_OK,
        "QTime": result.took_ms,
        "params": echo_params(params),
    }


def echo_params(params: SolrParams) -> dict[str, Any]:
    """Echo ``q``, ``fl``, ``sort``, ``fq``, ``start`` and ``rows``.

    ``start`` and ``rows`` are always present with their effective values; the
    others only when the client sent them.
    """
    echoed: dict[str, Any] = {}
    for name in _ECHOED_SCALARS:
        value = params.get(name)
        if value is not None:
            echoed[name] = value

    fqs = params.filter_queries()
    if fqs:
        echoed["fq"] = fqs if len(fqs) > 1 else fqs[0]

    echoed["start"] = params.get_int("start", DEFAULT_START)
    echoed["rows"] = params.get_int("rows", DEFAULT_ROWS)
    return echoed


def build_document_list(params: SolrParams, result: NativeResult) -> SolrDocumentList:
    """Convert every hit and attach ``numFound``, ``start`` and ``maxScore``."""
    return SolrDocumentList(
        (build_document(hit) for hit in result.hits),
        num_found=result.total_hits,
        start=params.get_int("start", DEFAULT_START),
        max_score=result.max_score,
    )


def build_document(hit: NativeHit) -> SolrDocument:
    """Convert one hit into a Solr document.

    ``score`` always comes first. Projected fields win over the source
    document; a hit with neither yields a score-only document.
    """
    doc = SolrDocument()
    doc.add_field(SCORE_FIELD, hit.score)

    if hit.fields:
        for name, values in hit.fields.items():
            for value in values:
                doc.add_field(name, coerce_value(value))
    elif hit.source:
        for name, value in hit.source.items():
            if isinstance(value, list) and name not in doc:
                doc[name] = [coerce_value(v) for v in value]
            elif isinstance(value, list):
                for v in value:
                    doc.add_field(name, coerce_value(v))
            else:
                doc.add_field(name, coerce_value(value))

    return doc


def map_error(code: int, message: str) -> ResponseTree:
    """Build Solr's error response tree.

    Args:
        code: HTTP-style status code (400 for bad input, 500 for failures).
        message: Human-readable failure description.
    """
    return {
        "responseHeader": {"status": code, "QTime": 0},
        "error": {"msg": message, "code": code},
    }
