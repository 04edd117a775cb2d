"""Solr select endpoint — ``/_solr/select`` backed by the native engine.

Scope can be given in the path (``/{index}/_solr/select``,
``/{index}/{kind}/_solr/select``) or as ``index`` / ``type`` parameters; the
path wins. The response encoding follows ``wt`` (``json`` or ``xml``).
"""

from __future__ import annotations

import logging

import structlog
from fastapi import APIRouter, Depends, Request, Response

from solrbridge.adapters.base.adapter import SearchBackend
from solrbridge.adapters.base.exceptions import AdapterError
from solrbridge.api.deps import get_backend, get_translator
from solrbridge.core.exceptions import InvalidParameterError
from solrbridge.core.mapper import map_error, map_response
from solrbridge.core.translator import RequestTranslator
from solrbridge.formatters import ResponseFormatter, get_formatter
from solrbridge.models.params import SolrParams

logger = logging.getLogger(__name__)
access_log = structlog.get_logger("solrbridge.access")

router = APIRouter(tags=["solr"])

_SELECT_DESCRIPTION = (
    "Solr-compatible search. Supports `q`, repeatable `fq`, `fl`, `sort`, "
    "`start`, `rows`, `wt` (json | xml) and `indent`."
)


@router.get("/_solr/select", summary="Solr Select", description=_SELECT_DESCRIPTION)
@router.get("/{index}/_solr/select", summary="Solr Select (index)", description=_SELECT_DESCRIPTION)
@router.get("/{index}/{kind}/_solr/select", summary="Solr Select (index and type)", description=_SELECT_DESCRIPTION)
async def select(
    request: Request,
    backend: SearchBackend = Depends(get_backend),
    translator: RequestTranslator = Depends(get_translator),
) -> Response:
    """Translate the Solr request, run it, and answer in Solr's format."""
    params = SolrParams.from_pairs(request.query_params.multi_items()).with_values(
        index=request.path_params.get("index"),
        type=request.path_params.get("kind"),
    )
    formatter = get_formatter(params.get("wt"))

    try:
        search_request = translator.translate(params)
    except InvalidParameterError as e:
        logger.info("Rejected Solr request: %s", e)
        return _error_response(formatter, params, 400, str(e))

    try:
        result = await backend.execute(search_request)
    except AdapterError as e:
        logger.error("Error executing search: %s", e, exc_info=True)
        return _error_response(formatter, params, 500, str(e))

    try:
        tree = map_response(params, result)
        content = formatter.format(tree, params)
    except Exception as e:
        logger.error("Error building Solr response: %s", e, exc_info=True)
        return _error_response(formatter, params, 500, str(e))

    access_log.info(
        "solr_select",
        indices=list(search_request.indices),
        q=params.get("q"),
        fq_count=len(search_request.filters),
        num_found=result.total_hits,
        returned=len(result.hits),
        qtime_ms=result.took_ms,
    )
    return Response(content=content, media_type=formatter.content_type)


def _error_response(formatter: ResponseFormatter, params: SolrParams, code: int, message: str) -> Response:
    return Response(
        content=formatter.format(map_error(code, message), params),
        status_code=code,
        media_type=formatter.content_type,
    )
