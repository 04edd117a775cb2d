"""JSON response formatter (``wt=json``)."""

from __future__ import annotations

import json
from datetime import datetime
from typing import Any

from solrbridge.core.dates import format_solr_datetime
from solrbridge.formatters.base import ResponseFormatter
from solrbridge.models.params import SolrParams
from solrbridge.models.response import ResponseTree, SolrDocumentList


class JsonFormatter(ResponseFormatter):
    """Writes Solr's JSON layout.

    A ``SolrDocumentList`` becomes
    ``{"numFound": n, "start": s, "maxScore": m, "docs": [...]}`` and
    datetimes become Solr date strings.
    """

    @property
    def name(self) -> str:
        return "json"

    @property
    def content_type(self) -> str:
        return "application/json; charset=utf-8"

    def format(self, tree: ResponseTree, params: SolrParams) -> str:
        indent = 2 if self.wants_indent(params) else None
        return json.dumps(_to_jsonable(tree), indent=indent, ensure_ascii=False)


def _to_jsonable(value: Any) -> Any:
    if isinstance(value, SolrDocumentList):
        body = value.header()
        body["docs"] = [_to_jsonable(doc) for doc in value]
        return body
    if isinstance(value, dict):
        return {str(k): _to_jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_to_jsonable(v) for v in value]
    if isinstance(value, datetime):
        return format_solr_datetime(value)
    return value
