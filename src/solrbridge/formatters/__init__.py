"""Response formatters — Wire encodings for Solr response trees."""

from __future__ import annotations

import logging

from solrbridge.formatters.base import ResponseFormatter
from solrbridge.formatters.json_formatter import JsonFormatter
from solrbridge.formatters.xml_formatter import XmlFormatter

logger = logging.getLogger(__name__)

_FORMATTERS: dict[str, ResponseFormatter] = {
    "json": JsonFormatter(),
    "xml": XmlFormatter(),
}

DEFAULT_WT = "json"


def get_formatter(wt: str | None) -> ResponseFormatter:
    """Return the formatter for ``wt``; unknown or missing values get JSON."""
    key = (wt or DEFAULT_WT).strip().lower()
    formatter = _FORMATTERS.get(key)
    if formatter is None:
        logger.debug("Unknown response writer '%s', falling back to %s", wt, DEFAULT_WT)
        formatter = _FORMATTERS[DEFAULT_WT]
    return formatter


__all__ = ["JsonFormatter", "ResponseFormatter", "XmlFormatter", "get_formatter"]
