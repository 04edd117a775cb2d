"""XML response formatter (``wt=xml``).

Produces Solr's typed XML layout::

    <response>
      <lst name="responseHeader">
        <int name="status">0</int>
        ...
      </lst>
      <result name="response" numFound="5" start="0" maxScore="1.0">
        <doc><float name="score">1.0</float><str name="title">...</str></doc>
      </result>
    </response>
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from datetime import datetime
from typing import Any

from solrbridge.core.dates import format_solr_datetime
from solrbridge.formatters.base import ResponseFormatter
from solrbridge.models.params import SolrParams
from solrbridge.models.response import ResponseTree, SolrDocument, SolrDocumentList

_INT32_MAX = 2**31 - 1
_INT32_MIN = -(2**31)


class XmlFormatter(ResponseFormatter):
    """Writes Solr's XML layout."""

    @property
    def name(self) -> str:
        return "xml"

    @property
    def content_type(self) -> str:
        return "application/xml; charset=utf-8"

    def format(self, tree: ResponseTree, params: SolrParams) -> str:
        root = ET.Element("response")
        for key, value in tree.items():
            _append(root, key, value)
        if self.wants_indent(params):
            ET.indent(root)
        body = ET.tostring(root, encoding="unicode")
        return '<?xml version="1.0" encoding="UTF-8"?>\n' + body + "\n"


def _append(parent: ET.Element, name: str | None, value: Any) -> None:
    """Append ``value`` as a typed child of ``parent``."""
    if isinstance(value, SolrDocumentList):
        result = ET.SubElement(parent, "result")
        if name is not None:
            result.set("name", name)
        for attr, attr_value in value.header().items():
            result.set(attr, str(attr_value))
        for doc in value:
            _append(result, None, doc)
        return

    if isinstance(value, SolrDocument):
        element = ET.SubElement(parent, "doc")
        for key, item in value.items():
            _append(element, key, item)
        return

    if isinstance(value, dict):
        element = ET.SubElement(parent, "lst")
        _name(element, name)
        for key, item in value.items():
            _append(element, str(key), item)
        return

    if isinstance(value, (list, tuple)):
        element = ET.SubElement(parent, "arr")
        _name(element, name)
        for item in value:
            _append(element, None, item)
        return

    if value is None:
        _name(ET.SubElement(parent, "null"), name)
        return

    tag, text = _leaf(value)
    element = ET.SubElement(parent, tag)
    _name(element, name)
    element.text = text


def _leaf(value: Any) -> tuple[str, str]:
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return "bool", "true" if value else "false"
    if isinstance(value, int):
        return ("int" if _INT32_MIN <= value <= _INT32_MAX else "long"), str(value)
    if isinstance(value, float):
        return "float", repr(value)
    if isinstance(value, datetime):
        return "date", format_solr_datetime(value)
    return "str", str(value)


def _name(element: ET.Element, name: str | None) -> None:
    if name is not None:
        element.set("name", name)
