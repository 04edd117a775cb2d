"""Legacy response tree — Solr's ordered ``responseHeader`` / ``response`` layout.

The tree itself is a plain ``dict`` (insertion ordered). Two container types
carry the Solr-specific shape the formatters need to recognise:

- ``SolrDocument``: one result document; adding the same field twice turns
  its value into a list.
- ``SolrDocumentList``: the ordered documents plus ``numFound``, ``start`` and
  ``maxScore``.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

# Top-level response tree: {"responseHeader": {...}, "response": SolrDocumentList}
ResponseTree = dict[str, Any]


class SolrDocument(dict[str, Any]):
    """A result document mapping field names to a value or a list of values."""

    def add_field(self, name: str, value: Any) -> None:
        """Add ``value`` under ``name``, accumulating repeats into a list."""
        if name not in self:
            self[name] = value
            return
        existing = self[name]
        if isinstance(existing, list):
            existing.append(value)
        else:
            self[name] = [existing, value]


class SolrDocumentList(list[SolrDocument]):
    """Ordered result documents with result-set metadata.

    Args:
        docs: Initial documents.
        num_found: Total matches, not just this page.
        start: Offset of the first document.
        max_score: Highest score across all matches, if known.
    """

    def __init__(
        self,
        docs: Iterable[SolrDocument] = (),
        *,
        num_found: int = 0,
        start: int = 0,
        max_score: float | None = None,
    ) -> None:
        super().__init__(docs)
        self.num_found = num_found
        self.start = start
        self.max_score = max_score

    def header(self) -> dict[str, Any]:
        """Result-set attributes in wire order (``maxScore`` only when known)."""
        attrs: dict[str, Any] = {"numFound": self.num_found, "start": self.start}
        if self.max_score is not None:
            attrs["maxScore"] = self.max_score
        return attrs

    def __repr__(self) -> str:
        return (
            f"SolrDocumentList(numFound={self.num_found}, start={self.start}, "
            f"maxScore={self.max_score}, docs={list.__repr__(self)})"
        )
