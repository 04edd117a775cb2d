"""Legacy query parameters — Solr's flat, repeatable URL parameter surface.

Solr allows the same parameter name more than once (``fq`` in particular), so
parameters are held as name → ordered list of values from the entry point on.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator, Mapping
from urllib.parse import parse_qsl

from solrbridge.core.exceptions import InvalidParameterError

# ASCII decimal digits only, so no digit separators or other scripts.
_INTEGER = re.compile(r"[+-]?[0-9]+")


class SolrParams(Mapping[str, list[str]]):
    """Immutable multi-valued parameter map.

    Example:
        >>> params = SolrParams.from_query_string("q=*:*&fq=a&fq=b")
        >>> params.get("q")
        '*:*'
        >>> params.get_all("fq")
        ['a', 'b']
    """

    def __init__(self, values: Mapping[str, Iterable[str]] | None = None) -> None:
        self._values: dict[str, list[str]] = {}
        for name, items in (values or {}).items():
            self._values[name] = [str(v) for v in items]

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, str]]) -> SolrParams:
        """Build from ``(name, value)`` pairs, keeping repeated names in order."""
        values: dict[str, list[str]] = {}
        for name, value in pairs:
            values.setdefault(name, []).append(value)
        return cls(values)

    @classmethod
    def from_query_string(cls, query_string: str) -> SolrParams:
        """Parse a raw URL query string. Blank values are kept (``fl=`` matters)."""
        return cls.from_pairs(parse_qsl(query_string.lstrip("?"), keep_blank_values=True))

    # ── Mapping protocol ─────────────────────────────────────────────────

    def __getitem__(self, name: str) -> list[str]:
        return list(self._values[name])

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"SolrParams({self._values!r})"

    # ── Accessors ────────────────────────────────────────────────────────

    def get(self, name: str, default: str | None = None) -> str | None:  # type: ignore[override]
        """Return the first value of ``name``, or ``default`` when absent."""
        values = self._values.get(name)
        if not values:
            return default
        return values[0]

    def get_all(self, name: str) -> list[str]:
        """Return every value of ``name`` in request order."""
        return list(self._values.get(name, []))

    def get_int(self, name: str, default: int) -> int:
        """Return ``name`` as a non-negative integer.

        Raises:
            InvalidParameterError: If the value is not a non-negative integer.
        """
        raw = self.get(name)
        if raw is None:
            return default
        text = raw.strip()
        if not _INTEGER.fullmatch(text):
            raise InvalidParameterError(name, raw)
        value = int(text)
        if value < 0:
            raise InvalidParameterError(name, raw)
        return value

    def filter_queries(self) -> list[str]:
        """Return the non-blank ``fq`` values in request order."""
        return [fq for fq in self.get_all("fq") if fq.strip()]

    def with_values(self, **overrides: str | None) -> SolrParams:
        """Return a copy with single-valued overrides applied (``None`` skips)."""
        values = {name: list(items) for name, items in self._values.items()}
        for name, value in overrides.items():
            if value is not None:
                values[name] = [value]
        return SolrParams(values)
