"""Date detection for engine values that arrive as plain strings.

OpenSearch returns date fields as text. A value is re-typed only when it
matches the strict ISO-8601 UTC form ``YYYY-MM-DDThh:mm:ss[.fraction]Z``.
Dates in any other format stay text; there is no general date parsing here,
so numeric-looking strings are never coerced.
"""

from __future__ import annotations

import re
from datetime import UTC, datetime
from typing import Any

ISO_DATETIME_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(?:\.\d+)?Z")

_FRACTION = re.compile(r"\.(\d+)Z$")


def is_iso_datetime(value: str) -> bool:
    """Return True if ``value`` is exactly an ISO-8601 UTC date-time."""
    return ISO_DATETIME_PATTERN.fullmatch(value) is not None


def parse_iso_datetime(value: str) -> datetime:
    """Parse a string accepted by :func:`is_iso_datetime` into an aware datetime.

    Fractions longer than microseconds are truncated.

    Raises:
        ValueError: If the string is not a valid date-time (e.g. month 13).
    """
    normalized = _FRACTION.sub(lambda m: "." + m.group(1)[:6].ljust(6, "0") + "Z", value)
    parsed = datetime.fromisoformat(normalized.replace("Z", "+00:00"))
    return parsed.astimezone(UTC)


def coerce_value(value: Any) -> Any:
    """Re-type date-time strings; return every other value unchanged.

    Strings that match the pattern but name an impossible date (``2021-13-40…``)
    are left as text.
    """
    if isinstance(value, str) and is_iso_datetime(value):
        try:
            return parse_iso_datetime(value)
        except ValueError:
            return value
    return value


def format_solr_datetime(value: datetime) -> str:
    """Render a datetime the way Solr writes dates: UTC with a trailing ``Z``."""
    if value.tzinfo is not None:
        value = value.astimezone(UTC)
    text = value.strftime("%Y-%m-%dT%H:%M:%S")
    if value.microsecond:
        if value.microsecond % 1000 == 0:
            text += f".{value.microsecond // 1000:03d}"
        else:
            text += f".{value.microsecond:06d}"
    return text + "Z"
