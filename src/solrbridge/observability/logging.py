"""Logging setup: structlog for access events, stdlib for module loggers."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from solrbridge.config.settings import ObservabilitySettings

# The OpenSearch client logs every HTTP round trip at INFO.
QUIET_LOGGERS = ("opensearch", "urllib3")

_STDLIB_FORMATS = {
    "json": "%(message)s",
    "console": "%(asctime)s %(levelname)-8s %(name)s: %(message)s",
}


def setup_logging(settings: ObservabilitySettings | None = None) -> None:
    """Configure logging for the server and the CLI.

    Args:
        settings: Observability settings. Uses ``info`` and ``json`` if None.
    """
    level_name = settings.log_level.upper() if settings else "INFO"
    log_format = settings.log_format if settings else "json"
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.INFO

    renderer = structlog.dev.ConsoleRenderer() if log_format == "console" else structlog.processors.JSONRenderer()
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format=_STDLIB_FORMATS.get(log_format, "%(message)s"),
        stream=sys.stdout,
        level=level,
        force=True,
    )
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(level if level <= logging.DEBUG else logging.WARNING)
