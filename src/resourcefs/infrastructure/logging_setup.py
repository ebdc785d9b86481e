"""Central structlog bootstrap for resourcefs."""

from __future__ import annotations

import logging
from typing import Any

import structlog


_LOG_CONFIGURED = False


def is_logging_configured() -> bool:
    return _LOG_CONFIGURED


def configure_logging(level: str = "INFO", json_logs: bool = False, *, force: bool = False) -> bool:
    """Configure stdlib logging and structlog once per process.

    Later calls are no-ops unless ``force`` is set. Returns True when this
    call applied the configuration.
    """
    global _LOG_CONFIGURED
    if _LOG_CONFIGURED and not force:
        return False

    log_level = getattr(logging, str(level or "INFO").upper(), logging.INFO)
    logging.basicConfig(level=log_level, format="%(message)s", force=force)

    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]
    if json_logs:
        processors.append(structlog.processors.format_exc_info)
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=not force,
    )

    _LOG_CONFIGURED = True
    return True
