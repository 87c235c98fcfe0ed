"""Structured logging for retry events."""

from __future__ import annotations

import logging

import structlog

from retryfn.config import get_settings


def _resolve_level(level: int | str | None) -> int:
    if level is None:
        level = get_settings().log_level
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level!r}")
        return resolved
    return level


def configure_logging(level: int | str | None = None) -> None:
    """Render retry events as JSON lines.

    Without an explicit ``level`` the ``RETRY_LOG_LEVEL`` setting is used.
    """

    resolved = _resolve_level(level)
    logging.basicConfig(
        level=resolved,
        format="%(message)s",
        handlers=[logging.StreamHandler()],
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(resolved),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


logger = structlog.get_logger("retryfn")

__all__ = ["configure_logging", "logger"]
