"""Logging configuration helpers."""

from __future__ import annotations

import logging
import logging.config
from typing import Any

from sky_search.config import get_settings

_RECORD_ATTRS = frozenset(
    logging.LogRecord("", logging.INFO, "", 0, "", None, None).__dict__
) | {"message", "asctime", "taskName", "session_token", "context"}


def get_logging_config() -> dict[str, Any]:
    """
    Get logging configuration based on settings.

    Records carry the search session token (or `-`) and, at the end of the
    line, any other `extra` fields as `key=value` pairs.

    Returns:
        Logging configuration dictionary
    """
    settings = get_settings()
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {
                "format": (
                    "%(asctime)s | %(levelname)s | %(name)s | "
                    "token=%(session_token)s | %(message)s%(context)s"
                ),
            },
        },
        "filters": {
            "request_context": {
                "()": "sky_search.logging_config.RequestContextFilter",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "standard",
                "filters": ["request_context"],
            },
        },
        "root": {
            "level": settings.log_level,
            "handlers": ["console"],
        },
    }


class RequestContextFilter(logging.Filter):
    """Default `session_token` and render structured `extra` fields into `context`."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "session_token"):
            record.session_token = "-"
        fields = sorted(
            (key, value) for key, value in record.__dict__.items() if key not in _RECORD_ATTRS
        )
        record.context = "".join(f" {key}={value}" for key, value in fields)
        return True


def configure_logging(config: dict[str, Any] | None = None) -> None:
    """
    Apply logging configuration once.

    Args:
        config: Optional logging configuration dict. If None, uses config from settings.
    """
    if config is None:
        config = get_logging_config()
    logging.config.dictConfig(config)
