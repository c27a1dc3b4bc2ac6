"""
Logging Configuration

Single dictConfig for the service: our own loggers and uvicorn's share one console handler
and one line format, so header diagnostics and access logs interleave readably.
"""

import logging
import logging.config
from typing import Any, Optional

from header_relay.config import Settings, get_settings

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def build_logging_config(log_level: str) -> dict[str, Any]:
    """
    Build the dictConfig mapping

    Args:
        log_level: Level for the root and header_relay loggers ("DEBUG", "INFO", ...)

    Returns:
        dict: Configuration accepted by logging.config.dictConfig
    """
    loggers: dict[str, Any] = {
        "root": {
            "handlers": ["console"],
            "level": log_level,
            "propagate": True,
        },
        "header_relay": {
            "handlers": ["console"],
            "level": log_level,
            "propagate": False,
        },
    }
    # uvicorn stays at INFO even in debug mode; its DEBUG output is protocol noise
    for name in _UVICORN_LOGGERS:
        loggers[name] = {
            "handlers": ["console"],
            "level": "INFO",
            "propagate": False,
        }

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {
                "format": LOG_FORMAT,
                "datefmt": LOG_DATE_FORMAT,
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "standard",
                "stream": "ext://sys.stdout",
            },
        },
        "loggers": loggers,
    }


def setup_logging(settings: Optional[Settings] = None) -> None:
    """
    Configure global log format

    DEBUG setting switches our loggers to DEBUG so per-call header diagnostics become visible.
    """
    settings = settings or get_settings()
    log_level = "DEBUG" if settings.DEBUG else "INFO"
    logging.config.dictConfig(build_logging_config(log_level))
