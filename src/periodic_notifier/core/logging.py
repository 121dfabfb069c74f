"""Application logging configuration."""

from __future__ import annotations

import copy
import logging
from logging.config import dictConfig
from typing import Any

PACKAGE_LOGGER = "periodic_notifier"
# Sink handed to the notifier; its records carry the tick timestamps.
NOTIFIER_LOGGER = f"{PACKAGE_LOGGER}.notifier"

# Loggers whose level follows LOG_LEVEL.
LEVELLED_LOGGERS = ("uvicorn", "uvicorn.error", PACKAGE_LOGGER, NOTIFIER_LOGGER)

LOGGING_CONFIG: dict[str, Any] = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "default": {
            "()": "uvicorn.logging.DefaultFormatter",
            "fmt": "%(asctime)s | %(levelprefix)s | %(name)s | %(message)s",
        },
        "access": {
            "()": "uvicorn.logging.AccessFormatter",
            "fmt": "%(levelprefix)s %(client_addr)s - \"%(request_line)s\" %(status_code)s",
        },
    },
    "handlers": {
        "default": {
            "class": "logging.StreamHandler",
            "formatter": "default",
        },
        "uvicorn.access": {
            "class": "logging.StreamHandler",
            "formatter": "access",
        },
    },
    "loggers": {
        "uvicorn": {"handlers": ["default"], "level": "INFO"},
        "uvicorn.error": {"handlers": ["default"], "level": "INFO", "propagate": False},
        "uvicorn.access": {
            "handlers": ["uvicorn.access"],
            "level": "INFO",
            "propagate": False,
        },
        PACKAGE_LOGGER: {"handlers": ["default"], "level": "INFO", "propagate": False},
        # No handlers of its own: tick records go out through the package handler.
        NOTIFIER_LOGGER: {"level": "INFO", "propagate": True},
    },
    "root": {"handlers": ["default"], "level": "INFO"},
}


def configure_logging(level: str | int = "INFO") -> dict[str, Any]:
    """Apply ``LOGGING_CONFIG`` at ``level`` and return the config that was used.

    An unknown level name is rejected by ``dictConfig`` with a ``ValueError``.
    """

    config = copy.deepcopy(LOGGING_CONFIG)
    config["root"]["level"] = level

    for logger_name in LEVELLED_LOGGERS:
        config["loggers"].setdefault(logger_name, {"handlers": ["default"], "propagate": False})
        config["loggers"][logger_name]["level"] = level

    dictConfig(config)
    logging.getLogger(__name__).debug("Logging configured with level %s", level)
    return config
