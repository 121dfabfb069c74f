from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from periodic_notifier.core.config import get_settings


@pytest.fixture
def restore_logging() -> Iterator[None]:
    """Undo ``configure_logging`` so later tests keep propagating to caplog."""

    names = (
        "periodic_notifier",
        "periodic_notifier.notifier",
        "uvicorn",
        "uvicorn.error",
        "uvicorn.access",
    )
    root = logging.getLogger()
    saved_root = (root.level, list(root.handlers))
    saved = {
        name: (
            logging.getLogger(name).level,
            logging.getLogger(name).propagate,
            list(logging.getLogger(name).handlers),
        )
        for name in names
    }
    yield
    root.setLevel(saved_root[0])
    root.handlers[:] = saved_root[1]
    for name, (level, propagate, handlers) in saved.items():
        logger = logging.getLogger(name)
        logger.setLevel(level)
        logger.propagate = propagate
        logger.handlers[:] = handlers


@pytest.fixture
def fresh_settings() -> Iterator[None]:
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
