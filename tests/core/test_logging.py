from __future__ import annotations

import logging

from periodic_notifier.core.logging import LOGGING_CONFIG, NOTIFIER_LOGGER, configure_logging


def test_configure_logging_applies_level(restore_logging: None) -> None:
    config = configure_logging("DEBUG")

    assert config["root"]["level"] == "DEBUG"
    assert config["loggers"]["periodic_notifier"]["level"] == "DEBUG"
    assert config["loggers"][NOTIFIER_LOGGER]["level"] == "DEBUG"
    assert logging.getLogger("periodic_notifier").level == logging.DEBUG
    assert logging.getLogger(NOTIFIER_LOGGER).isEnabledFor(logging.DEBUG)
    assert LOGGING_CONFIG["root"]["level"] == "INFO"


def test_notifier_logger_emits_through_package_handler(restore_logging: None) -> None:
    configure_logging("INFO")

    notifier_logger = logging.getLogger(NOTIFIER_LOGGER)
    package_logger = logging.getLogger("periodic_notifier")
    assert notifier_logger.handlers == []
    assert notifier_logger.propagate is True
    assert len(package_logger.handlers) == 1
    assert package_logger.propagate is False


__all__ = [
    "test_configure_logging_applies_level",
    "test_notifier_logger_emits_through_package_handler",
]
