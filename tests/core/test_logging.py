"""Tests for logging setup."""

import logging

from app.core.logging import get_logger, setup_logging


class TestLogging:
    """Tests for setup_logging and get_logger."""

    def test_quiets_third_party_loggers(self) -> None:
        setup_logging(level="DEBUG", quiet_loggers=("noisy.library",))

        assert logging.getLogger("noisy.library").level == logging.WARNING

    def test_get_logger_returns_named_logger(self) -> None:
        logger = get_logger("app.newsletter")

        assert logger is logging.getLogger("app.newsletter")
