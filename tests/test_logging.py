"""Tests for logging setup."""

import logging

from yarn_delta.utils.logging import LOGGER_NAMES, get_logger, setup_logging


class TestSetupLogging:
    """Test setup_logging and get_logger."""

    def test_verbose_enables_debug(self):
        """Test that verbose mode sets every project logger to DEBUG."""
        setup_logging(verbose=True)
        try:
            for name in LOGGER_NAMES:
                assert logging.getLogger(name).level == logging.DEBUG
        finally:
            setup_logging()

    def test_default_level(self):
        """Test that the default level is INFO."""
        setup_logging()
        assert logging.getLogger("LockfileExtractor").level == logging.INFO

    def test_logger_keeps_configured_level(self):
        """Test that creating a logger does not reset a configured level."""
        setup_logging(verbose=True)
        try:
            logger = get_logger("VersionMapDiffer")
            assert logger.logger.level == logging.DEBUG
        finally:
            setup_logging()

    def test_single_handler_without_propagation(self):
        """Test that records go only to the logger's own rich handler."""
        logger = get_logger("CLI")
        get_logger("CLI")

        assert len(logger.logger.handlers) == 1
        assert logger.logger.propagate is False
