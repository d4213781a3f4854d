"""Logging utilities for yarn-delta."""

import logging
from typing import Any

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

LOGGER_NAMES = ("LockfileExtractor", "VersionMapDiffer", "JSONFormatter", "CLI")


class YarnDeltaLogger:
    """Logger with rich formatting on stderr."""

    def __init__(self, name: str, level: int = logging.INFO) -> None:
        self.logger = logging.getLogger(name)
        if self.logger.level == logging.NOTSET:
            self.logger.setLevel(level)
        self._setup_handlers()

    def _setup_handlers(self) -> None:
        """Setup rich console handler with custom theme."""
        console = Console(stderr=True, theme=Theme({
            "info": "cyan",
            "warning": "yellow",
            "error": "red",
            "critical": "red bold",
            "debug": "dim",
        }))

        handler = RichHandler(
            console=console,
            show_time=True,
            show_path=False,
            markup=True,
        )

        formatter = logging.Formatter(
            fmt="%(name)s: %(message)s",
            datefmt="[%X]"
        )
        handler.setFormatter(formatter)

        # Remove existing handlers to avoid duplicates
        self.logger.handlers.clear()
        self.logger.addHandler(handler)
        self.logger.propagate = False

    def info(self, msg: str, **kwargs: Any) -> None:
        """Log info message."""
        self.logger.info(msg, extra=kwargs)

    def warning(self, msg: str, **kwargs: Any) -> None:
        """Log warning message."""
        self.logger.warning(msg, extra=kwargs)

    def error(self, msg: str, **kwargs: Any) -> None:
        """Log error message."""
        self.logger.error(msg, extra=kwargs)

    def debug(self, msg: str, **kwargs: Any) -> None:
        """Log debug message."""
        self.logger.debug(msg, extra=kwargs)


def setup_logging(level: int = logging.INFO, verbose: bool = False) -> None:
    """Setup logging levels for yarn-delta.

    Every project logger writes through its own rich handler on stderr, so
    only the levels are configured here.

    Args:
        level: Logging level
        verbose: Enable verbose logging
    """
    if verbose:
        level = logging.DEBUG

    for name in LOGGER_NAMES:
        logging.getLogger(name).setLevel(level)


def get_logger(name: str) -> YarnDeltaLogger:
    """Get a yarn-delta logger instance.

    Args:
        name: Logger name

    Returns:
        Configured logger instance
    """
    return YarnDeltaLogger(name)
