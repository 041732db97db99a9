"""
Logging setup for the isoecies package logger.

Library modules only create loggers with ``logging.getLogger(__name__)``;
handlers are attached by applications, e.g. the CLI, through setup_logging().
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from isoecies.common.config import Config

PACKAGE_LOGGER = "isoecies"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logger(logger: logging.Logger, log_level: int) -> None:
    """
    Attach a StreamHandler with the standard format, once, and set the level.

    Calling it again only changes the level of the logger and its handlers.

    Args:
        logger: The logger instance to configure
        log_level: The logging level to set
    """
    logger.setLevel(log_level)
    if logger.handlers:
        for handler in logger.handlers:
            handler.setLevel(log_level)
        return
    handler = logging.StreamHandler()
    handler.setLevel(log_level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)


def setup_logging(config: Config) -> logging.Logger:
    """Configure the package logger from Config.LOG_LEVEL."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    setup_logger(logger, config.LOG_LEVEL)
    return logger
