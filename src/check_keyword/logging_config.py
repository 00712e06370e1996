"""
Logging setup for check-keyword.

Library modules log through children of the ``check_keyword`` logger and
never attach handlers themselves. The command-line tool calls
setup_logging; applications embedding the classifier can do the same or
configure the logger their own way.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

LOGGER_NAME = "check_keyword"

DETAILED_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
SIMPLE_FORMAT = "%(levelname)s: %(message)s"


def _handler(handler: logging.Handler, level: int, fmt: str) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt))
    return handler


def setup_logging(
    level: str = "WARNING",
    log_file: Optional[Path] = None,
    verbose: bool = False,
) -> logging.Logger:
    """Attach handlers to the check_keyword logger.

    Log records go to stderr, leaving stdout to the report. Calling this
    again replaces the handlers of the previous call.

    Args:
        level: Level name; unknown names fall back to WARNING
        log_file: Also write detailed records to this file
        verbose: Use the detailed format on stderr too

    Returns:
        The configured logger

    Raises:
        OSError: If log_file cannot be opened
    """
    logger = logging.getLogger(LOGGER_NAME)
    log_level = getattr(logging, level.upper(), logging.WARNING)

    handlers = [
        _handler(
            logging.StreamHandler(sys.stderr),
            log_level,
            DETAILED_FORMAT if verbose else SIMPLE_FORMAT,
        )
    ]
    if log_file:
        handlers.append(_handler(logging.FileHandler(log_file), log_level, DETAILED_FORMAT))

    logger.handlers.clear()
    for handler in handlers:
        logger.addHandler(handler)
    logger.setLevel(log_level)
    logger.propagate = False

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the check_keyword logger, or its child ``check_keyword.<name>``."""
    if name:
        return logging.getLogger(f"{LOGGER_NAME}.{name}")
    return logging.getLogger(LOGGER_NAME)
