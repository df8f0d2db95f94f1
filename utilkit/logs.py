"""
Logging setup for the utilkit console entry point.

The library itself only creates module loggers; handlers are attached here
by the CLI.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: str = "WARNING") -> logging.Logger:
    """
    Attach a human-readable stderr handler to the utilkit logger.

    Only the first call configures anything; a logger that already has
    handlers keeps its handlers and level.
    """
    logger = logging.getLogger("utilkit")
    if logger.handlers:
        return logger

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
    return logger
