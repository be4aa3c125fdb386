"""Package logger for fkt.

The helpers themselves are silent; the one record they emit is the opt-in
warning ``safe`` writes when it masks an error (see ``FKT_LOG_MASKED_ERRORS``).
"""

import logging
import sys

from fkt.core.config import settings

__all__ = ["logger", "setup_logger"]

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _has_stream_handler(logger: logging.Logger) -> bool:
    return any(type(h) is logging.StreamHandler for h in logger.handlers)


def setup_logger(
    name: str = "fkt",
    level: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Return the named logger, attaching a stdout handler the first time.

    Handlers added by others (test harnesses, applications) are left alone and
    do not count as configuration, so the stdout handler is installed exactly
    once per logger.

    Args:
        name: Logger name, ``fkt`` or one of its children
        level: Log level name, defaults to ``settings.LOG_LEVEL``
        format_string: Custom format string

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    if _has_stream_handler(logger):
        return logger

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        logging.Formatter(fmt=format_string or DEFAULT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    )
    logger.addHandler(handler)
    logger.setLevel((level or settings.LOG_LEVEL).upper())
    logger.propagate = False

    return logger


# Create default logger instance for the package
logger = setup_logger()
