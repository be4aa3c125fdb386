"""Logging setup for fkt."""

from fkt.logger.logger import logger, setup_logger

__all__ = ["logger", "setup_logger"]
