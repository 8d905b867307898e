"""
Stats context logger.

Provides logging interface for the stats context with automatic [stats] prefix.
"""

from loguru import logger

CONTEXT_PREFIX = "[stats]"


def _log_info(message: str) -> None:
    """Log info message with [stats] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [stats] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [stats] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")
