"""
Modeling context logger.

Provides logging interface for the modeling context with automatic [model] prefix.
All modeling modules should import from this module, not from loguru directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[model]"


def _log_debug(message: str) -> None:
    """Log debug message with [model] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def _log_info(message: str) -> None:
    """Log info message with [model] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [model] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")
