"""
Serialization context logger.

Provides logging interface for the serialization context with automatic [serialize] prefix.
All serialization modules should import from this module, not from loguru directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[serialize]"


def _log_debug(message: str) -> None:
    """Log debug message with [serialize] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def _log_info(message: str) -> None:
    """Log info message with [serialize] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def log_document_built(section_count: int, block_count: int, char_count: int) -> None:
    """Log a summary of one serialization pass."""
    dropped = section_count - block_count
    _log_debug(
        f"serialized {section_count} sections -> {block_count} blocks "
        f"({dropped} empty dropped, {char_count} chars)"
    )
