"""
Editing context logger.

Provides logging interface for the editing context with automatic [editor] prefix.
All editing modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from issueforge.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[editor]"


def setup_editing_logger(log_dir: Path, mode: str = "edit", console: bool = True) -> Path:
    """
    Setup logger for an editing session.

    Args:
        log_dir: Directory for this editing session
        mode: Session mode for provenance ("edit" or "render")
        console: Also log INFO and above to stderr

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="editor",
        log_dir=log_dir,
        extra_provenance={"Mode": mode},
        console=console,
    )


# Wrapper functions with automatic [editor] prefix


def _log_info(message: str) -> None:
    """Log info message with [editor] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [editor] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [editor] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [editor] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")
