"""
Crosspost context logger.

Provides logging interface for crosspost context with automatic [crosspost] prefix.
All crosspost modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from folio.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[crosspost]"


def setup_crosspost_logger(log_dir: Path, slug: str) -> Path:
    """
    Setup logger for a cross-posting session.

    Args:
        log_dir: Directory for this session
        slug: Post being published

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="crosspost",
        log_dir=log_dir,
        extra_provenance={"Post": slug},
    )


def _log_info(message: str) -> None:
    """Log info message with [crosspost] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [crosspost] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [crosspost] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [crosspost] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")
