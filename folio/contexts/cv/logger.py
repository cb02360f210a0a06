"""
CV context logger.

Provides logging interface for CV context with automatic [cv] prefix.
All CV modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from folio.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[cv]"


def setup_cv_logger(log_dir: Path, cv_path: Path) -> Path:
    """
    Setup logger for CV exports.

    Console output goes to stderr so exported text can be piped from stdout.

    Args:
        log_dir: Directory for this export session
        cv_path: CV document being exported

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="cv",
        log_dir=log_dir,
        extra_provenance={"CV document": cv_path},
    )


def _log_info(message: str) -> None:
    """Log info message with [cv] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [cv] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [cv] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_limit_exceeded(label: str, length: int, limit: int) -> None:
    """Warn that a LinkedIn field is over its character limit."""
    _log_warning(f"{label} exceeds {limit} characters ({length} chars)")
    _log_warning(f"  Consider shortening by {length - limit} characters")
