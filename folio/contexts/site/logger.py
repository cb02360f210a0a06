"""
Site context logger.

Provides logging interface for site context with automatic [site] prefix.
All site modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from folio.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[site]"


def setup_site_logger(log_dir: Path, dist_dir: Path) -> Path:
    """
    Setup logger for site builds.

    Args:
        log_dir: Directory for this build session
        dist_dir: Output directory being written

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="site",
        log_dir=log_dir,
        extra_provenance={"Output directory": dist_dir},
    )


def _log_info(message: str) -> None:
    """Log info message with [site] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [site] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")
