"""
Rendering context logger.

Provides logging interface for rendering context with automatic [render] prefix.
All rendering modules should import from this module, not from utils.logger directly.
"""

import os
from pathlib import Path

from dotenv import load_dotenv
from loguru import logger

from folio.utils.logger import setup_logger as _setup_logger

load_dotenv()

CONTEXT_PREFIX = "[render]"


def setup_rendering_logger(log_dir: Path) -> Path:
    """
    Setup logger for rendering context.

    Configures loguru with provenance tracking and rendering-specific context.

    Args:
        log_dir: Directory for this rendering session

    Returns:
        Path to log file

    Example:
        from folio.contexts.rendering.logger import setup_rendering_logger

        log_file = setup_rendering_logger(log_dir)
    """
    return _setup_logger(
        context_name="render",
        log_dir=log_dir,
        extra_provenance={"CHROME_PATH": os.getenv("CHROME_PATH")},
    )


def _log_info(message: str) -> None:
    """Log info message with [render] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [render] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [render] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [render] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_pdf_start(source: Path, chrome_path: Path) -> None:
    """Log start of PDF generation with context."""
    _log_info(f"Generating PDF from {source}")
    _log_info(f"Using Chrome: {chrome_path}")


def log_pdf_result(result, elapsed_time: float) -> None:
    """
    Log PDF generation result.

    Args:
        result: PDFResult from the generator
        elapsed_time: Time taken to print
    """
    if result.success:
        _log_success(f"PDF generated ({elapsed_time:.2f}s)")
        _log_info(f"  Output: {result.pdf_path}")
        _log_info(f"  Size: {result.size_kb:.1f} KB")
    else:
        _log_error(f"PDF generation failed ({elapsed_time:.2f}s)")
        for i, err in enumerate(result.errors, 1):
            _log_error(f"  Error {i}: {err}")
