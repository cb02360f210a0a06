"""
Shared utilities for FOLIO.

Common functionality used across contexts:
- Configuration (environment paths, site settings)
- Logging setup
- Date and timestamp formatting
"""

from folio.utils.config import load_site_config
from folio.utils.timestamp import format_cv_date, now, now_exact, today

__all__ = ["format_cv_date", "load_site_config", "now", "now_exact", "today"]
