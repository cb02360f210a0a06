"""Timestamp and CV date formatting utilities."""

import re
from datetime import date, datetime, timezone
from typing import Optional

# CV dates are "YYYY-MM" or bare "YYYY"
CV_DATE_PATTERN = re.compile(r"^(\d{4})(?:-(\d{2}))?$")

MONTH_ABBREVIATIONS = [
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
]


def now() -> str:
    """Compact local timestamp for directory names (e.g., 20251114_183045)."""
    return datetime.now().strftime("%Y%m%d_%H%M%S")


def now_exact() -> str:
    """ISO 8601 timestamp with microseconds."""
    return datetime.now().isoformat()


def today() -> str:
    """Today's date as YYYY-MM-DD."""
    return date.today().isoformat()


def parse_cv_date(value: str) -> tuple[int, Optional[int]]:
    """
    Split a CV date string into (year, month).

    Args:
        value: "YYYY-MM" or "YYYY"

    Returns:
        Tuple of year and month (month is None for year-only dates)

    Raises:
        ValueError: If the string is not a CV date or the month is out of range
    """
    match = CV_DATE_PATTERN.match(value.strip())
    if not match:
        raise ValueError(f"Invalid CV date '{value}': expected YYYY-MM or YYYY")

    year = int(match.group(1))
    month = int(match.group(2)) if match.group(2) else None
    if month is not None and not 1 <= month <= 12:
        raise ValueError(f"Invalid CV date '{value}': month must be 01-12")

    return year, month


def format_cv_date(value: Optional[str]) -> str:
    """
    Format a CV date for display.

    Examples:
        format_cv_date("2021-03")  # "Mar 2021"
        format_cv_date("2019")     # "2019"
        format_cv_date(None)       # "Present"
    """
    if not value:
        return "Present"

    year, month = parse_cv_date(value)
    if month is None:
        return str(year)
    return f"{MONTH_ABBREVIATIONS[month - 1]} {year}"


def format_date_range(start: Optional[str], end: Optional[str]) -> str:
    """Format a start/end pair as "Mar 2021 - Present"."""
    return f"{format_cv_date(start)} - {format_cv_date(end)}"


def format_duration(start: str, end: Optional[str], reference: date = None) -> str:
    """
    Format the length of a CV entry (e.g., "2 years, 3 months").

    Both ends count as full months, so "2021-01" to "2021-12" is one year.
    Open-ended entries run until the reference date (today by default).
    Year-only dates are treated as January.
    """
    if reference is None:
        reference = date.today()

    start_year, start_month = parse_cv_date(start)
    if end:
        end_year, end_month = parse_cv_date(end)
    else:
        end_year, end_month = reference.year, reference.month

    total_months = (end_year - start_year) * 12 + ((end_month or 1) - (start_month or 1)) + 1
    total_months = max(total_months, 1)
    years, months = divmod(total_months, 12)

    parts = []
    if years:
        parts.append(f"{years} year{'s' if years != 1 else ''}")
    if months:
        parts.append(f"{months} month{'s' if months != 1 else ''}")
    return ", ".join(parts)


def format_rfc822(value: date) -> str:
    """Format a date or datetime for RSS pubDate (midnight UTC for plain dates)."""
    if not isinstance(value, datetime):
        value = datetime(value.year, value.month, value.day)
    elif value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    # Built by hand so the output does not depend on the process locale
    weekday = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"][value.weekday()]
    month = MONTH_ABBREVIATIONS[value.month - 1]
    return f"{weekday}, {value.day:02d} {month} {value.year} {value:%H:%M:%S} GMT"
