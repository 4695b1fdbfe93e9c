"""Actual/365 day counting."""

from datetime import datetime, timezone
from typing import Optional

SECONDS_PER_YEAR = 365.0 * 86400.0


def now_like(reference: datetime) -> datetime:
    """Current UTC time, naive or aware to match `reference`."""
    now = datetime.now(timezone.utc)
    return now if reference.tzinfo is not None else now.replace(tzinfo=None)


def year_fraction(start: datetime, end: datetime) -> float:
    """Actual/365 year fraction between two datetimes (negative if end < start)."""
    return (end - start).total_seconds() / SECONDS_PER_YEAR


def year_fraction_from(valuation_date: Optional[datetime], end: datetime) -> float:
    """Year fraction from the valuation date (default: now) to `end`."""
    start = valuation_date if valuation_date is not None else now_like(end)
    return year_fraction(start, end)
