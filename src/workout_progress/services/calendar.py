"""Calendar keys and labels for chart buckets.

Keys are built from the local calendar date, never the UTC date, so a
sample recorded late in the evening lands on the day the user saw it.
"""

from datetime import date, datetime, tzinfo


def local_date(t: datetime, tz: tzinfo | None = None) -> date:
    """Resolve the local calendar date of a timestamp.

    Args:
        t: Timestamp; naive values are treated as local wall-clock time
        tz: Target timezone for aware timestamps (None = system local zone)

    Returns:
        Calendar date in the target zone
    """
    if t.tzinfo is None:
        return t.date()
    return t.astimezone(tz).date()


def date_key(t: datetime | date, tz: tzinfo | None = None) -> str:
    """Canonical ``YYYY-MM-DD`` key for the local day of ``t``."""
    d = local_date(t, tz) if isinstance(t, datetime) else t
    return f"{d.year:04d}-{d.month:02d}-{d.day:02d}"


def month_key(day_key: str) -> str:
    """Truncate a ``YYYY-MM-DD`` key to its ``YYYY-MM`` month."""
    return day_key[:7]


def month_key_for(d: date) -> str:
    return f"{d.year:04d}-{d.month:02d}"


def shift_months(d: date, months: int) -> date:
    """First day of the month ``months`` away from ``d``'s month.

    Anchoring on the first avoids overflow: March 31 minus one month is
    February, not March 3.
    """
    index = d.year * 12 + (d.month - 1) + months
    return date(index // 12, index % 12 + 1, 1)


def day_label(d: date) -> str:
    """Day bucket label, e.g. ``3/14``."""
    return f"{d.month}/{d.day}"


def month_label(d: date) -> str:
    """Month bucket label with a two-digit year, e.g. ``3/24``."""
    return f"{d.month}/{d.year % 100:02d}"
