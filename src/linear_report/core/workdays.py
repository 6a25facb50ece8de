"""Pure work-day arithmetic - no I/O dependencies."""

from datetime import date, datetime, timedelta

WEEKEND_DAYS = (5, 6)  # Saturday, Sunday


def _as_date(value: date | datetime) -> date:
    """Normalize a datetime to its calendar date (midnight)."""
    if isinstance(value, datetime):
        return value.date()
    return value


def count_weekend_days(start: date | datetime, end: date | datetime) -> int:
    """Count Saturdays and Sundays in the inclusive range between two dates."""
    first, last = sorted((_as_date(start), _as_date(end)))
    count = 0
    current = first
    while current <= last:
        if current.weekday() in WEEKEND_DAYS:
            count += 1
        current += timedelta(days=1)
    return count


def work_days_remaining(start: date | datetime, end: date | datetime) -> int:
    """
    Work days between two dates, excluding weekends.

    Symmetric: the order of the arguments does not matter. Holidays are
    not excluded.
    """
    first, last = _as_date(start), _as_date(end)
    diff_days = abs((last - first).days)
    return max(diff_days - count_weekend_days(first, last), 0)
