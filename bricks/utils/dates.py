from datetime import datetime, time, timedelta


def month_bounds(today):
    """First and last day of the month containing `today`."""
    first = today.replace(day=1)
    next_month = (first + timedelta(days=32)).replace(day=1)
    return first, next_month - timedelta(days=1)


def day_bounds(day):
    start = datetime.combine(day, time.min)
    return start, start + timedelta(days=1)


def minutes_between(start, end):
    """Whole minutes from start to end, truncated toward zero."""
    return int((end - start).total_seconds() / 60)


def utc_today():
    """Current date in UTC, the clock stored timestamps use."""
    return datetime.utcnow().date()
