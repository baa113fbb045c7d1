"""Time arithmetic helpers."""
from datetime import datetime


def to_local(value: datetime) -> datetime:
    """
    Normalize a timestamp to naive local time.

    Aware values are converted to the host's local zone and stripped of
    their tzinfo; naive values are assumed to already be local.
    """
    if value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)


def hours_between(start: datetime, end: datetime) -> float:
    """
    Fractional hours elapsed between start and end.

    Negative when end precedes start; callers validate ordering.

    Examples:
        >>> hours_between(datetime(2024, 3, 1, 8), datetime(2024, 3, 1, 12, 30))
        4.5
    """
    return (end - start).total_seconds() / 3600


def format_duration(start: datetime, end: datetime) -> tuple[int, int]:
    """
    Whole hours and minutes elapsed between start and end.

    Both parts are truncated, never rounded. Inverted spans give (0, 0).

    Examples:
        >>> format_duration(datetime(2024, 3, 1, 8), datetime(2024, 3, 1, 12, 59, 59))
        (4, 59)
    """
    seconds = int((end - start).total_seconds())
    if seconds < 0:
        return 0, 0
    minutes = seconds // 60
    return minutes // 60, minutes % 60


def duration_label(start: datetime, end: datetime) -> str:
    """Render a duration as ``"4h 30m"``."""
    hours, minutes = format_duration(start, end)
    return f"{hours}h {minutes}m"
