"""Period resolution - calendar windows for reports."""
import calendar
from datetime import datetime, time, timedelta

from worklog.models.report import Period, PeriodKind
from worklog.utils.time import to_local


# First half of a month runs through this day
FORTNIGHT_SPLIT_DAY = 15


def _day_start(moment: datetime) -> datetime:
    return datetime.combine(moment.date(), time.min)


def _day_end(moment: datetime) -> datetime:
    return datetime.combine(moment.date(), time.max)


def _month_last_day(moment: datetime) -> int:
    return calendar.monthrange(moment.year, moment.month)[1]


def _long_date(moment: datetime) -> str:
    return f"{moment.day} {moment:%B %Y}"


def resolve_period(now: datetime, kind: PeriodKind) -> Period:
    """
    Compute the calendar window containing now.

    Weeks start on Monday. Fortnights are the fixed 1st-15th and
    16th-last day halves of the month; the first half closes at
    23:59:59 on the 15th.

    Args:
        now: Reference instant
        kind: Period granularity

    Returns:
        Resolved period with inclusive bounds and display label
    """
    now = to_local(now)
    kind = PeriodKind(kind)

    if kind is PeriodKind.DAILY:
        start, end = _day_start(now), _day_end(now)
        label = _long_date(start)

    elif kind is PeriodKind.WEEKLY:
        start = _day_start(now - timedelta(days=now.weekday()))
        end = _day_end(start + timedelta(days=6))
        label = f"Week of {start.day} to {_long_date(end)}"

    elif kind is PeriodKind.BIWEEKLY:
        if now.day <= FORTNIGHT_SPLIT_DAY:
            start = _day_start(now.replace(day=1))
            end = datetime.combine(now.date().replace(day=FORTNIGHT_SPLIT_DAY), time(23, 59, 59))
        else:
            start = _day_start(now.replace(day=FORTNIGHT_SPLIT_DAY + 1))
            end = _day_end(now.replace(day=_month_last_day(now)))
        label = f"Fortnight of {start.day} to {_long_date(end)}"

    else:
        start = _day_start(now.replace(day=1))
        end = _day_end(now.replace(day=_month_last_day(now)))
        label = f"{start:%B %Y}"

    return Period(kind=kind, start=start, end=end, label=label)
