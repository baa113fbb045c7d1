"""Report service - period aggregation and text rendering."""
import logging
from datetime import datetime
from typing import Any, Iterable, Mapping, Optional, Union

from pydantic import ValidationError as ModelValidationError

from worklog.models.report import Period, PeriodKind, Report
from worklog.models.time_entry import WorkEntry
from worklog.services.period_service import resolve_period
from worklog.utils.currency import format_currency
from worklog.utils.time import duration_label, hours_between


logger = logging.getLogger(__name__)

EntryLike = Union[WorkEntry, Mapping[str, Any]]

SUMMARY_TITLES = {
    PeriodKind.DAILY: "Daily",
    PeriodKind.WEEKLY: "Weekly",
    PeriodKind.BIWEEKLY: "Fortnightly",
    PeriodKind.MONTHLY: "Monthly",
}

TABLE_HEADERS = ("Date", "Start", "End", "Duration", "Earnings")


def _coerce(item: EntryLike) -> Optional[WorkEntry]:
    """Return a closed, well-ordered entry or None."""
    if isinstance(item, WorkEntry):
        entry = item
    else:
        try:
            entry = WorkEntry.model_validate(item)
        except ModelValidationError:
            return None
    if entry.end is None or entry.end < entry.start:
        return None
    return entry


def aggregate(
    entries: Iterable[EntryLike],
    period: Period,
    hourly_rate: float,
) -> Report:
    """
    Reduce entries falling in period to total hours and earnings.

    Membership is decided by the entry start alone. Entries with
    unparseable, open or inverted timestamps are left out.

    Args:
        entries: Entries in store order
        period: Resolved period
        hourly_rate: Rate applied to the total hours

    Returns:
        Report for the period
    """
    period_entries = []
    skipped = 0
    for item in entries:
        entry = _coerce(item)
        if entry is None:
            skipped += 1
            continue
        if period.contains(entry.start):
            period_entries.append(entry)

    if skipped:
        logger.debug("Left %d invalid entries out of the %s report", skipped, period.kind.value)

    total_hours = sum(hours_between(entry.start, entry.end) for entry in period_entries)

    return Report(
        total_hours=total_hours,
        total_earnings=total_hours * float(hourly_rate),
        period_label=period.label,
        period_entries=period_entries,
        period=period,
    )


def build_report(
    entries: Iterable[EntryLike],
    now: datetime,
    kind: PeriodKind,
    hourly_rate: float,
) -> Report:
    """Resolve the period containing now and aggregate entries into it."""
    return aggregate(entries, resolve_period(now, kind), hourly_rate)


def summary_text(report: Report) -> str:
    """Render a short shareable summary of a report."""
    title = SUMMARY_TITLES[report.period.kind]
    return (
        f"*{title} work summary*\n"
        f"_{report.period_label}_\n"
        f"\n"
        f"*Total hours:* {report.total_hours:.2f}h\n"
        f"*Total earnings:* {format_currency(report.total_earnings)}"
    )


def render_table(report: Report, hourly_rate: float) -> str:
    """
    Render the entries of a report as a plain-text table.

    Columns are date, start time, end time, duration and earnings,
    followed by a totals footer.
    """
    rows = []
    for entry in report.period_entries:
        hours = hours_between(entry.start, entry.end)
        rows.append((
            f"{entry.start:%Y-%m-%d}",
            f"{entry.start:%H:%M}",
            f"{entry.end:%H:%M}",
            duration_label(entry.start, entry.end),
            format_currency(hours * hourly_rate),
        ))

    footer = (
        "Total",
        "",
        "",
        f"{report.total_hours:.2f}h",
        format_currency(report.total_earnings),
    )

    widths = [
        max(len(row[column]) for row in [TABLE_HEADERS, *rows, footer])
        for column in range(len(TABLE_HEADERS))
    ]

    def line(cells) -> str:
        return "  ".join(cell.ljust(width) for cell, width in zip(cells, widths)).rstrip()

    rule = "  ".join("-" * width for width in widths)
    lines = [report.period_label, line(TABLE_HEADERS), rule]
    lines.extend(line(row) for row in rows)
    if not rows:
        lines.append("(no entries)")
    lines.extend([rule, line(footer)])

    return "\n".join(lines)
