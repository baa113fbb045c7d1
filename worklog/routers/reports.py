"""Report endpoints - period totals and shareable renderings."""
from datetime import datetime

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from worklog.database import get_database
from worklog.models.report import PeriodKind, Report
from worklog.services.entry_service import EntryService
from worklog.services.report_service import build_report, render_table, summary_text
from worklog.services.settings_service import SettingsService
from worklog.utils.clock import get_now


router = APIRouter(prefix="/reports", tags=["reports"])


def _report(db, kind: PeriodKind, now: datetime) -> tuple[Report, float]:
    rate = SettingsService(db).get_settings().hourly_rate
    entries = EntryService(db).list_entries()
    return build_report(entries, now, kind, rate), rate


@router.get("/{kind}", response_model=Report)
async def get_report(
    kind: PeriodKind,
    db=Depends(get_database),
    now: datetime = Depends(get_now),
):
    """
    Totals for the period of the given kind containing now.

    - Entries count toward the period their start falls in
    """
    report, _ = _report(db, kind, now)
    return report


@router.get("/{kind}/summary", response_class=PlainTextResponse)
async def get_report_summary(
    kind: PeriodKind,
    db=Depends(get_database),
    now: datetime = Depends(get_now),
):
    """Plain-text summary suitable for sharing."""
    report, _ = _report(db, kind, now)
    return summary_text(report)


@router.get("/{kind}/table", response_class=PlainTextResponse)
async def get_report_table(
    kind: PeriodKind,
    db=Depends(get_database),
    now: datetime = Depends(get_now),
):
    """Plain-text per-entry table with a totals footer."""
    report, rate = _report(db, kind, now)
    return render_table(report, rate)
