"""Print the report for the current period.

Usage:
    python scripts/report.py weekly --data-dir ./data
    python scripts/report.py biweekly --now 2024-03-20T12:00
"""
import argparse
import sys
from datetime import datetime
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from worklog.config import settings
from worklog.database import JsonFileRecordStore
from worklog.exceptions import LedgerError
from worklog.models.report import PeriodKind
from worklog.services.entry_service import EntryService
from worklog.services.report_service import build_report, render_table, summary_text
from worklog.services.settings_service import SettingsService


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Print a work ledger report")
    parser.add_argument(
        "kind",
        choices=[kind.value for kind in PeriodKind],
        help="Period granularity",
    )
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=settings.data_dir,
        help="Directory holding the ledger records",
    )
    parser.add_argument(
        "--now",
        type=datetime.fromisoformat,
        default=None,
        help="Reference time (ISO format, defaults to the current time)",
    )

    args = parser.parse_args()
    now = args.now or datetime.now()

    try:
        db = JsonFileRecordStore(args.data_dir)
    except LedgerError as e:
        print(f"Error: {e}")
        sys.exit(1)

    rate = SettingsService(db).get_settings().hourly_rate
    report = build_report(EntryService(db).list_entries(), now, PeriodKind(args.kind), rate)

    print(summary_text(report))
    print()
    print(render_table(report, rate))


if __name__ == "__main__":
    main()
