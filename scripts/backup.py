"""Export or import a ledger backup directly on a data directory.

Usage:
    python scripts/backup.py export --data-dir ./data --output-dir ./backups
    python scripts/backup.py import --data-dir ./data worklog-backup-2024-03-20.json
"""
import argparse
import sys
from datetime import date
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from worklog.config import settings
from worklog.database import JsonFileRecordStore
from worklog.exceptions import LedgerError
from worklog.services.backup_service import BackupService, backup_filename, dumps, loads


def export_backup(data_dir: Path, output_dir: Path) -> Path:
    """Write the current state to a dated backup file."""
    service = BackupService(JsonFileRecordStore(data_dir))
    document = service.export_state()

    output_dir.mkdir(parents=True, exist_ok=True)
    path = output_dir / backup_filename(date.today())
    path.write_text(dumps(document), encoding="utf-8")

    print(f"Exported {len(document.entries)} entries to {path}")
    return path


def import_backup(data_dir: Path, source: Path) -> None:
    """Replace the state in data_dir with a backup file."""
    document = loads(source.read_text(encoding="utf-8"))
    service = BackupService(JsonFileRecordStore(data_dir))
    service.import_state(document)

    print(f"Imported {len(document.entries)} entries from {source}")


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Export or import a work ledger backup")
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=settings.data_dir,
        help="Directory holding the ledger records",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    export_parser = subparsers.add_parser("export", help="Write a backup file")
    export_parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path("."),
        help="Directory for the backup file",
    )

    import_parser = subparsers.add_parser("import", help="Restore from a backup file")
    import_parser.add_argument("source", type=Path, help="Backup file to import")

    args = parser.parse_args()

    try:
        if args.command == "export":
            export_backup(args.data_dir, args.output_dir)
        else:
            import_backup(args.data_dir, args.source)
    except (LedgerError, OSError) as e:
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
