"""Backup service - export and import of the full ledger state."""
import json
import logging
from datetime import date
from typing import Any

from pydantic import ValidationError as ModelValidationError

from worklog.config import settings
from worklog.database import ENTRIES, SETTINGS, RecordStore
from worklog.exceptions import InvalidBackupError, ValidationError
from worklog.models.backup import BackupDocument
from worklog.models.settings import UserSettings
from worklog.models.time_entry import WorkEntry
from worklog.services.entry_service import EntryService, sort_entries, validate_closed
from worklog.services.settings_service import SettingsService


logger = logging.getLogger(__name__)


def backup_filename(day: date) -> str:
    """
    Build the export filename for a given day.

    Examples:
        >>> backup_filename(date(2024, 3, 20))
        'worklog-backup-2024-03-20.json'
    """
    return f"{settings.backup_prefix}-{day:%Y-%m-%d}.json"


def export_document(entries: list[WorkEntry], user_settings: UserSettings) -> BackupDocument:
    """Bundle entries and settings into a backup document."""
    return BackupDocument(entries=list(entries), settings=user_settings)


def parse_document(raw: Any) -> BackupDocument:
    """
    Decode a backup document.

    Args:
        raw: Parsed JSON value

    Returns:
        Decoded document

    Raises:
        InvalidBackupError: If entries or settings are missing or malformed
    """
    if not isinstance(raw, dict) or "entries" not in raw or "settings" not in raw:
        raise InvalidBackupError("Backup must contain 'entries' and 'settings'")
    if not isinstance(raw["entries"], list) or not isinstance(raw["settings"], dict):
        raise InvalidBackupError("Backup 'entries' must be a list and 'settings' an object")

    try:
        document = BackupDocument.model_validate(raw)
    except ModelValidationError as e:
        raise InvalidBackupError(f"Backup contains malformed records: {e.error_count()} errors") from e

    for entry in document.entries:
        try:
            validate_closed(entry)
        except ValidationError as e:
            raise InvalidBackupError(f"Backup entry {entry.id}: {e}") from e

    return document


def dumps(document: BackupDocument) -> str:
    """Serialize a backup document to JSON text."""
    return json.dumps(document.to_record(), indent=2)


def loads(text: str) -> BackupDocument:
    """
    Parse JSON text into a backup document.

    Raises:
        InvalidBackupError: If the text is not JSON or has the wrong shape
    """
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as e:
        raise InvalidBackupError(f"Backup is not valid JSON: {e.msg}") from e
    return parse_document(raw)


class BackupService:
    """Service for exporting and importing the ledger state."""

    def __init__(self, db: RecordStore):
        """Initialize service with the record store."""
        self.db = db
        self.entries = EntryService(db)
        self.settings = SettingsService(db)

    def export_state(self) -> BackupDocument:
        """Snapshot the current entries and settings."""
        return export_document(self.entries.list_entries(), self.settings.get_settings())

    def import_state(self, raw: Any) -> BackupDocument:
        """
        Replace entries and settings with the content of a backup.

        The active session is left alone. Nothing is written unless the
        whole document decodes.

        Raises:
            InvalidBackupError: If the document is malformed
            PersistFailure: If the records could not be written
        """
        try:
            document = raw if isinstance(raw, BackupDocument) else parse_document(raw)
        except InvalidBackupError as e:
            logger.warning("Rejected backup import: %s", e)
            raise

        entries = sort_entries(document.entries)
        self.db.set_many({
            ENTRIES: [entry.to_record() for entry in entries],
            SETTINGS: document.settings.to_record(),
        })
        logger.info("Imported %d entries from backup", len(entries))

        return BackupDocument(entries=entries, settings=document.settings)
