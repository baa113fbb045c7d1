"""Entry service - business logic for the logged work entries."""
import logging
from typing import Iterable, Optional

from pydantic import ValidationError as ModelValidationError

from worklog.database import ENTRIES, RecordStore
from worklog.exceptions import ValidationError
from worklog.models.time_entry import WorkEntry


logger = logging.getLogger(__name__)


def sort_entries(entries: Iterable[WorkEntry]) -> list[WorkEntry]:
    """Order entries by start, most recent first."""
    return sorted(entries, key=lambda entry: entry.start, reverse=True)


def record_id(record) -> Optional[str]:
    """Id of a raw stored record, if it has one."""
    if isinstance(record, dict):
        return record.get("id")
    return None


def validate_closed(entry: WorkEntry) -> None:
    """
    Check that an entry may live in the entry store.

    Raises:
        ValidationError: If end is missing or before start
    """
    if entry.end is None:
        raise ValidationError("Entry has no end time")
    if entry.end < entry.start:
        raise ValidationError("Entry end time is before its start time")


class EntryService:
    """Service for the entry store."""

    def __init__(self, db: RecordStore):
        """Initialize service with the record store."""
        self.db = db

    def _split(self) -> tuple[list[WorkEntry], list]:
        """Decode stored records, keeping the ones that fail to decode as-is."""
        entries, unreadable = [], []
        for record in self.db.get(ENTRIES, []):
            try:
                entries.append(WorkEntry.model_validate(record))
            except ModelValidationError:
                logger.warning("Skipping unreadable entry record: %r", record)
                unreadable.append(record)
        return entries, unreadable

    def _load(self) -> list[WorkEntry]:
        return self._split()[0]

    def list_entries(self) -> list[WorkEntry]:
        """
        List all entries.

        Returns:
            Entries ordered by start descending
        """
        return sort_entries(self._load())

    def get_entry(self, entry_id: str) -> Optional[WorkEntry]:
        """Return the entry with the given id, or None."""
        for entry in self._load():
            if entry.id == entry_id:
                return entry
        return None

    def merged(self, entry: WorkEntry) -> list[dict]:
        """
        Return the stored records with entry saved into them, without persisting.

        An entry with a known id replaces the existing one in place; a new
        entry is inserted at the head. Decodable records are re-sorted and
        unreadable ones are carried over unchanged after them, unless they
        share the saved entry's id.
        """
        entries, unreadable = self._split()
        for index, existing in enumerate(entries):
            if existing.id == entry.id:
                entries[index] = entry
                break
        else:
            entries.insert(0, entry)
        kept = [record for record in unreadable if record_id(record) != entry.id]
        return [e.to_record() for e in sort_entries(entries)] + kept

    def save_entry(self, entry: WorkEntry) -> WorkEntry:
        """
        Create or replace an entry.

        Args:
            entry: Complete entry record

        Returns:
            Saved entry

        Raises:
            ValidationError: If end is missing or before start
            PersistFailure: If the entries record could not be written
        """
        validate_closed(entry)
        self.db.set(ENTRIES, self.merged(entry))
        logger.info("Saved entry %s", entry.id)
        return entry

    def delete_entry(self, entry_id: str) -> bool:
        """
        Delete an entry. Unknown ids are ignored.

        Returns:
            True if an entry was removed
        """
        entries, unreadable = self._split()
        remaining = [entry for entry in entries if entry.id != entry_id]
        kept = [record for record in unreadable if record_id(record) != entry_id]
        if len(remaining) == len(entries) and len(kept) == len(unreadable):
            return False

        self.db.set(ENTRIES, [e.to_record() for e in sort_entries(remaining)] + kept)
        logger.info("Deleted entry %s", entry_id)
        return True
