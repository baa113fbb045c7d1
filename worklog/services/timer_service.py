"""Timer service - the single active work session."""
import logging
from datetime import datetime
from typing import Optional

from pydantic import ValidationError as ModelValidationError

from worklog.database import ACTIVE_SESSION, ENTRIES, RecordStore
from worklog.exceptions import AlreadyActiveError, NoActiveSessionError
from worklog.models.time_entry import WorkEntry, new_entry_id
from worklog.services.entry_service import EntryService, validate_closed


logger = logging.getLogger(__name__)


class TimerService:
    """Service for starting and stopping the active session."""

    def __init__(self, db: RecordStore):
        """Initialize service with the record store."""
        self.db = db
        self.entries = EntryService(db)

    def get_current_timer(self) -> Optional[WorkEntry]:
        """
        Get the running session, if any.

        An unreadable slot counts as idle, so a new start overwrites it.

        Returns:
            Open entry, or None when idle
        """
        record = self.db.get(ACTIVE_SESSION)
        if not record:
            return None
        try:
            return WorkEntry.model_validate(record)
        except ModelValidationError:
            logger.warning("Ignoring unreadable active session record: %r", record)
            return None

    def start_timer(self, now: datetime, notes: Optional[str] = None) -> WorkEntry:
        """
        Start a new session.

        Args:
            now: Start time of the session
            notes: Optional notes

        Returns:
            Open entry

        Raises:
            AlreadyActiveError: If a session is already running
        """
        if self.get_current_timer() is not None:
            logger.warning("Start requested while a session is running")
            raise AlreadyActiveError("Timer already running")

        entry = WorkEntry(id=new_entry_id(), start=now, end=None, notes=notes or None)
        self.db.set(ACTIVE_SESSION, entry.to_record())
        logger.info("Started session %s at %s", entry.id, entry.start.isoformat())

        return entry

    def stop_timer(self, now: datetime) -> WorkEntry:
        """
        Stop the running session and move it into the entry store.

        Args:
            now: End time of the session

        Returns:
            Closed entry

        Raises:
            NoActiveSessionError: If no session is running
            ValidationError: If now is before the session start
        """
        running = self.get_current_timer()
        if running is None:
            logger.warning("Stop requested while idle")
            raise NoActiveSessionError("No timer running")

        closed = WorkEntry(id=running.id, start=running.start, end=now, notes=running.notes)
        validate_closed(closed)

        self.db.set_many({
            ENTRIES: self.entries.merged(closed),
            ACTIVE_SESSION: None,
        })
        logger.info("Stopped session %s at %s", closed.id, now.isoformat())

        return closed
