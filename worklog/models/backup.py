"""Backup document model definitions."""
from pydantic import BaseModel

from worklog.models.settings import UserSettings
from worklog.models.time_entry import WorkEntry


class BackupDocument(BaseModel):
    """Portable snapshot of all entries and the settings record."""

    entries: list[WorkEntry]
    settings: UserSettings

    def to_record(self) -> dict:
        """Serialize to the exported document shape."""
        return {
            "entries": [entry.to_record() for entry in self.entries],
            "settings": self.settings.to_record(),
        }
