"""Settings service - the single hourly rate record."""
import logging

from pydantic import ValidationError as ModelValidationError

from worklog.database import SETTINGS, RecordStore
from worklog.models.settings import UserSettings


logger = logging.getLogger(__name__)


class SettingsService:
    """Service for reading and replacing the settings record."""

    def __init__(self, db: RecordStore):
        """Initialize service with the record store."""
        self.db = db

    def get_settings(self) -> UserSettings:
        """Return stored settings, or defaults when none are stored."""
        record = self.db.get(SETTINGS)
        if record is None:
            return UserSettings()
        try:
            return UserSettings.model_validate(record)
        except ModelValidationError:
            logger.warning("Settings record unreadable, using defaults: %r", record)
            return UserSettings()

    def update_settings(self, new_settings: UserSettings) -> UserSettings:
        """
        Replace the settings record. Last write wins.

        Raises:
            PersistFailure: If the settings record could not be written
        """
        self.db.set(SETTINGS, new_settings.to_record())
        logger.info("Hourly rate set to %s", new_settings.hourly_rate)
        return new_settings
