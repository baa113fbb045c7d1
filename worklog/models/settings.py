"""User settings model definitions."""
from pydantic import BaseModel, Field

from worklog.config import settings


class UserSettings(BaseModel):
    """Settings record. The hourly rate is stored as given, negatives included."""

    hourly_rate: float = Field(
        default_factory=lambda: settings.default_hourly_rate,
        alias="hourlyRate",
    )

    model_config = {"populate_by_name": True}

    def to_record(self) -> dict:
        """Serialize to the durable/exported record shape."""
        return self.model_dump(mode="json", by_alias=True)
