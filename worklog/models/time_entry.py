"""Work entry model definitions."""
import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_serializer, field_validator

from worklog.utils.time import to_local


def new_entry_id() -> str:
    """Generate an opaque unique entry identifier."""
    return str(uuid.uuid4())


class WorkEntryBase(BaseModel):
    """Base work entry fields."""

    start: datetime
    end: Optional[datetime] = None
    notes: Optional[str] = None

    @field_validator("end", mode="before")
    @classmethod
    def empty_end_is_open(cls, value):
        # Stored records mark open entries with an empty string
        if value == "":
            return None
        return value

    @field_validator("start", "end")
    @classmethod
    def normalize_local(cls, value: Optional[datetime]) -> Optional[datetime]:
        if value is None:
            return None
        return to_local(value)

    @field_serializer("start")
    def serialize_start(self, value: datetime) -> str:
        return value.isoformat()

    @field_serializer("end")
    def serialize_end(self, value: Optional[datetime]) -> str:
        return value.isoformat() if value is not None else ""

    @property
    def is_open(self) -> bool:
        """Whether the entry has not been closed yet."""
        return self.end is None


class WorkEntryCreate(WorkEntryBase):
    """Manual entry creation model. An id is assigned when omitted."""

    id: Optional[str] = None


class WorkEntry(WorkEntryBase):
    """Full work entry model with its identifier."""

    id: str = Field(default_factory=new_entry_id)

    def to_record(self) -> dict:
        """Serialize to the durable/exported record shape."""
        record = self.model_dump(mode="json", exclude_none=True)
        record.setdefault("end", "")
        return record
