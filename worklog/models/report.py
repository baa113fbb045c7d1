"""Period and report model definitions."""
from datetime import datetime
from enum import Enum

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

from worklog.models.time_entry import WorkEntry


class PeriodKind(str, Enum):
    """Reporting period granularity."""

    DAILY = "daily"
    WEEKLY = "weekly"
    BIWEEKLY = "biweekly"
    MONTHLY = "monthly"


class Period(BaseModel):
    """Resolved calendar interval, both ends inclusive."""

    kind: PeriodKind
    start: datetime
    end: datetime
    label: str

    def contains(self, moment: datetime) -> bool:
        """Whether moment falls inside the interval."""
        return self.start <= moment <= self.end


class Report(BaseModel):
    """Aggregated hours and earnings for a period."""

    total_hours: float
    total_earnings: float
    period_label: str
    period_entries: list[WorkEntry]
    period: Period

    model_config = {"alias_generator": to_camel, "populate_by_name": True}
