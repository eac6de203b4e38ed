"""Study plan (schedule) schemas."""

from datetime import datetime, timezone

from pydantic import Field, field_validator

from gate_tutor.db.models import DEFAULT_STUDY_PLAN_STATUS, utc_now
from gate_tutor.schemas.base import BaseSchema, IDMixin


def _as_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC and convert aware ones to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class StudyPlanCreate(BaseSchema):
    """Schema for creating a study plan.

    Only topic is required. Status is free text; scheduled_date defaults to now.
    """

    topic: str = Field(..., min_length=1, max_length=500)
    status: str = Field(default=DEFAULT_STUDY_PLAN_STATUS, min_length=1, max_length=64)
    scheduled_date: datetime = Field(default_factory=utc_now)

    @field_validator("scheduled_date")
    @classmethod
    def normalize_scheduled_date(cls, value: datetime) -> datetime:
        return _as_utc(value)


class StudyPlanRead(BaseSchema, IDMixin):
    """Schema for reading a study plan."""

    topic: str
    status: str
    scheduled_date: datetime

    @field_validator("scheduled_date")
    @classmethod
    def normalize_scheduled_date(cls, value: datetime) -> datetime:
        # SQLite hands back naive values for timezone-aware columns
        return _as_utc(value)


class ScheduleAck(BaseSchema):
    """Acknowledgement returned after a study plan is saved."""

    message: str
