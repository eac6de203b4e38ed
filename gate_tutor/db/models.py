"""
SQLAlchemy 2.0 Models for GATE Tutor.

Uses modern declarative syntax with Mapped[] type annotations.
Column types are the generic ones so the same model runs on Postgres and SQLite.
"""

from datetime import datetime, timezone
from uuid import UUID, uuid4

from sqlalchemy import DateTime, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from gate_tutor.db.base import Base

DEFAULT_STUDY_PLAN_STATUS = "Pending"


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


class StudyPlan(Base):
    """
    A single study-plan record (topic + status + when it is scheduled).

    Records are inserted once and listed in bulk; nothing updates or deletes them.
    Status is free text, no enumeration is enforced.
    """

    __tablename__ = "study_plans"

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True, default=uuid4)
    topic: Mapped[str] = mapped_column(Text, nullable=False)
    status: Mapped[str] = mapped_column(
        String(64), nullable=False, default=DEFAULT_STUDY_PLAN_STATUS
    )
    scheduled_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utc_now
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utc_now
    )

    def __repr__(self) -> str:
        return f"<StudyPlan id={self.id} topic={self.topic!r} status={self.status!r}>"
