"""Persistence for study-plan records."""

import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from gate_tutor.db.models import StudyPlan
from gate_tutor.db.session import session_scope
from gate_tutor.schemas.study_plans import StudyPlanCreate

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """Any failure of the record store (connectivity, driver, constraint)."""


class StudyPlanStore:
    """Insert and list study plans. Each call runs in its own session."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession] | None):
        self._session_factory = session_factory

    def _factory(self) -> async_sessionmaker[AsyncSession]:
        if self._session_factory is None:
            raise StoreError("Database is not configured")
        return self._session_factory

    async def list_all(self) -> list[StudyPlan]:
        """Return every stored plan, unfiltered."""
        try:
            async with session_scope(self._factory()) as db:
                result = await db.execute(select(StudyPlan).order_by(StudyPlan.created_at))
                return list(result.scalars().all())
        except (SQLAlchemyError, OSError) as e:
            logger.exception("Failed to list study plans")
            raise StoreError("Failed to list study plans") from e

    async def create(self, data: StudyPlanCreate) -> StudyPlan:
        """Persist a new plan and return it."""
        plan = StudyPlan(
            topic=data.topic,
            status=data.status,
            scheduled_date=data.scheduled_date,
        )
        try:
            async with session_scope(self._factory()) as db:
                db.add(plan)
                await db.flush()
                await db.refresh(plan)
        except (SQLAlchemyError, OSError) as e:
            logger.exception("Failed to save study plan")
            raise StoreError("Failed to save study plan") from e

        logger.info("Saved study plan %s (%s)", plan.id, plan.topic)
        return plan
