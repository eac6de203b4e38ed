"""
Explicit application context.

Everything with process lifetime (settings, database engine, HTTP client) lives
here. It is built once in the FastAPI lifespan and reaches request handlers
through dependencies in gate_tutor.api.deps, never through module globals.
"""

import logging
from dataclasses import dataclass

import httpx
from sqlalchemy.ext.asyncio import AsyncEngine

from gate_tutor.config import Settings
from gate_tutor.db.session import (
    create_engine_from_settings,
    create_session_factory,
    probe_connection,
)
from gate_tutor.services.ai_relay import GeminiRelay
from gate_tutor.services.record_store import StudyPlanStore

logger = logging.getLogger(__name__)


@dataclass
class AppContext:
    """Process-wide handles passed to request handlers."""

    settings: Settings
    engine: AsyncEngine | None
    store: StudyPlanStore
    relay: GeminiRelay

    async def close(self) -> None:
        await self.relay.aclose()
        if self.engine is not None:
            await self.engine.dispose()


async def build_context(
    settings: Settings,
    *,
    http_transport: httpx.AsyncBaseTransport | None = None,
) -> AppContext:
    """
    Create the context for one application instance.

    Missing configuration is logged, not fatal: the health endpoint keeps
    working and the affected endpoints fail per request.
    """
    engine = create_engine_from_settings(settings)
    session_factory = None
    if engine is not None:
        session_factory = create_session_factory(engine)
        await probe_connection(engine)

    if not settings.gemini_api_key:
        logger.warning("GEMINI_API_KEY is not set; chat requests will return the fallback reply")

    return AppContext(
        settings=settings,
        engine=engine,
        store=StudyPlanStore(session_factory),
        relay=GeminiRelay.from_settings(settings, transport=http_transport),
    )
