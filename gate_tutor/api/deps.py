"""
FastAPI dependencies.

Handlers never touch module-level state: the AppContext built in the lifespan
is read from app.state and its parts are injected with the aliases below.
"""

from typing import Annotated

from fastapi import Depends, Request

from gate_tutor.context import AppContext
from gate_tutor.services.ai_relay import GeminiRelay
from gate_tutor.services.record_store import StudyPlanStore


def get_context(request: Request) -> AppContext:
    """Return the context attached to the running application."""
    return request.app.state.context


def get_store(context: Annotated[AppContext, Depends(get_context)]) -> StudyPlanStore:
    return context.store


def get_relay(context: Annotated[AppContext, Depends(get_context)]) -> GeminiRelay:
    return context.relay


# Type aliases for dependency injection
Store = Annotated[StudyPlanStore, Depends(get_store)]
Relay = Annotated[GeminiRelay, Depends(get_relay)]
