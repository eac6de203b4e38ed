"""Pydantic schemas for API request/response validation."""

from gate_tutor.schemas.chat import ChatReply, ChatRequest, ErrorResponse
from gate_tutor.schemas.health import HealthResponse
from gate_tutor.schemas.study_plans import ScheduleAck, StudyPlanCreate, StudyPlanRead

__all__ = [
    # Chat
    "ChatRequest",
    "ChatReply",
    "ErrorResponse",
    # Schedule
    "StudyPlanCreate",
    "StudyPlanRead",
    "ScheduleAck",
    # Health
    "HealthResponse",
]
