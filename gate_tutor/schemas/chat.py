"""Pydantic schemas for chat operations."""

from pydantic import BaseModel, Field

from gate_tutor.schemas.base import BaseSchema


class ChatRequest(BaseSchema):
    """Request to send a chat message to the tutor."""

    message: str = Field(..., min_length=1, max_length=10000)
    is_exam_mode: bool = False


class ChatReply(BaseModel):
    """Tutor reply. Also used for the provider-error fallback (with a 500 status)."""

    reply: str


class ErrorResponse(BaseModel):
    """Generic error body."""

    error: str
