"""Chat relay route."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from gate_tutor.api.deps import Relay
from gate_tutor.schemas.chat import ChatReply, ChatRequest, ErrorResponse
from gate_tutor.services.ai_relay import RelayError, UpstreamAPIError

PROVIDER_ERROR_REPLY = "The AI is currently resting. Check your API key."
RELAY_ERROR_MESSAGE = "Backend AI Engine error"

router = APIRouter(prefix="/api", tags=["chat"])


@router.post(
    "/chat",
    response_model=ChatReply,
    responses={
        status.HTTP_500_INTERNAL_SERVER_ERROR: {
            "description": "Provider error (`reply` fallback) or relay failure (`error`)",
        },
    },
)
async def chat(request: ChatRequest, relay: Relay):
    """
    Relay one student message to the tutor model.

    A provider-reported error answers 500 with a fallback reply, while a
    response that simply lacks reply text answers 200 with the relay's
    rephrase fallback. Transport failures answer 500 with an error body.
    """
    try:
        reply = await relay.chat(request.message, request.is_exam_mode)
    except UpstreamAPIError:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ChatReply(reply=PROVIDER_ERROR_REPLY).model_dump(),
        )
    except RelayError:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ErrorResponse(error=RELAY_ERROR_MESSAGE).model_dump(),
        )

    return ChatReply(reply=reply)
