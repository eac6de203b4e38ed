"""Relay chat messages to the Gemini generateContent endpoint."""

import logging
from typing import Any

import httpx

from gate_tutor.config import Settings
from gate_tutor.services.prompts import select_system_instruction

logger = logging.getLogger(__name__)

REPHRASE_FALLBACK = "I'm processing your query... let's try rephrasing."


class RelayError(Exception):
    """The provider could not be reached or answered with something unreadable."""


class UpstreamAPIError(RelayError):
    """The provider answered, but reported an error (bad key, quota, bad request)."""


def build_payload(message: str, system_instruction: str) -> dict[str, Any]:
    """Request body for generateContent."""
    return {
        "contents": [{"parts": [{"text": message}]}],
        "systemInstruction": {"parts": [{"text": system_instruction}]},
    }


def extract_reply(data: Any) -> str | None:
    """
    Pull candidates[0].content.parts[0].text out of a response body.

    Returns None when any level of the nesting is missing or the text is empty.
    """
    try:
        text = data["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        return None
    if not isinstance(text, str) or not text:
        return None
    return text


class GeminiRelay:
    """
    Stateless pass-through to Gemini.

    There is no retry, streaming or caching: one request per chat turn.
    Outcomes are kept distinct on purpose:

    - provider-reported error: raises UpstreamAPIError
    - transport failure or non-JSON body: raises RelayError
    - well-formed response without reply text: returns REPHRASE_FALLBACK
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        *,
        api_key: str | None,
        model: str,
        api_base: str,
    ):
        self.client = client
        self.api_key = api_key
        self.model = model
        self.api_base = api_base.rstrip("/")

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "GeminiRelay":
        """Build a relay with its own HTTP client."""
        client = httpx.AsyncClient(
            timeout=settings.gemini_timeout_seconds,
            transport=transport,
        )
        return cls(
            client,
            api_key=settings.gemini_api_key,
            model=settings.gemini_model,
            api_base=settings.gemini_api_base,
        )

    @property
    def endpoint(self) -> str:
        return f"{self.api_base}/models/{self.model}:generateContent"

    async def chat(self, message: str, exam_mode: bool) -> str:
        """Send one user message with the persona picked by exam_mode and return the reply text."""
        if not self.api_key:
            logger.error("Gemini API error: GEMINI_API_KEY is not configured")
            raise UpstreamAPIError("API key not configured")

        payload = build_payload(message, select_system_instruction(exam_mode))

        try:
            response = await self.client.post(
                self.endpoint,
                params={"key": self.api_key},
                json=payload,
            )
            data = response.json()
        except httpx.HTTPError as e:
            logger.exception("Fetch error while calling Gemini")
            raise RelayError(f"Gemini request failed: {e}") from e
        except ValueError as e:
            logger.error(
                "Gemini returned a non-JSON body (HTTP %d)", response.status_code
            )
            raise RelayError("Gemini returned a non-JSON body") from e

        if isinstance(data, dict) and data.get("error"):
            error = data["error"]
            detail = error.get("message") if isinstance(error, dict) else str(error)
            logger.error("Gemini API error: %s", detail)
            raise UpstreamAPIError(detail or "Unknown provider error")

        reply = extract_reply(data)
        if reply is None:
            logger.warning("Gemini response had no reply text; returning rephrase fallback")
            return REPHRASE_FALLBACK
        return reply

    async def aclose(self) -> None:
        await self.client.aclose()
