"""API routes package."""

from gate_tutor.api.routes import chat, health, schedule

__all__ = [
    "chat",
    "health",
    "schedule",
]
