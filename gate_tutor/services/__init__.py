"""Services for persistence and external integrations."""

from gate_tutor.services.ai_relay import GeminiRelay, RelayError, UpstreamAPIError
from gate_tutor.services.record_store import StoreError, StudyPlanStore

__all__ = ["GeminiRelay", "RelayError", "UpstreamAPIError", "StudyPlanStore", "StoreError"]
