"""Study schedule routes (insert and list only)."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from gate_tutor.api.deps import Store
from gate_tutor.schemas.chat import ErrorResponse
from gate_tutor.schemas.study_plans import ScheduleAck, StudyPlanCreate, StudyPlanRead
from gate_tutor.services.record_store import StoreError

router = APIRouter(prefix="/api/schedule", tags=["schedule"])

_ERROR_RESPONSES = {status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse}}


def _store_failure(message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorResponse(error=message).model_dump(),
    )


@router.get("", response_model=list[StudyPlanRead], responses=_ERROR_RESPONSES)
async def list_schedule(store: Store):
    """List every study plan."""
    try:
        plans = await store.list_all()
    except StoreError:
        return _store_failure("Failed to fetch schedule")
    return [StudyPlanRead.model_validate(plan) for plan in plans]


@router.post(
    "",
    response_model=ScheduleAck,
    status_code=status.HTTP_201_CREATED,
    responses=_ERROR_RESPONSES,
)
async def create_schedule(data: StudyPlanCreate, store: Store):
    """
    Save a study plan.

    Only an acknowledgement is returned; clients list the schedule to see it.
    """
    try:
        await store.create(data)
    except StoreError:
        return _store_failure("Failed to save schedule")
    return ScheduleAck(message="Schedule saved.")
