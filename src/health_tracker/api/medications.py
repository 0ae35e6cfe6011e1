"""Medication reminder endpoints."""

from datetime import datetime
from uuid import UUID
from zoneinfo import ZoneInfo

from fastapi import APIRouter, HTTPException, Response, status

from health_tracker.api.auth import CurrentUserId
from health_tracker.api.dependencies import Container, TimezoneName
from health_tracker.api.schemas import MedicationCreateRequest, MedicationUpdateRequest
from health_tracker.domain.medications import MedicationDraft, MedicationReminder
from health_tracker.services.medications import split_active

router = APIRouter(prefix="/medications", tags=["medications"])


@router.get("")
async def list_medications(
    user_id: CurrentUserId, container: Container, timezone: TimezoneName
) -> dict[str, object]:
    """Return reminders split into active and inactive for today."""
    reminders = container.medication_service.list_reminders(user_id)
    active, inactive = split_active(
        reminders, datetime.now(tz=ZoneInfo(timezone)).date()
    )
    return {"active": active, "inactive": inactive}


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_medication(
    payload: MedicationCreateRequest, user_id: CurrentUserId, container: Container
) -> MedicationReminder:
    draft = MedicationDraft(**payload.model_dump())
    return container.medication_service.create_reminder(user_id, draft)


@router.put("/{reminder_id}")
async def update_medication(
    reminder_id: UUID,
    payload: MedicationUpdateRequest,
    user_id: CurrentUserId,
    container: Container,
) -> MedicationReminder:
    changes = payload.model_dump(exclude_unset=True)
    if not changes:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="No fields to update",
        )
    return container.medication_service.update_reminder(user_id, reminder_id, changes)


@router.delete("/{reminder_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_medication(
    reminder_id: UUID, user_id: CurrentUserId, container: Container
) -> Response:
    container.medication_service.delete_reminder(user_id, reminder_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
