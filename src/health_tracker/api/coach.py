"""Health coach chat endpoint."""

from fastapi import APIRouter

from health_tracker.api.auth import CurrentUserId
from health_tracker.api.dependencies import Container, TimezoneName
from health_tracker.api.schemas import CoachChatRequest
from health_tracker.services.coach import CoachReply

router = APIRouter(prefix="/coach", tags=["coach"])


@router.post("/chat")
async def coach_chat(
    payload: CoachChatRequest,
    user_id: CurrentUserId,
    container: Container,
    timezone: TimezoneName,
) -> CoachReply:
    return await container.coach_service.chat(user_id, payload.message, timezone)
