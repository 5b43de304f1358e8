"""AI coach endpoints."""

from fastapi import APIRouter, Depends

from fitcoach.ai.coach_client import AICoachClient
from fitcoach.api.deps import get_coach_client
from fitcoach.schemas.ai import AskRequest, AskResponse

router = APIRouter(prefix="/ai", tags=["ai"])


@router.post("/ask", response_model=AskResponse)
async def ask_coach(
    payload: AskRequest,
    coach: AICoachClient = Depends(get_coach_client),
) -> AskResponse:
    """Forward the user's message to the coach and return its reply."""

    answer = await coach.ask(payload.message)
    return AskResponse(answer=answer)
