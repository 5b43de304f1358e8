"""Dependency helpers for API layer."""

from fastapi import Depends

from fitcoach.ai.coach_client import AICoachClient
from fitcoach.config import Settings, get_settings


def get_coach_client(settings: Settings = Depends(get_settings)) -> AICoachClient:
    """Build AI coach client dependency."""

    return AICoachClient(settings)
