"""Top-level API router aggregation."""

from fastapi import APIRouter

from fitcoach.api.routes.ai import router as ai_router

api_router = APIRouter()
api_router.include_router(ai_router)
