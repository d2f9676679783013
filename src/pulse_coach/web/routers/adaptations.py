"""Adaptation routes."""

from fastapi import APIRouter, Depends, Request

from ...config import get_settings
from ...services.adaptation import AdaptationService
from .deps import get_adaptation_service, load_profile

router = APIRouter(prefix="/adaptations", tags=["adaptations"])


@router.get("/{user_id}/insights")
async def insights(
    request: Request,
    user_id: str,
    days: int | None = None,
    service: AdaptationService = Depends(get_adaptation_service),
):
    """Performance metrics, suggested adaptations and tips."""
    user = await load_profile(request, user_id)
    result = await service.suggest(user, days or get_settings().history_days)
    return result.to_dict()


@router.post("/{user_id}/apply")
async def apply(
    request: Request,
    user_id: str,
    service: AdaptationService = Depends(get_adaptation_service),
):
    """Apply every suggested adaptation to today's workout."""
    user = await load_profile(request, user_id)
    workout, records = await service.adapt_todays_workout(user, get_settings().history_days)
    return {
        "workout": workout.to_dict(),
        "applied": [r.to_dict() for r in records],
    }


@router.get("/{user_id}/history")
async def history(
    request: Request,
    user_id: str,
    limit: int | None = None,
    service: AdaptationService = Depends(get_adaptation_service),
):
    """Applied adaptations, newest first."""
    await load_profile(request, user_id)
    records = await service.history(user_id, limit or get_settings().history_limit)
    return [r.to_dict() for r in records]
