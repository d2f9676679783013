"""Profile routes."""

from uuid import uuid4

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel, Field

from ...db.repositories import UserProfileRepository
from ...models.exercises import EquipmentType
from ...models.user_profile import FitnessGoal, FitnessLevel, UserProfile
from .deps import get_profile_repo, load_profile

router = APIRouter(prefix="/profiles", tags=["profiles"])


class ProfileIn(BaseModel):
    """Request body for creating a profile."""

    name: str = ""
    email: str | None = None
    fitness_level: FitnessLevel
    goals: list[FitnessGoal] = Field(default_factory=list)
    equipment: list[EquipmentType] = Field(default_factory=list)


@router.post("", status_code=201)
async def create_profile(
    body: ProfileIn,
    repo: UserProfileRepository = Depends(get_profile_repo),
):
    """Create a user profile."""
    profile = UserProfile(
        id=uuid4().hex,
        name=body.name,
        email=body.email,
        fitness_level=body.fitness_level,
        goals=body.goals,
        equipment=body.equipment,
    )
    await repo.create(profile)
    return profile.to_dict()


@router.get("/{user_id}")
async def get_profile(request: Request, user_id: str):
    """Get a user profile."""
    profile = await load_profile(request, user_id)
    return profile.to_dict()
