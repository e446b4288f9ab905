"""
Onboarding API Router

Serves the quiz choices (genres, eras, moods).
"""

from fastapi import APIRouter

from ..config import get_settings
from ..models.movie import ERA_LABELS, GENRES, MOODS
from ..models.response import EraOption, OnboardingOptions

router = APIRouter(prefix="/onboarding", tags=["onboarding"])


@router.get("/options", response_model=OnboardingOptions)
async def get_onboarding_options():
    """Choices shown in the three quiz steps."""
    return OnboardingOptions(
        genres=GENRES,
        eras=[EraOption(value=era, label=label) for era, label in ERA_LABELS.items()],
        moods=MOODS,
        max_genres=get_settings().max_preference_genres,
    )
