"""
Sessions API Router

Swipe session lifecycle: start after onboarding, swipe, reset,
replace preferences, liked history.
"""

from fastapi import APIRouter, Depends, Request, Response, status
from slowapi import Limiter
from slowapi.util import get_remote_address

from ..config import get_settings
from ..models.response import (
    ErrorResponse,
    HistoryResponse,
    OnboardingRequest,
    SessionState,
    SwipeRequest,
    SwipeResponse,
)
from ..models.user import UserPreferences
from ..services.session_service import SessionService, get_session_service

settings = get_settings()

limiter = Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)

router = APIRouter(
    prefix="/sessions",
    tags=["sessions"],
    responses={404: {"model": ErrorResponse}}
)


def _to_preferences(answers: OnboardingRequest) -> UserPreferences:
    return UserPreferences(genres=answers.genres, era=answers.era, mood=answers.mood)


@router.post("", response_model=SessionState, status_code=status.HTTP_201_CREATED)
@limiter.limit(f"{settings.rate_limit_per_minute}/minute")
async def start_session(
    request: Request,
    answers: OnboardingRequest,
    service: SessionService = Depends(get_session_service)
):
    """
    Complete onboarding and get the first batch of recommendations.

    The response carries the session id used by every other endpoint.
    """
    session = service.start_session(_to_preferences(answers))
    return SessionState.from_session(session)


@router.get("/{session_id}", response_model=SessionState)
async def get_session(
    session_id: str,
    service: SessionService = Depends(get_session_service)
):
    return SessionState.from_session(service.get_session(session_id))


@router.post(
    "/{session_id}/swipe",
    response_model=SwipeResponse,
    responses={409: {"model": ErrorResponse}}
)
@limiter.limit(f"{settings.rate_limit_per_minute}/minute")
async def swipe(
    request: Request,
    session_id: str,
    body: SwipeRequest,
    service: SessionService = Depends(get_session_service)
):
    """Like or dislike the current card and advance to the next one."""
    swiped, session = service.swipe(session_id, body.liked)
    return SwipeResponse(
        swiped=swiped,
        liked=body.liked,
        session=SessionState.from_session(session)
    )


@router.post("/{session_id}/reset", response_model=SessionState)
async def reset_session(
    session_id: str,
    service: SessionService = Depends(get_session_service)
):
    """Clear liked/disliked movies and rebuild the first batch."""
    return SessionState.from_session(service.reset(session_id))


@router.put("/{session_id}/preferences", response_model=SessionState)
async def replace_preferences(
    session_id: str,
    answers: OnboardingRequest,
    service: SessionService = Depends(get_session_service)
):
    """Retake the quiz: replaces preferences and resets the session."""
    session = service.update_preferences(session_id, _to_preferences(answers))
    return SessionState.from_session(session)


@router.get("/{session_id}/history", response_model=HistoryResponse)
async def get_history(
    session_id: str,
    service: SessionService = Depends(get_session_service)
):
    """Liked movies for the history carousel."""
    session = service.get_session(session_id)
    liked, breakdown = service.liked_history(session_id)
    return HistoryResponse(
        session_id=session_id,
        liked_movies=liked,
        genre_breakdown=breakdown,
        liked_count=len(liked),
        disliked_count=len(session.disliked_movies),
    )


@router.delete("/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
async def end_session(
    session_id: str,
    service: SessionService = Depends(get_session_service)
):
    service.end_session(session_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
