"""Pydantic models for CinemaSwipe."""

from .movie import MovieRecord, Era, GENRES, MOODS
from .user import UserPreferences, SwipeSession
from .response import (
    OnboardingOptions,
    OnboardingRequest,
    SwipeRequest,
    SessionState,
    SwipeResponse,
    HistoryResponse,
)

__all__ = [
    "MovieRecord",
    "Era",
    "GENRES",
    "MOODS",
    "UserPreferences",
    "SwipeSession",
    "OnboardingOptions",
    "OnboardingRequest",
    "SwipeRequest",
    "SessionState",
    "SwipeResponse",
    "HistoryResponse",
]
