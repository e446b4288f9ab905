"""
API Request/Response Models

Standardized structures for onboarding, session and catalog endpoints.
"""

from datetime import datetime
from typing import Dict, List, Optional
from pydantic import BaseModel, Field, ConfigDict

from .movie import Era, MovieRecord
from .user import SwipeSession, UserPreferences


class EraOption(BaseModel):
    value: Era
    label: str


class OnboardingOptions(BaseModel):
    """Choices offered by the onboarding quiz."""
    genres: List[str]
    eras: List[EraOption]
    moods: List[str]
    max_genres: int = Field(alias="maxGenres")

    model_config = ConfigDict(populate_by_name=True)


class OnboardingRequest(UserPreferences):
    """
    Completed quiz answers.

    The quiz cannot be finished without picking a genre, so unlike the
    scorer's preferences this requires at least one.
    """
    genres: List[str] = Field(..., min_length=1)


class SwipeRequest(BaseModel):
    liked: bool


class SessionState(BaseModel):
    """Snapshot of a swipe session returned to the client."""
    session_id: str = Field(alias="sessionId")
    preferences: UserPreferences
    current_movie: Optional[MovieRecord] = Field(None, alias="currentMovie")
    current_index: int = Field(alias="currentIndex")
    queue_length: int = Field(alias="queueLength")
    liked_count: int = Field(alias="likedCount")
    disliked_count: int = Field(alias="dislikedCount")
    exhausted: bool = False
    updated_at: datetime = Field(alias="updatedAt")

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_session(cls, session: SwipeSession) -> "SessionState":
        return cls(
            session_id=session.session_id,
            preferences=session.preferences,
            current_movie=session.current_movie,
            current_index=session.current_index,
            queue_length=len(session.recommendations),
            liked_count=len(session.liked_movies),
            disliked_count=len(session.disliked_movies),
            exhausted=session.is_exhausted,
            updated_at=session.updated_at,
        )


class SwipeResponse(BaseModel):
    swiped: MovieRecord
    liked: bool
    session: SessionState

    model_config = ConfigDict(populate_by_name=True)


class HistoryResponse(BaseModel):
    """Liked movies plus a primary-genre breakdown for the history view."""
    session_id: str = Field(alias="sessionId")
    liked_movies: List[MovieRecord] = Field(default_factory=list, alias="likedMovies")
    genre_breakdown: Dict[str, int] = Field(default_factory=dict, alias="genreBreakdown")
    liked_count: int = Field(alias="likedCount")
    disliked_count: int = Field(alias="dislikedCount")

    model_config = ConfigDict(populate_by_name=True)


class ErrorResponse(BaseModel):
    """Standard error response."""
    error: bool = True
    message: str
    status_code: int = Field(alias="statusCode")

    model_config = ConfigDict(populate_by_name=True)
