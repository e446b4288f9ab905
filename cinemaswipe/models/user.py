"""
User Models

Onboarding preferences and the per-user swipe session state.
"""

from datetime import datetime, timezone
from typing import List, Optional
from pydantic import BaseModel, Field, ConfigDict, field_validator

from ..config import get_settings
from .movie import GENRES, MOODS, Era, MovieRecord


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class UserPreferences(BaseModel):
    """
    Answers from the onboarding quiz.

    Empty values mean "no filter" for that dimension. Preferences are
    replaced wholesale, never edited in place.
    """
    genres: List[str] = Field(
        default_factory=list,
        description="Up to 3 preferred genres"
    )
    era: Optional[Era] = Field(None, description="classic, modern or recent")
    mood: Optional[str] = Field(None, description="Preferred mood tag")

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("genres")
    @classmethod
    def _limit_genres(cls, value: List[str]) -> List[str]:
        max_genres = get_settings().max_preference_genres
        if len(value) > max_genres:
            raise ValueError(f"at most {max_genres} genres can be selected")
        unknown = [genre for genre in value if genre not in GENRES]
        if unknown:
            raise ValueError(f"unknown genres: {', '.join(unknown)}")
        return value

    @field_validator("mood")
    @classmethod
    def _known_mood(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and value not in MOODS:
            raise ValueError(f"unknown mood: {value}")
        return value

    @field_validator("era", "mood", mode="before")
    @classmethod
    def _blank_is_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


class SwipeSession(BaseModel):
    """
    Explicit session state owned by the session service.

    The scorer never holds any of this; it is passed into each call.
    """
    session_id: str = Field(..., alias="sessionId")
    preferences: UserPreferences
    recommendations: List[MovieRecord] = Field(default_factory=list)
    current_index: int = Field(0, alias="currentIndex")
    liked_movies: List[MovieRecord] = Field(default_factory=list, alias="likedMovies")
    disliked_movies: List[MovieRecord] = Field(default_factory=list, alias="dislikedMovies")
    created_at: datetime = Field(default_factory=_utcnow, alias="createdAt")
    updated_at: datetime = Field(default_factory=_utcnow, alias="updatedAt")

    model_config = ConfigDict(populate_by_name=True)

    @property
    def current_movie(self) -> Optional[MovieRecord]:
        """Movie on top of the card stack, None when the queue is empty."""
        if 0 <= self.current_index < len(self.recommendations):
            return self.recommendations[self.current_index]
        return None

    @property
    def is_exhausted(self) -> bool:
        return self.current_movie is None

    def touch(self):
        self.updated_at = _utcnow()
