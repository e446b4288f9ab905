"""
Movie Models

Catalog record schema and the fixed onboarding vocabularies
(genres, era bands, moods).
"""

from enum import Enum
from typing import Optional, Tuple
from pydantic import BaseModel, Field, ConfigDict


GENRES = [
    "Action", "Comedy", "Drama", "Horror",
    "Sci-Fi", "Romance", "Documentary", "Thriller",
    "Animation", "Fantasy",
]

MOODS = ["exciting", "thoughtful", "happy", "dark", "inspiring"]


class Era(str, Enum):
    """Coarse release-year bands used as a preference filter."""
    CLASSIC = "classic"
    MODERN = "modern"
    RECENT = "recent"

    @property
    def label(self) -> str:
        return ERA_LABELS[self]

    def contains(self, year: int) -> bool:
        """Check whether a release year falls inside this band."""
        if self is Era.CLASSIC:
            return year < 1980
        if self is Era.MODERN:
            return 1980 <= year < 2010
        return year >= 2010


ERA_LABELS = {
    Era.CLASSIC: "Classic (Pre-1980)",
    Era.MODERN: "Modern (1980-2010)",
    Era.RECENT: "Recent (2010+)",
}


class MovieRecord(BaseModel):
    """
    A single catalog entry.

    Frozen: records are loaded once and only ever referenced afterwards.
    Tag sequences are tuples so the record cannot be mutated through them.
    """
    id: int = Field(..., description="Unique catalog ID")
    title: str
    description: str = ""
    director: str = ""
    year: int = Field(..., description="Release year")
    rating: float = Field(..., ge=0, le=10, description="Average rating (0-10)")
    popularity: float = Field(..., ge=0, le=100, description="Popularity (0-100)")
    genres: Tuple[str, ...] = Field(default_factory=tuple, description="Genre tags, primary first")
    mood: Tuple[str, ...] = Field(default_factory=tuple, description="Mood tags")
    duration: int = Field(0, description="Runtime in minutes")
    image_url: Optional[str] = Field(None, alias="imageUrl")
    model_url: Optional[str] = Field(None, alias="modelUrl", description="3D model URL if available")

    model_config = ConfigDict(populate_by_name=True, frozen=True, protected_namespaces=())

    @property
    def primary_genre(self) -> str:
        return self.genres[0] if self.genres else ""
