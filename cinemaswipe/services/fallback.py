"""
Fallback Service

Applies onboarding preferences as catalog filters and relaxes them when
they leave too few movies to swipe through.
"""

from enum import Enum
from typing import List, Optional, Sequence, Tuple

from ..config import get_settings
from ..core.logging import get_logger
from ..models.movie import MovieRecord
from ..models.user import UserPreferences

logger = get_logger(__name__)


class Relaxation(str, Enum):
    """Which filters survived the relaxation steps."""
    NONE = "none"
    GENRE_ONLY = "genre_only"
    ALL_MOVIES = "all_movies"


class FallbackService:
    """
    Filters the catalog by preferences with graceful degradation.

    - Too few matches for genre + era + mood → keep only the genre filter
    - Still too few → drop every filter and use the whole catalog
    """

    def __init__(self, min_filtered: Optional[int] = None, min_genre: Optional[int] = None):
        settings = get_settings()
        self.min_filtered = settings.min_filtered_results if min_filtered is None else min_filtered
        self.min_genre = settings.min_genre_results if min_genre is None else min_genre

    @staticmethod
    def matches_genres(movie: MovieRecord, preferences: UserPreferences) -> bool:
        if not preferences.genres:
            return True
        return any(genre in preferences.genres for genre in movie.genres)

    @staticmethod
    def matches_era(movie: MovieRecord, preferences: UserPreferences) -> bool:
        if preferences.era is None:
            return True
        return preferences.era.contains(movie.year)

    @staticmethod
    def matches_mood(movie: MovieRecord, preferences: UserPreferences) -> bool:
        if not preferences.mood:
            return True
        return preferences.mood in movie.mood

    def filter_by_preferences(
        self,
        movies: Sequence[MovieRecord],
        preferences: UserPreferences
    ) -> Tuple[List[MovieRecord], Relaxation]:
        """
        Apply genre, era and mood filters, relaxing them if needed.

        Args:
            movies: Full catalog in catalog order
            preferences: Onboarding answers (empty fields mean no filter)

        Returns:
            Tuple of (filtered movies in catalog order, relaxation applied)
        """
        filtered = [
            movie for movie in movies
            if self.matches_genres(movie, preferences)
            and self.matches_era(movie, preferences)
            and self.matches_mood(movie, preferences)
        ]

        if len(filtered) >= self.min_filtered:
            return filtered, Relaxation.NONE

        genre_only = [m for m in movies if self.matches_genres(m, preferences)]
        if len(genre_only) >= self.min_genre:
            logger.info(
                "filters_relaxed",
                level=Relaxation.GENRE_ONLY.value,
                strict_matches=len(filtered),
                genre_matches=len(genre_only)
            )
            return genre_only, Relaxation.GENRE_ONLY

        logger.info(
            "filters_relaxed",
            level=Relaxation.ALL_MOVIES.value,
            strict_matches=len(filtered),
            genre_matches=len(genre_only)
        )
        return list(movies), Relaxation.ALL_MOVIES
