"""
Recommendation Scorer

Ranks the fixed catalog for a swipe session:
- First batch: preference filters + composite rating/popularity score
- After swipes: feature-weighted similarity to liked and disliked movies
"""

import random
from typing import List, Optional, Sequence

from ..config import get_settings
from ..core.logging import get_logger
from ..models.movie import MovieRecord
from ..models.user import UserPreferences
from .catalog import MovieCatalog, get_catalog
from .deduplication import DeduplicationService
from .fallback import FallbackService

logger = get_logger(__name__)


# Similarity weights (sum to 1.0)
GENRE_WEIGHT = 0.4
ERA_WEIGHT = 0.2
MOOD_WEIGHT = 0.3
RATING_WEIGHT = 0.1

ERA_SPAN_YEARS = 50
RATING_SPAN = 10


def _tag_overlap(tags_a: Sequence[str], tags_b: Sequence[str]) -> float:
    """Share of distinct tags in common, relative to the larger tag set."""
    set_a, set_b = set(tags_a), set(tags_b)
    return len(set_a & set_b) / max(1, max(len(set_a), len(set_b)))


def similarity(movie_a: MovieRecord, movie_b: MovieRecord) -> float:
    """
    Weighted similarity between two movies, in [0, 1].

    - Genre overlap (0.4)
    - Release year closeness, zero at 50+ years apart (0.2)
    - Mood overlap (0.3)
    - Rating closeness (0.1)

    Tags are compared as sets: duplicated tags count once.
    """
    genre_score = _tag_overlap(movie_a.genres, movie_b.genres)
    era_score = 1 - min(1, abs(movie_a.year - movie_b.year) / ERA_SPAN_YEARS)
    mood_score = _tag_overlap(movie_a.mood, movie_b.mood)
    rating_score = 1 - min(1, abs(movie_a.rating - movie_b.rating) / RATING_SPAN)

    return (
        genre_score * GENRE_WEIGHT
        + era_score * ERA_WEIGHT
        + mood_score * MOOD_WEIGHT
        + rating_score * RATING_WEIGHT
    )


def composite_score(
    movie: MovieRecord,
    rating_weight: float = 0.7,
    popularity_weight: float = 0.3
) -> float:
    """Quality prior used only for the very first batch."""
    return movie.rating * rating_weight + movie.popularity * popularity_weight


class RecommendationScorer:
    """
    Stateless ranking over a fixed catalog.

    Holds only the catalog, a random generator and tuning values. Session
    data (preferences, liked/disliked lists) is passed in on every call.
    Pass a seeded `random.Random` for reproducible shuffles and jitter.
    """

    def __init__(
        self,
        catalog: MovieCatalog,
        rng: Optional[random.Random] = None,
        jitter: Optional[float] = None
    ):
        self.settings = get_settings()
        self.catalog = catalog
        self.rng = rng or random.Random()
        self.jitter = self.settings.exploration_jitter if jitter is None else jitter
        self.fallback = FallbackService()
        self.dedup = DeduplicationService()

    def _shuffle(self, movies: List[MovieRecord]) -> List[MovieRecord]:
        """Fisher-Yates shuffle into a new list."""
        shuffled = movies.copy()
        self.rng.shuffle(shuffled)
        return shuffled

    def get_initial_recommendations(self, preferences: UserPreferences) -> List[MovieRecord]:
        """
        First batch after onboarding (or after a reset).

        Filters by preferences (relaxing when too few match), ranks by the
        composite score, then shuffles the top of the list for variety.
        """
        filtered, relaxation = self.fallback.filter_by_preferences(
            self.catalog.movies,
            preferences
        )

        # sorted() is stable: ties keep catalog order
        ranked = sorted(
            filtered,
            key=lambda m: composite_score(
                m, self.settings.rating_weight, self.settings.popularity_weight
            ),
            reverse=True
        )

        top_n = self.settings.shuffle_top_n
        result = self._shuffle(ranked[:top_n]) + ranked[top_n:]

        logger.info(
            "initial_recommendations",
            genres=preferences.genres,
            era=preferences.era.value if preferences.era else None,
            mood=preferences.mood,
            relaxation=relaxation.value,
            count=len(result)
        )
        return result

    def update_recommendations(
        self,
        current_recommendations: Sequence[MovieRecord],
        swiped_movie: Optional[MovieRecord],
        liked: bool,
        liked_movies: Sequence[MovieRecord],
        disliked_movies: Sequence[MovieRecord]
    ) -> List[MovieRecord]:
        """
        Re-rank every unseen catalog movie after a swipe.

        Only `liked_movies` and `disliked_movies` influence the result.
        `current_recommendations`, `swiped_movie` and `liked` are accepted
        for the caller's convenience but never read: the ranking is rebuilt
        from scratch each time.

        Score = 1.5 * sum(similarity to liked) - sum(similarity to disliked)
                + uniform jitter in [-0.1, 0.1]
        """
        candidates = self.dedup.filter_seen(self.catalog.movies, liked_movies, disliked_movies)

        scored = []
        for movie in candidates:
            score = 0.0
            for liked_movie in liked_movies:
                score += similarity(movie, liked_movie) * self.settings.liked_weight
            for disliked_movie in disliked_movies:
                score -= similarity(movie, disliked_movie) * self.settings.disliked_weight

            # Exploration noise to avoid recommendation bubbles
            if self.jitter:
                score += self.rng.uniform(-self.jitter, self.jitter)

            scored.append((score, movie))

        scored.sort(key=lambda pair: pair[0], reverse=True)

        logger.debug(
            "recommendations_updated",
            liked=len(liked_movies),
            disliked=len(disliked_movies),
            candidates=len(scored)
        )
        return [movie for _, movie in scored]

    def get_more_recommendations(
        self,
        liked_movies: Sequence[MovieRecord],
        disliked_movies: Sequence[MovieRecord]
    ) -> List[MovieRecord]:
        """
        Refill the queue once the current one has been swiped through.

        Without any likes yet, returns (at most) the 30 most popular unseen
        movies in shuffled order. Otherwise falls back to the similarity
        re-ranking.
        """
        if not liked_movies:
            available = self.dedup.filter_seen(self.catalog.movies, liked_movies, disliked_movies)
            popular = sorted(available, key=lambda m: m.popularity, reverse=True)
            batch = self._shuffle(popular[:self.settings.popular_batch_size])

            logger.info("popular_recommendations", available=len(available), count=len(batch))
            return batch

        return self.update_recommendations([], None, True, liked_movies, disliked_movies)


# Singleton
_scorer: Optional[RecommendationScorer] = None


def get_scorer() -> RecommendationScorer:
    global _scorer
    if _scorer is None:
        seed = get_settings().random_seed
        rng = random.Random(seed) if seed is not None else None
        _scorer = RecommendationScorer(get_catalog(), rng=rng)
    return _scorer
