"""
Pytest Fixtures

Shared catalogs, seeded generators and service factories.
"""

import os

# Must be set before the app modules read settings
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")
os.environ.setdefault("ENVIRONMENT", "test")

import random
from typing import List

import pytest

from cinemaswipe.models.movie import MovieRecord
from cinemaswipe.models.user import UserPreferences
from cinemaswipe.services.catalog import MovieCatalog
from cinemaswipe.services.scorer import RecommendationScorer
from cinemaswipe.services.session_service import SessionService


def make_movie(movie_id: int, **overrides) -> MovieRecord:
    """Build a movie with neutral defaults; override only what a test cares about."""
    data = {
        "id": movie_id,
        "title": f"Movie {movie_id}",
        "description": "",
        "director": "Someone",
        "year": 2000,
        "rating": 7.0,
        "popularity": 50.0,
        "genres": ["Drama"],
        "mood": ["thoughtful"],
        "duration": 100,
    }
    data.update(overrides)
    return MovieRecord(**data)


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def scenario_catalog() -> MovieCatalog:
    """3 action movies across all eras + 3 comedies."""
    return MovieCatalog([
        make_movie(1, title="Old Action", genres=["Action"], year=1975, rating=7.5, popularity=60),
        make_movie(2, title="Mid Action", genres=["Action"], year=1995, rating=8.0, popularity=70),
        make_movie(3, title="New Action", genres=["Action"], year=2015, rating=6.5, popularity=90),
        make_movie(4, title="Comedy A", genres=["Comedy"], year=1985, mood=["happy"]),
        make_movie(5, title="Comedy B", genres=["Comedy"], year=2005, mood=["happy"]),
        make_movie(6, title="Comedy C", genres=["Comedy"], year=2018, mood=["happy"]),
    ])


@pytest.fixture
def large_catalog() -> MovieCatalog:
    """40 movies with distinct popularity, alternating genres."""
    genres = ["Action", "Comedy", "Drama", "Horror"]
    movies: List[MovieRecord] = [
        make_movie(
            i,
            genres=[genres[i % len(genres)]],
            year=1960 + i,
            rating=5.0 + (i % 5),
            popularity=float(i * 2),
        )
        for i in range(1, 41)
    ]
    return MovieCatalog(movies)


@pytest.fixture
def make_scorer(rng):
    """Factory for scorers over an arbitrary catalog."""
    def _make(catalog: MovieCatalog, jitter=None) -> RecommendationScorer:
        return RecommendationScorer(catalog, rng=rng, jitter=jitter)
    return _make


@pytest.fixture
def session_service(large_catalog, rng) -> SessionService:
    return SessionService(RecommendationScorer(large_catalog, rng=rng))


@pytest.fixture
def action_preferences() -> UserPreferences:
    return UserPreferences(genres=["Action"], era="", mood="")
