"""
Tests for preference filtering and relaxation
"""

import pytest

from cinemaswipe.models.user import UserPreferences
from cinemaswipe.services.fallback import FallbackService, Relaxation

from conftest import make_movie


@pytest.fixture
def fallback():
    return FallbackService(min_filtered=3, min_genre=2)


@pytest.fixture
def movies():
    return [
        make_movie(1, genres=["Action"], year=1975, mood=["exciting"]),
        make_movie(2, genres=["Action"], year=1995, mood=["dark"]),
        make_movie(3, genres=["Action", "Comedy"], year=2015, mood=["exciting"]),
        make_movie(4, genres=["Comedy"], year=2012, mood=["happy"]),
        make_movie(5, genres=["Drama"], year=1960, mood=["thoughtful"]),
    ]


class TestFilters:

    def test_no_preferences_keeps_everything(self, fallback, movies):
        result, relaxation = fallback.filter_by_preferences(movies, UserPreferences())
        assert result == movies
        assert relaxation is Relaxation.NONE

    def test_genre_filter_matches_any_genre(self, fallback, movies):
        result, relaxation = fallback.filter_by_preferences(
            movies, UserPreferences(genres=["Comedy", "Drama"])
        )
        assert [m.id for m in result] == [3, 4, 5]
        assert relaxation is Relaxation.NONE

    def test_era_bands(self, movies):
        fallback = FallbackService(min_filtered=0, min_genre=0)
        expected = {"classic": [1, 5], "modern": [2], "recent": [3, 4]}
        for era, ids in expected.items():
            result, _ = fallback.filter_by_preferences(movies, UserPreferences(era=era))
            assert [m.id for m in result] == ids

    def test_era_band_edges(self):
        fallback = FallbackService(min_filtered=0, min_genre=0)
        edges = [make_movie(1, year=1979), make_movie(2, year=1980), make_movie(3, year=2009), make_movie(4, year=2010)]

        modern, _ = fallback.filter_by_preferences(edges, UserPreferences(era="modern"))
        assert [m.id for m in modern] == [2, 3]

    def test_mood_filter(self, movies):
        fallback = FallbackService(min_filtered=0, min_genre=0)
        result, _ = fallback.filter_by_preferences(movies, UserPreferences(mood="exciting"))
        assert [m.id for m in result] == [1, 3]


class TestRelaxation:

    def test_drops_era_and_mood_first(self, fallback, movies):
        prefs = UserPreferences(genres=["Action"], era="recent", mood="dark")
        result, relaxation = fallback.filter_by_preferences(movies, prefs)

        assert [m.id for m in result] == [1, 2, 3]
        assert relaxation is Relaxation.GENRE_ONLY

    def test_drops_everything_when_genre_too_narrow(self, fallback, movies):
        prefs = UserPreferences(genres=["Drama"], era="classic")
        result, relaxation = fallback.filter_by_preferences(movies, prefs)

        assert result == movies
        assert relaxation is Relaxation.ALL_MOVIES

    def test_empty_input(self, fallback):
        result, relaxation = fallback.filter_by_preferences([], UserPreferences(genres=["Action"]))
        assert result == []
        assert relaxation is Relaxation.ALL_MOVIES

    def test_thresholds_come_from_settings(self):
        fallback = FallbackService()
        assert fallback.min_filtered == 10
        assert fallback.min_genre == 5
