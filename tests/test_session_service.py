"""
Tests for the swipe session flow
"""

import random
from collections import Counter
from datetime import timedelta

import pytest

from cinemaswipe.core.exceptions import SessionExhaustedError, SessionNotFoundError
from cinemaswipe.models.user import UserPreferences
from cinemaswipe.services.scorer import RecommendationScorer
from cinemaswipe.services.session_service import SessionService


class TestStartSession:

    def test_first_batch_follows_preferences(self, session_service, action_preferences):
        session = session_service.start_session(action_preferences)

        assert len(session.recommendations) == 10
        assert all("Action" in m.genres for m in session.recommendations)
        assert session.current_index == 0
        assert session.current_movie is session.recommendations[0]
        assert len(session_service) == 1

    def test_each_session_gets_its_own_id(self, session_service, action_preferences):
        first = session_service.start_session(action_preferences)
        second = session_service.start_session(action_preferences)
        assert first.session_id != second.session_id

    def test_unknown_session(self, session_service):
        with pytest.raises(SessionNotFoundError):
            session_service.get_session("missing")


class TestSwipe:

    def test_like_records_movie_and_advances(self, session_service, action_preferences):
        session = session_service.start_session(action_preferences)
        top = session.current_movie

        swiped, session = session_service.swipe(session.session_id, liked=True)

        assert swiped == top
        assert session.liked_movies == [top]
        assert session.disliked_movies == []
        assert session.current_index == 1
        assert top.id not in {m.id for m in session.recommendations}

    def test_dislike_records_movie(self, session_service, action_preferences):
        session = session_service.start_session(action_preferences)
        swiped, session = session_service.swipe(session.session_id, liked=False)

        assert session.disliked_movies == [swiped]
        assert session.liked_movies == []

    def test_swiped_movies_never_come_back(self, session_service, action_preferences):
        session = session_service.start_session(action_preferences)
        for i in range(15):
            session_service.swipe(session.session_id, liked=i % 3 == 0)

        seen = {m.id for m in session.liked_movies + session.disliked_movies}
        assert len(seen) == 15
        assert seen.isdisjoint(m.id for m in session.recommendations)

    def test_refills_queue_when_position_runs_out(self, session_service, action_preferences):
        """With 40 movies the re-ranked queue runs out on the 20th swipe."""
        session = session_service.start_session(action_preferences)
        for _ in range(19):
            session_service.swipe(session.session_id, liked=False)
        assert session.current_index == 19

        session_service.swipe(session.session_id, liked=False)

        # No likes yet: most popular unseen movies, 20 of them left
        assert session.current_index == 0
        assert len(session.recommendations) == 20
        seen = {m.id for m in session.disliked_movies}
        assert seen.isdisjoint(m.id for m in session.recommendations)

    def test_exhausted_catalog(self, scenario_catalog):
        service = SessionService(RecommendationScorer(scenario_catalog, rng=random.Random(5)))
        session = service.start_session(UserPreferences(genres=["Comedy"]))

        for _ in range(len(scenario_catalog)):
            service.swipe(session.session_id, liked=True)

        assert session.is_exhausted
        assert sorted(m.id for m in session.liked_movies) == [1, 2, 3, 4, 5, 6]
        with pytest.raises(SessionExhaustedError):
            service.swipe(session.session_id, liked=True)


class TestResetAndPreferences:

    def test_reset_clears_history(self, session_service, action_preferences):
        session = session_service.start_session(action_preferences)
        session_service.swipe(session.session_id, liked=True)
        session_service.swipe(session.session_id, liked=False)

        session = session_service.reset(session.session_id)

        assert session.liked_movies == []
        assert session.disliked_movies == []
        assert session.current_index == 0
        assert len(session.recommendations) == 10

    def test_replacing_preferences_resets(self, session_service, action_preferences):
        session = session_service.start_session(action_preferences)
        session_service.swipe(session.session_id, liked=True)

        session = session_service.update_preferences(
            session.session_id, UserPreferences(genres=["Horror"])
        )

        assert session.preferences.genres == ["Horror"]
        assert session.liked_movies == []
        assert all("Horror" in m.genres for m in session.recommendations)

    def test_end_session(self, session_service, action_preferences):
        session = session_service.start_session(action_preferences)
        session_service.end_session(session.session_id)

        with pytest.raises(SessionNotFoundError):
            session_service.get_session(session.session_id)
        with pytest.raises(SessionNotFoundError):
            session_service.end_session(session.session_id)


class TestHistory:

    def test_breakdown_by_primary_genre(self, session_service):
        session = session_service.start_session(UserPreferences())
        for _ in range(8):
            session_service.swipe(session.session_id, liked=True)

        liked, breakdown = session_service.liked_history(session.session_id)

        assert len(liked) == 8
        assert breakdown == dict(Counter(m.primary_genre for m in liked))
        assert list(breakdown) == list(dict.fromkeys(m.primary_genre for m in liked))

    def test_empty_history(self, session_service, action_preferences):
        session = session_service.start_session(action_preferences)
        assert session_service.liked_history(session.session_id) == ([], {})


class TestExpiry:

    @staticmethod
    def _age(session, seconds):
        session.updated_at = session.updated_at - timedelta(seconds=seconds)

    def test_idle_session_is_gone(self, large_catalog, rng, action_preferences):
        service = SessionService(RecommendationScorer(large_catalog, rng=rng), ttl_seconds=60)
        session = service.start_session(action_preferences)

        self._age(session, 61)

        with pytest.raises(SessionNotFoundError):
            service.get_session(session.session_id)
        assert len(service) == 0

    def test_starting_a_session_evicts_idle_ones(self, large_catalog, rng, action_preferences):
        service = SessionService(RecommendationScorer(large_catalog, rng=rng), ttl_seconds=60)
        stale = [service.start_session(action_preferences) for _ in range(5)]
        for session in stale:
            self._age(session, 120)

        fresh = service.start_session(action_preferences)

        assert len(service) == 1
        assert service.get_session(fresh.session_id) is fresh

    def test_swiping_keeps_session_alive(self, large_catalog, rng, action_preferences):
        service = SessionService(RecommendationScorer(large_catalog, rng=rng), ttl_seconds=60)
        session = service.start_session(action_preferences)
        self._age(session, 50)

        service.swipe(session.session_id, liked=True)
        self._age(session, 50)

        assert service.get_session(session.session_id) is session

    def test_zero_ttl_never_expires(self, large_catalog, rng, action_preferences):
        service = SessionService(RecommendationScorer(large_catalog, rng=rng), ttl_seconds=0)
        session = service.start_session(action_preferences)
        self._age(session, 10 ** 6)

        assert service.evict_expired() == 0
        assert service.get_session(session.session_id) is session
