"""
Session Service

Owns the per-user swipe state (preferences, card queue, position,
liked/disliked lists) and drives the scorer in response to user actions.
Sessions live in process memory only and expire after a period without
any action.
"""

import uuid
from datetime import datetime, timedelta, timezone
from typing import Dict, List, Optional, Tuple

from ..config import get_settings
from ..core.exceptions import SessionExhaustedError, SessionNotFoundError
from ..core.logging import get_logger
from ..models.movie import MovieRecord
from ..models.user import SwipeSession, UserPreferences
from .scorer import RecommendationScorer, get_scorer

logger = get_logger(__name__)


class SessionService:
    """
    In-memory store of swipe sessions.

    Every mutation happens inside one synchronous call, so requests on the
    event loop never observe a half-applied swipe.
    """

    def __init__(self, scorer: RecommendationScorer, ttl_seconds: Optional[int] = None):
        self.scorer = scorer
        self.ttl_seconds = get_settings().session_ttl_seconds if ttl_seconds is None else ttl_seconds
        self._sessions: Dict[str, SwipeSession] = {}

    def generate_session_id(self) -> str:
        return str(uuid.uuid4())

    def _is_expired(self, session: SwipeSession, now: datetime) -> bool:
        if self.ttl_seconds <= 0:
            return False
        return now - session.updated_at > timedelta(seconds=self.ttl_seconds)

    def evict_expired(self) -> int:
        """Drop sessions idle for longer than the TTL. Returns how many were dropped."""
        now = datetime.now(timezone.utc)
        expired = [sid for sid, session in self._sessions.items() if self._is_expired(session, now)]
        for session_id in expired:
            del self._sessions[session_id]

        if expired:
            logger.info("sessions_expired", count=len(expired), remaining=len(self._sessions))
        return len(expired)

    def start_session(self, preferences: UserPreferences) -> SwipeSession:
        """Create a session right after onboarding completes."""
        self.evict_expired()
        session = SwipeSession(
            session_id=self.generate_session_id(),
            preferences=preferences,
            recommendations=self.scorer.get_initial_recommendations(preferences),
        )
        self._sessions[session.session_id] = session

        logger.info(
            "session_started",
            session_id=session.session_id,
            queue=len(session.recommendations)
        )
        return session

    def get_session(self, session_id: str) -> SwipeSession:
        session = self._sessions.get(session_id)
        if session is not None and self._is_expired(session, datetime.now(timezone.utc)):
            del self._sessions[session_id]
            logger.info("session_expired", session_id=session_id)
            session = None
        if session is None:
            raise SessionNotFoundError(session_id)
        return session

    def swipe(self, session_id: str, liked: bool) -> Tuple[MovieRecord, SwipeSession]:
        """
        Record a like/dislike on the current card and move to the next one.

        The queue is re-ranked after every swipe. When the position runs
        past the end of the re-ranked queue, a fresh batch is fetched and
        the position restarts at 0.

        Returns:
            Tuple of (swiped movie, updated session)
        """
        session = self.get_session(session_id)
        current = session.current_movie
        if current is None:
            raise SessionExhaustedError(session_id)

        if liked:
            session.liked_movies.append(current)
        else:
            session.disliked_movies.append(current)

        updated = self.scorer.update_recommendations(
            session.recommendations,
            current,
            liked,
            session.liked_movies,
            session.disliked_movies
        )
        session.recommendations = updated

        next_index = session.current_index + 1
        if next_index < len(updated):
            session.current_index = next_index
        else:
            session.recommendations = self.scorer.get_more_recommendations(
                session.liked_movies,
                session.disliked_movies
            )
            session.current_index = 0
            logger.info(
                "recommendations_refilled",
                session_id=session_id,
                queue=len(session.recommendations)
            )
            if not session.recommendations:
                logger.info("recommendations_exhausted", session_id=session_id)

        session.touch()

        logger.info(
            "movie_swiped",
            session_id=session_id,
            movie_id=current.id,
            liked=liked,
            liked_total=len(session.liked_movies),
            disliked_total=len(session.disliked_movies)
        )
        return current, session

    def reset(self, session_id: str) -> SwipeSession:
        """Start over with the same preferences: new first batch, empty history."""
        session = self.get_session(session_id)
        session.recommendations = self.scorer.get_initial_recommendations(session.preferences)
        session.current_index = 0
        session.liked_movies = []
        session.disliked_movies = []
        session.touch()

        logger.info("session_reset", session_id=session_id, queue=len(session.recommendations))
        return session

    def update_preferences(self, session_id: str, preferences: UserPreferences) -> SwipeSession:
        """Replace the preferences wholesale, then reset the session."""
        session = self.get_session(session_id)
        session.preferences = preferences
        logger.info("preferences_replaced", session_id=session_id, genres=preferences.genres)
        return self.reset(session_id)

    def liked_history(self, session_id: str) -> Tuple[List[MovieRecord], Dict[str, int]]:
        """
        Liked movies with a count per primary genre.

        Genres appear in the order they were first liked; movies without
        any genre are left out of the breakdown.
        """
        session = self.get_session(session_id)
        breakdown: Dict[str, int] = {}
        for movie in session.liked_movies:
            if movie.primary_genre:
                breakdown[movie.primary_genre] = breakdown.get(movie.primary_genre, 0) + 1
        return list(session.liked_movies), breakdown

    def end_session(self, session_id: str):
        if self._sessions.pop(session_id, None) is None:
            raise SessionNotFoundError(session_id)
        logger.info("session_ended", session_id=session_id)

    def __len__(self) -> int:
        return len(self._sessions)


# Singleton
_session_service: Optional[SessionService] = None


def get_session_service() -> SessionService:
    global _session_service
    if _session_service is None:
        _session_service = SessionService(get_scorer())
    return _session_service
