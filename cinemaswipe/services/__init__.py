"""Services for catalog access, ranking and swipe sessions."""

from .catalog import MovieCatalog, get_catalog
from .deduplication import DeduplicationService
from .fallback import FallbackService, Relaxation
from .scorer import RecommendationScorer, get_scorer, similarity, composite_score
from .session_service import SessionService, get_session_service

__all__ = [
    "MovieCatalog",
    "get_catalog",
    "DeduplicationService",
    "FallbackService",
    "Relaxation",
    "RecommendationScorer",
    "get_scorer",
    "similarity",
    "composite_score",
    "SessionService",
    "get_session_service",
]
