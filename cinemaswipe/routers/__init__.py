"""API Routers."""

from .onboarding import router as onboarding_router
from .movies import router as movies_router
from .sessions import router as sessions_router

__all__ = [
    "onboarding_router",
    "movies_router",
    "sessions_router",
]
