"""Core infrastructure modules."""

from .exceptions import (
    CinemaSwipeException,
    NotFoundError,
    SessionNotFoundError,
    MovieNotFoundError,
    SessionExhaustedError,
)
from .logging import setup_logging, get_logger

__all__ = [
    "CinemaSwipeException",
    "NotFoundError",
    "SessionNotFoundError",
    "MovieNotFoundError",
    "SessionExhaustedError",
    "setup_logging",
    "get_logger",
]
