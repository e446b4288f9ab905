"""
Global Exception Handlers

Custom exceptions and FastAPI exception handlers.
"""

from fastapi import Request
from fastapi.responses import JSONResponse


class CinemaSwipeException(Exception):
    """Base exception for CinemaSwipe errors."""

    def __init__(self, message: str, status_code: int = 500):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class NotFoundError(CinemaSwipeException):
    """Resource not found."""

    def __init__(self, resource: str, resource_id):
        super().__init__(
            message=f"{resource} not found: {resource_id}",
            status_code=404
        )


class SessionNotFoundError(NotFoundError):
    """Swipe session does not exist (never started or already ended)."""

    def __init__(self, session_id: str):
        self.session_id = session_id
        super().__init__("Session", session_id)


class MovieNotFoundError(NotFoundError):
    """Movie id is not part of the catalog."""

    def __init__(self, movie_id: int):
        self.movie_id = movie_id
        super().__init__("Movie", movie_id)


class SessionExhaustedError(CinemaSwipeException):
    """No movie left to swipe in the session."""

    def __init__(self, session_id: str):
        super().__init__(
            message=f"No more movies to recommend in session {session_id}. Reset to start over.",
            status_code=409
        )


async def cinemaswipe_exception_handler(
    request: Request,
    exc: CinemaSwipeException
) -> JSONResponse:
    """Handle CinemaSwipeException and return JSON response."""
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": True,
            "message": exc.message,
            "status_code": exc.status_code,
        }
    )


def register_exception_handlers(app):
    """Register all exception handlers with the FastAPI app."""
    app.add_exception_handler(CinemaSwipeException, cinemaswipe_exception_handler)
