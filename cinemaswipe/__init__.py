"""CinemaSwipe: swipe-to-rate movie recommendations."""

__version__ = "1.0.0"
