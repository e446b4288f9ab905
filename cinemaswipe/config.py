"""
Application Configuration

Load settings from environment variables with validation.
"""

from functools import lru_cache
from pathlib import Path
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_CATALOG_PATH = Path(__file__).resolve().parent / "data" / "movies.json"


class Settings(BaseSettings):
    """Application settings from environment variables."""

    # Environment
    environment: str = "development"
    debug: bool = True

    # Catalog
    catalog_path: str = str(DEFAULT_CATALOG_PATH)

    # Rate Limiting
    rate_limit_enabled: bool = True
    rate_limit_per_minute: int = 60

    # Initial batch filtering
    min_filtered_results: int = 10   # Below this, drop era/mood filters
    min_genre_results: int = 5       # Below this, drop genre filter too
    shuffle_top_n: int = 20
    rating_weight: float = 0.7
    popularity_weight: float = 0.3

    # Re-ranking
    liked_weight: float = 1.5
    disliked_weight: float = 1.0
    exploration_jitter: float = 0.1
    popular_batch_size: int = 30

    # Onboarding
    max_preference_genres: int = 3

    # Sessions
    session_ttl_seconds: int = 1800  # Idle time before eviction, 0 keeps sessions forever

    # Seed for the process-wide scorer (unseeded when None)
    random_seed: Optional[int] = None

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )


@lru_cache()
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()
