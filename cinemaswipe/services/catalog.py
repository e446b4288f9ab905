"""
Catalog Service

Loads the fixed movie catalog from a local JSON file once and keeps it
in memory for the lifetime of the process.
"""

import json
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Sequence, Tuple, Union

from pydantic import ValidationError

from ..config import get_settings
from ..core.exceptions import MovieNotFoundError
from ..core.logging import get_logger
from ..models.movie import MovieRecord

logger = get_logger(__name__)


class MovieCatalog:
    """
    Immutable, ordered collection of movie records.

    Catalog order is significant: it breaks ties in every ranking.
    """

    def __init__(self, movies: Sequence[MovieRecord] = ()):
        unique: List[MovieRecord] = []
        by_id: Dict[int, MovieRecord] = {}

        for movie in movies:
            if movie.id in by_id:
                logger.warning("catalog_duplicate_id", movie_id=movie.id, title=movie.title)
                continue
            by_id[movie.id] = movie
            unique.append(movie)

        self._movies: Tuple[MovieRecord, ...] = tuple(unique)
        self._by_id = by_id

    @classmethod
    def from_json(cls, path: Union[str, Path]) -> "MovieCatalog":
        """
        Build a catalog from a JSON array of movie objects.

        Entries that fail validation are skipped. A missing or unreadable
        file yields an empty catalog.
        """
        path = Path(path)
        if not path.exists():
            logger.warning("catalog_not_found", path=str(path))
            return cls()

        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.error("catalog_load_failed", path=str(path), error=str(e))
            return cls()

        if isinstance(data, dict):
            items = list(data.values())
        elif isinstance(data, list):
            items = data
        else:
            logger.error("catalog_load_failed", path=str(path), error=f"unexpected top-level {type(data).__name__}")
            return cls()

        movies = []
        for item in items:
            try:
                movies.append(MovieRecord.model_validate(item))
            except ValidationError as e:
                logger.warning("catalog_item_parse_error", item=item, error=str(e))

        catalog = cls(movies)
        logger.info("catalog_loaded", path=str(path), count=len(catalog))
        return catalog

    @property
    def movies(self) -> Tuple[MovieRecord, ...]:
        return self._movies

    def __len__(self) -> int:
        return len(self._movies)

    def __iter__(self) -> Iterator[MovieRecord]:
        return iter(self._movies)

    def get(self, movie_id: int) -> MovieRecord:
        """Look up a record by id."""
        try:
            return self._by_id[movie_id]
        except KeyError:
            raise MovieNotFoundError(movie_id) from None

    def genres(self) -> List[str]:
        """Distinct genre tags in first-seen catalog order."""
        seen: Dict[str, None] = {}
        for movie in self._movies:
            for genre in movie.genres:
                seen.setdefault(genre, None)
        return list(seen)

    def by_genre(self, genre: str) -> List[MovieRecord]:
        """Records tagged with a genre (case-insensitive)."""
        wanted = genre.lower()
        return [m for m in self._movies if any(g.lower() == wanted for g in m.genres)]


# Singleton
_catalog: Optional[MovieCatalog] = None


def get_catalog() -> MovieCatalog:
    global _catalog
    if _catalog is None:
        _catalog = MovieCatalog.from_json(get_settings().catalog_path)
    return _catalog
