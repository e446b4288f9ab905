"""
Deduplication Service

Keeps already-swiped movies out of new recommendation batches.
"""

from typing import Iterable, List, Sequence, Set

from ..models.movie import MovieRecord


class DeduplicationService:
    """
    Excludes "seen" records from candidate lists.

    A record counts as seen when its id appears in either the liked or the
    disliked list. Matching is by id value, so equal copies of a record are
    treated the same as the original instance.
    """

    def seen_ids(
        self,
        liked_movies: Iterable[MovieRecord],
        disliked_movies: Iterable[MovieRecord]
    ) -> Set[int]:
        """Collect the ids of every swiped movie."""
        seen = {movie.id for movie in liked_movies}
        seen.update(movie.id for movie in disliked_movies)
        return seen

    def filter_seen(
        self,
        candidates: Sequence[MovieRecord],
        liked_movies: Iterable[MovieRecord],
        disliked_movies: Iterable[MovieRecord]
    ) -> List[MovieRecord]:
        """
        Filter out already-seen records.

        Args:
            candidates: Records to filter, in ranking order
            liked_movies: Movies the user liked this session
            disliked_movies: Movies the user disliked this session

        Returns:
            Unseen candidates, original order preserved
        """
        seen = self.seen_ids(liked_movies, disliked_movies)
        return [movie for movie in candidates if movie.id not in seen]
