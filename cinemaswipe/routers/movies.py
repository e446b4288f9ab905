"""
Movies API Router

Read-only access to the loaded catalog.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from ..models.movie import MovieRecord
from ..models.response import ErrorResponse
from ..services.catalog import MovieCatalog, get_catalog

router = APIRouter(prefix="/movies", tags=["movies"])


@router.get("", response_model=List[MovieRecord])
async def list_movies(
    genre: Optional[str] = Query(None, description="Only movies tagged with this genre"),
    catalog: MovieCatalog = Depends(get_catalog)
):
    """List the catalog in catalog order."""
    if genre:
        return catalog.by_genre(genre)
    return list(catalog)


@router.get("/genres", response_model=List[str])
async def list_genres(catalog: MovieCatalog = Depends(get_catalog)):
    """Distinct genre tags present in the catalog."""
    return catalog.genres()


@router.get(
    "/{movie_id}",
    response_model=MovieRecord,
    responses={404: {"model": ErrorResponse}}
)
async def get_movie(movie_id: int, catalog: MovieCatalog = Depends(get_catalog)):
    return catalog.get(movie_id)
