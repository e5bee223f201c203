"""
Song endpoints for API v1.

These routes expose the catalog: submitting a song, searching by
title, artist and genre, and recording a play.  Handlers are plain
``def`` functions so FastAPI runs them in its worker thread pool; the
catalog service does its own locking and the handlers never hold a
lock themselves.
"""

import logging
import re
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, status

from music_library_api.app.api.deps import get_catalog
from music_library_api.app.schemas.song import ErrorResponse, Song, SongCreate
from music_library_api.app.services.catalog_service import CatalogService

logger = logging.getLogger(__name__)

router = APIRouter()

_SONG_ID = re.compile(r"-?[0-9]+")


@router.post("/new", response_model=Song, status_code=status.HTTP_201_CREATED)
def add_song(
    song_in: SongCreate,
    catalog: CatalogService = Depends(get_catalog),
) -> Song:
    """Add a song to the catalog and return the created record.

    A body that is not a JSON object with string ``title``, ``artist``
    and ``genre`` fields is rejected with HTTP 422 before reaching the
    catalog.
    """
    return catalog.add_song(song_in.title, song_in.artist, song_in.genre)


@router.get("/search", response_model=List[Song])
def search_songs(
    title: str = Query("", description="Case-insensitive substring of the title"),
    artist: str = Query("", description="Case-insensitive substring of the artist"),
    genre: str = Query("", description="Case-insensitive substring of the genre"),
    catalog: CatalogService = Depends(get_catalog),
) -> List[Song]:
    """Return every song whose fields contain all given filters.

    Omitted filters match everything, so a bare ``/songs/search``
    lists the whole catalog in insertion order.
    """
    return catalog.search_songs(title=title, artist=artist, genre=genre)


@router.api_route(
    "/play/{song_id}",
    methods=["GET", "POST"],
    response_model=Song,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
    },
)
def play_song(
    song_id: str,
    catalog: CatalogService = Depends(get_catalog),
) -> Song:
    """Increment the play count of a song and return the updated record.

    Returns HTTP 400 if ``song_id`` is not a plain decimal integer and
    HTTP 404 if no song has that id.
    """
    # ASCII digits only: int() alone would also take "1_0", "+3" or "２".
    if not _SONG_ID.fullmatch(song_id):
        logger.warning("Rejected play request with invalid id %r", song_id)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Song id must be a positive integer",
        )
    song = catalog.increment_play(int(song_id))
    if song is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Song not found")
    return song


@router.api_route(
    "/play",
    methods=["GET", "POST"],
    responses={status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}},
    include_in_schema=False,
)
@router.api_route(
    "/play/",
    methods=["GET", "POST"],
    responses={status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}},
    include_in_schema=False,
)
def play_song_without_id() -> None:
    """Reject a play request that carries no song id."""
    logger.warning("Rejected play request without a song id")
    raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Song id is required")
