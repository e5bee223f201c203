"""
Pydantic models for song data.

``SongCreate`` is the request body accepted by the add‑song endpoint.
``Song`` is the full record held by the catalog, returned by every
song endpoint and written to the snapshot file.  ``ErrorResponse``
documents the payload FastAPI produces for ``HTTPException``.
"""

from pydantic import BaseModel, Field


class SongCreate(BaseModel):
    """Schema for submitting a new song.

    Fields are not checked for emptiness or duplication.
    """

    title: str = Field(..., examples=["Imagine"])
    artist: str = Field(..., examples=["John Lennon"])
    genre: str = Field(..., examples=["Rock"])


class Song(SongCreate):
    """A song record in the catalog."""

    id: int = Field(..., ge=1)
    play_count: int = Field(0, ge=0)


class ErrorResponse(BaseModel):
    detail: str
