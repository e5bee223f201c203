"""
Top‑level router for version 1 of the API.

This router aggregates the endpoint modules.  The routes keep the
paths of the original service (``/count``, ``/songs/...``), so the
router is mounted without a prefix; the catch‑all welcome route is
registered by ``create_app`` after it.
"""

from fastapi import APIRouter

from .endpoints import songs, visits

router = APIRouter()

router.include_router(visits.router, tags=["visits"])
router.include_router(songs.router, prefix="/songs", tags=["songs"])
