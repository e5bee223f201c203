"""
Visit counter endpoint for API v1.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from music_library_api.app.api.deps import get_visit_counter
from music_library_api.app.services.visit_service import VisitCounter

router = APIRouter()


@router.get("/count", response_class=PlainTextResponse)
async def count_visit(counter: VisitCounter = Depends(get_visit_counter)) -> str:
    """Record a visit and return the updated count as plain text."""
    return str(counter.increment())
