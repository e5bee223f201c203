"""
FastAPI dependencies that hand the shared services to request handlers.

The catalog and the visit counter are created by ``create_app`` and
stored on ``app.state``.  Handlers receive them through ``Depends`` so
that no module keeps a global reference to either object.
"""

from fastapi import Request

from music_library_api.app.services.catalog_service import CatalogService
from music_library_api.app.services.visit_service import VisitCounter


def get_catalog(request: Request) -> CatalogService:
    return request.app.state.catalog


def get_visit_counter(request: Request) -> VisitCounter:
    return request.app.state.visit_counter
