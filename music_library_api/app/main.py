"""
Main entrypoint for the Music Library API.

This module assembles the FastAPI application, sets up logging and
includes the versioned router.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time
as ``app``, e.g.::

    uvicorn music_library_api.app.main:app

The catalog and the visit counter are created in the lifespan startup
phase, before the server accepts requests, and stored on
``app.state``.  On shutdown the catalog is written back to the
snapshot file.  The save happens after uvicorn has stopped accepting
connections and finished the requests in flight; it captures whatever
the catalog holds at that moment.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .services.catalog_service import CatalogService
from .services.snapshot_service import SnapshotError, load_snapshot, save_snapshot
from .services.visit_service import VisitCounter

logger = logging.getLogger(__name__)

WELCOME_MESSAGE = "Welcome to the music library server!"


def create_app(settings: Optional[Settings] = None, library_path: Optional[str] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Settings to use instead of the environment‑derived defaults.
    library_path : Optional[str]
        Snapshot file to load and save.  Overrides
        ``settings.library_path``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    snapshot_path = library_path or settings.library_path

    setup_logging(settings.log_level, settings.log_file or None)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup
        app.state.visit_counter = VisitCounter()
        app.state.catalog = CatalogService(load_snapshot(snapshot_path))
        logger.info("Catalog ready with %d songs", len(app.state.catalog))
        yield
        # Shutdown
        try:
            save_snapshot(app.state.catalog.snapshot(), snapshot_path)
        except SnapshotError:
            logger.exception("Failed to persist the catalog on shutdown")
            raise

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.library_path = snapshot_path

    @app.exception_handler(RequestValidationError)
    async def log_validation_error(request: Request, exc: RequestValidationError):
        logger.warning("Rejected malformed request to %s: %s", request.url.path, exc.errors())
        return await request_validation_exception_handler(request, exc)

    app.include_router(v1_router)

    # Registered last so that it only catches paths no other route
    # matched.
    @app.api_route(
        "/{path:path}",
        methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        include_in_schema=False,
    )
    async def welcome(path: str) -> dict:
        return {"message": WELCOME_MESSAGE}

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
