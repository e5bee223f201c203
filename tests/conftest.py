from __future__ import annotations

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from music_library_api.app.main import create_app
from music_library_api.app.services.catalog_service import CatalogService


@pytest.fixture
def library_path(tmp_path: Path) -> Path:
    return tmp_path / "MUSICAL_LIBRARY.txt"


@pytest.fixture
def catalog() -> CatalogService:
    return CatalogService()


@pytest.fixture
def app(library_path: Path):
    return create_app(library_path=str(library_path))


@pytest.fixture
def client(app):
    # Entering the context runs the lifespan: load on enter, save on exit.
    with TestClient(app) as test_client:
        yield test_client
