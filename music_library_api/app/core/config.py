"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts without any configuration at all, listening on
``127.0.0.1:8080`` and keeping its catalog in ``MUSICAL_LIBRARY.txt``
in the current working directory.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Music Library API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional log file.  When empty only the console handler is used.
    log_file: str = os.getenv("LOG_FILE", "")

    # Address the launcher binds uvicorn to.
    host: str = os.getenv("HOST", "127.0.0.1")
    port: int = int(os.getenv("PORT", "8080"))

    # Path of the JSON snapshot loaded at startup and written at
    # shutdown.  Relative paths are resolved against the current
    # working directory by the snapshot service.
    library_path: str = os.getenv("LIBRARY_PATH", "MUSICAL_LIBRARY.txt")


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
