"""
Application package initializer.

The service is organised into a few small pieces: ``core`` holds
configuration, logging and the locking primitive, ``schemas`` the
Pydantic payloads, ``services`` the in‑memory catalog, the snapshot
codec and the visit counter, and ``api`` the HTTP routes that tie
them together.
"""

from .main import app  # noqa: F401
