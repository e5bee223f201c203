"""
Top‑level package for the Music Library API.

This file makes ``music_library_api`` a Python package so that
modules within ``app`` can be imported using fully qualified names
like ``music_library_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
