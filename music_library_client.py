"""Music library API client.

This module defines a small client wrapper around the music library
HTTP API.  It uses the ``requests`` library internally and exposes one
method per endpoint:

* :meth:`visit_count` – register a visit and return the new count.
* :meth:`add_song` – submit a new song.
* :meth:`search_songs` – search by title, artist and genre.
* :meth:`play_song` – increment the play count of a song.
* :meth:`welcome` – fetch the server's welcome message.

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None``; on failure ``data`` is ``None`` (or an empty list for
searches) and ``error`` is a dictionary with keys ``status_code`` and
``message``.  The client never raises for HTTP or transport errors.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class MusicLibraryAPI:
    """Client for the music library API."""

    def __init__(
        self,
        *,
        base_url: str = "http://127.0.0.1:8080",
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the server, e.g. ``http://localhost:8080``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per‑request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helper
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[requests.Response], Optional[Error]]:
        """Perform an HTTP request and return ``(response, error)``."""
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            return response, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    detail = err_json.get("detail") if isinstance(err_json, dict) else None
                    message = detail if isinstance(detail, str) else str(detail or err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    def _json(self, method: str, path: str, **kwargs: Any) -> Tuple[Optional[Any], Optional[Error]]:
        response, error = self._request(method, path, **kwargs)
        if error:
            return None, error
        try:
            return response.json(), None
        except ValueError:
            logger.error("Response from %s is not valid JSON", path)
            return None, {"status_code": response.status_code, "message": "Invalid JSON response"}

    # ------------------------------------------------------------------
    # Endpoints
    # ------------------------------------------------------------------
    def visit_count(self) -> Tuple[Optional[int], Optional[Error]]:
        """Register a visit and return the updated count."""
        response, error = self._request("GET", "/count")
        if error:
            return None, error
        try:
            return int(response.text.strip()), None
        except ValueError:
            return None, {"status_code": response.status_code, "message": "Invalid visit count"}

    def add_song(self, title: str, artist: str, genre: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Submit a new song.

        Returns:
            A tuple ``(song, error)`` where ``song`` is the created
            record including its ``id`` and ``play_count``.
        """
        payload = {"title": title, "artist": artist, "genre": genre}
        return self._json("POST", "/songs/new", json_body=payload)

    def search_songs(
        self, title: str = "", artist: str = "", genre: str = ""
    ) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Search the catalog.

        Empty filters are not sent.  Returns ``([], error)`` on failure.
        """
        params = {k: v for k, v in (("title", title), ("artist", artist), ("genre", genre)) if v}
        data, error = self._json("GET", "/songs/search", params=params)
        if error:
            return [], error
        if isinstance(data, list):
            return data, None
        return [], None

    def play_song(self, song_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Increment the play count of ``song_id`` and return the updated song."""
        return self._json("POST", f"/songs/play/{song_id}")

    def welcome(self) -> Tuple[Optional[str], Optional[Error]]:
        """Return the server's welcome message."""
        data, error = self._json("GET", "/")
        if error:
            return None, error
        if isinstance(data, dict):
            return data.get("message"), None
        return None, None
