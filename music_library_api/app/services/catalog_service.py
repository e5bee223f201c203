"""
In‑memory song catalog.

``CatalogService`` owns every song record of the running service.  It
keeps the records in insertion order together with an id index and a
monotonic id counter, and guards all of it with a single
``ReadWriteLock``: searches share the lock, inserts and play updates
take it exclusively.  Callers never receive the stored objects, only
copies, so nothing outside the service can mutate a record between
calls.

Ids are allocated from ``_next_id`` rather than derived from the
number of records.  Without deletions both give ``len + 1``; the
counter keeps ids unique should removal ever be added.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional

from music_library_api.app.core.locks import ReadWriteLock
from music_library_api.app.schemas.song import Song


logger = logging.getLogger(__name__)


class CatalogService:
    """Thread‑safe, ordered collection of songs."""

    def __init__(self, songs: Iterable[Song] = ()) -> None:
        self._lock = ReadWriteLock()
        self._songs: List[Song] = []
        self._by_id: Dict[int, Song] = {}
        for song in songs:
            if song.id in self._by_id:
                logger.warning("Skipping duplicate song id %s", song.id)
                continue
            stored = song.model_copy()
            self._songs.append(stored)
            self._by_id[stored.id] = stored
        self._next_id = max(self._by_id, default=0) + 1

    def __len__(self) -> int:
        with self._lock.read_locked():
            return len(self._songs)

    def add_song(self, title: str, artist: str, genre: str) -> Song:
        """Append a new song and return a copy of the created record.

        Id allocation and the append happen under the write lock, so
        concurrent calls always receive distinct ids.
        """
        with self._lock.write_locked():
            song = Song(
                id=self._next_id,
                title=title,
                artist=artist,
                genre=genre,
                play_count=0,
            )
            self._next_id += 1
            self._songs.append(song)
            self._by_id[song.id] = song
            created = song.model_copy()
        logger.info("Added song %s: %r by %r", created.id, created.title, created.artist)
        return created

    def search_songs(
        self,
        title: Optional[str] = "",
        artist: Optional[str] = "",
        genre: Optional[str] = "",
    ) -> List[Song]:
        """Return copies of all songs matching every filter.

        Each filter is a case‑insensitive substring; an empty or
        ``None`` filter matches everything.  Results keep insertion
        order and are taken from one consistent view of the catalog.
        """
        title_q = (title or "").casefold()
        artist_q = (artist or "").casefold()
        genre_q = (genre or "").casefold()
        with self._lock.read_locked():
            return [
                song.model_copy()
                for song in self._songs
                if title_q in song.title.casefold()
                and artist_q in song.artist.casefold()
                and genre_q in song.genre.casefold()
            ]

    def increment_play(self, song_id: int) -> Optional[Song]:
        """Increment the play count of ``song_id``.

        Returns a copy of the updated record, or ``None`` when no song
        has that id.  Unknown ids leave the catalog untouched.
        """
        with self._lock.write_locked():
            song = self._by_id.get(song_id)
            if song is None:
                return None
            song.play_count += 1
            updated = song.model_copy()
        logger.debug("Song %s play count is now %s", updated.id, updated.play_count)
        return updated

    def snapshot(self) -> List[Song]:
        """Return copies of every song in insertion order."""
        with self._lock.read_locked():
            return [song.model_copy() for song in self._songs]
