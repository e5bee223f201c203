"""
Snapshot persistence for the song catalog.

The catalog is persisted as a single JSON array of song objects::

    [{"id": 1, "title": "Imagine", "artist": "John Lennon",
      "genre": "Rock", "play_count": 3}]

``load_snapshot`` is called once at startup.  A missing or corrupt
file is not fatal: the problem is logged, a corrupt file is renamed to
``<name>.corrupt`` and the service starts with
an empty catalog.  ``save_snapshot`` is called once at shutdown and
replaces the file as a whole.  It writes to a temporary file next to
the destination first and then swaps it in, so an interrupted save
leaves the previous snapshot intact.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Iterable, List, Union

from pydantic import TypeAdapter, ValidationError

from music_library_api.app.schemas.song import Song


logger = logging.getLogger(__name__)

_SONG_LIST = TypeAdapter(List[Song])


class SnapshotError(RuntimeError):
    """Raised when the catalog cannot be written to disk."""


def resolve_library_path(path: Union[str, os.PathLike]) -> Path:
    """Return ``path`` as an absolute path.

    Relative paths are resolved against the current working directory.
    """
    return Path(path).expanduser().resolve()


def _set_aside(library_path: Path) -> None:
    """Move an unreadable snapshot out of the way of the next save."""
    corrupt_path = library_path.with_name(library_path.name + ".corrupt")
    try:
        os.replace(library_path, corrupt_path)
    except OSError as e:
        logger.error("Could not move corrupt snapshot %s aside: %s", library_path, e)
        return
    logger.warning("Moved corrupt snapshot to %s", corrupt_path)


def load_snapshot(path: Union[str, os.PathLike]) -> List[Song]:
    """Read the songs stored at ``path``.

    Returns an empty list when the file does not exist, cannot be read,
    is not valid UTF-8 JSON, does not describe a list of songs or
    repeats a song id.  A file that exists but cannot be parsed is
    renamed to ``<name>.corrupt`` so the shutdown save does not
    overwrite it.
    """
    library_path = resolve_library_path(path)
    try:
        content = library_path.read_bytes()
    except FileNotFoundError:
        logger.info("No library snapshot at %s, starting with an empty catalog", library_path)
        return []
    except OSError as e:
        logger.error("Error reading library snapshot %s: %s", library_path, e)
        return []

    try:
        # Bytes are decoded by pydantic; invalid UTF-8 is a ValidationError.
        songs = _SONG_LIST.validate_json(content)
    except ValidationError as e:
        logger.error("Error parsing library snapshot %s: %s", library_path, e)
        _set_aside(library_path)
        return []

    ids = [song.id for song in songs]
    if len(set(ids)) != len(ids):
        logger.error("Error parsing library snapshot %s: duplicate song ids", library_path)
        _set_aside(library_path)
        return []

    logger.info("Loaded %d songs from %s", len(songs), library_path)
    return songs


def dump_songs(songs: Iterable[Song]) -> str:
    """Serialize ``songs`` to the snapshot's JSON text."""
    return json.dumps(
        [song.model_dump() for song in songs],
        ensure_ascii=False,
        indent=2,
    )


def save_snapshot(songs: Iterable[Song], path: Union[str, os.PathLike]) -> Path:
    """Write ``songs`` to ``path``, replacing any previous contents.

    Returns the absolute path written.  Raises ``SnapshotError`` when
    the destination cannot be written.
    """
    library_path = resolve_library_path(path)
    payload = dump_songs(songs)
    try:
        library_path.parent.mkdir(parents=True, exist_ok=True)
        temp_fd, temp_path = tempfile.mkstemp(
            suffix=".tmp",
            prefix=f".{library_path.name}.",
            dir=library_path.parent,
        )
        try:
            with os.fdopen(temp_fd, "w", encoding="utf-8") as f:
                f.write(payload)
            os.replace(temp_path, library_path)
        except BaseException:
            # The temporary file is only ours until os.replace succeeds.
            if os.path.exists(temp_path):
                os.unlink(temp_path)
            raise
    except OSError as e:
        raise SnapshotError(f"Cannot write library snapshot {library_path}: {e}") from e
    logger.info("Saved library snapshot to %s", library_path)
    return library_path
