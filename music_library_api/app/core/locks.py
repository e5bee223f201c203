"""
Readers/writer lock used to guard the in‑memory catalog.

Python's ``threading`` module only ships exclusive locks.  The
``ReadWriteLock`` below builds the shared/exclusive variant on top of a
``Condition``: any number of readers may hold the lock together, a
writer holds it alone.  Once a writer is waiting, new readers queue
behind it so that a steady stream of searches cannot starve inserts
and play updates.

The lock is not re‑entrant.  Holders must not perform I/O while the
lock is held.
"""

from contextlib import contextmanager
from threading import Condition, Lock
from typing import Iterator


class ReadWriteLock:
    """Shared/exclusive lock with writer preference."""

    def __init__(self) -> None:
        self._condition = Condition(Lock())
        self._readers = 0
        self._writers_waiting = 0
        self._writing = False

    def acquire_read(self) -> None:
        with self._condition:
            while self._writing or self._writers_waiting:
                self._condition.wait()
            self._readers += 1

    def release_read(self) -> None:
        with self._condition:
            self._readers -= 1
            if self._readers == 0:
                self._condition.notify_all()

    def acquire_write(self) -> None:
        with self._condition:
            self._writers_waiting += 1
            try:
                while self._writing or self._readers:
                    self._condition.wait()
            finally:
                self._writers_waiting -= 1
            self._writing = True

    def release_write(self) -> None:
        with self._condition:
            self._writing = False
            self._condition.notify_all()

    @contextmanager
    def read_locked(self) -> Iterator[None]:
        """Hold the shared side of the lock for the duration of the block."""
        self.acquire_read()
        try:
            yield
        finally:
            self.release_read()

    @contextmanager
    def write_locked(self) -> Iterator[None]:
        """Hold the exclusive side of the lock for the duration of the block."""
        self.acquire_write()
        try:
            yield
        finally:
            self.release_write()
