"""
Site‑wide visit counter.

The counter lives for the lifetime of the process and is never
persisted.  It has its own lock so that visit traffic is never
serialized against catalog traffic.
"""

import logging
from threading import Lock


logger = logging.getLogger(__name__)


class VisitCounter:
    """Atomic integer counter."""

    def __init__(self, start: int = 0) -> None:
        self._lock = Lock()
        self._value = start

    @property
    def value(self) -> int:
        with self._lock:
            return self._value

    def increment(self) -> int:
        """Add one visit and return the new count."""
        with self._lock:
            self._value += 1
            count = self._value
        logger.info("Visit count: %s", count)
        return count
