"""Shared job stack drained by copy workers."""

from __future__ import annotations

import threading

from cpj.copying.types import Job


class JobQueue:
    """Pending (source, dest) pairs behind a single lock.

    Claims pop from the tail, so jobs come out in reverse enumeration order.
    Only the "claimed exactly once" property is guaranteed to callers.
    """

    def __init__(self, sources: list[str], dests: list[str]) -> None:
        if len(sources) != len(dests):
            raise ValueError(f"source and destination lists differ in length ({len(sources)} != {len(dests)})")
        self._lock = threading.Lock()
        self._sources = sources
        self._dests = dests

    def __len__(self) -> int:
        with self._lock:
            return len(self._sources)

    def claim(self) -> Job | None:
        """Remove and return the last pending job, or None when empty."""
        with self._lock:
            if not self._sources:
                return None
            return Job(source=self._sources.pop(), dest=self._dests.pop())

    def merge(self, other: JobQueue) -> None:
        """Move every pending job of ``other`` onto this queue."""
        if other is self:
            return
        # fixed lock order so two opposite merges cannot deadlock
        first, second = sorted((self, other), key=id)
        with first._lock, second._lock:
            self._sources.extend(other._sources)
            self._dests.extend(other._dests)
            other._sources.clear()
            other._dests.clear()
