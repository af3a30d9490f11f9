"""Ports for the statistics feature."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..domain.models import CacheStatistics


@runtime_checkable
class StatsSnapshotStore(Protocol):
    """Persist the most recent statistics per cache root."""

    def get(self, cache_path: str) -> CacheStatistics | None:
        """Return the stored snapshot for ``cache_path`` if present."""
        ...

    def put(self, stats: CacheStatistics) -> bool:
        """Store ``stats``; returns True on success."""
        ...

    def clear(self) -> bool:
        """Drop every snapshot; returns True on success."""
        ...


__all__ = ["StatsSnapshotStore"]
