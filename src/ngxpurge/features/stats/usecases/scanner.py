"""Use cases computing and caching statistics for the cache root."""

from __future__ import annotations

import os
import time
from collections.abc import Callable
from datetime import datetime
from logging import Logger, getLogger
from typing import Final, final

from ngxpurge.platform.filesystem import directory_identity

from ..domain.models import CacheStatistics
from ..domain.units import format_bytes
from .ports import StatsSnapshotStore

DEFAULT_MAX_DEPTH: Final[int] = 32


@final
class CacheStatisticsScanner:
    """Count regular files and bytes below a directory.

    Unreadable directories are skipped, directories already visited through
    a symlink are not walked again and recursion stops at ``max_depth``.
    """

    def __init__(
        self,
        *,
        max_depth: int = DEFAULT_MAX_DEPTH,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._max_depth = max_depth
        self._clock = clock

    def compute(self, path: str) -> CacheStatistics:
        """Return statistics for ``path``; missing paths yield zeroes."""

        computed_at = self._clock()
        if not path or not os.path.isdir(path):
            return CacheStatistics.empty(path, computed_at)

        totals = [0, 0]
        root_identity = directory_identity(path)
        visited = {root_identity} if root_identity is not None else set()
        self._scan(path, totals, visited, depth=1)

        return CacheStatistics(
            file_count=totals[0],
            total_size_bytes=totals[1],
            cache_path=path,
            computed_at=computed_at,
        )

    def _scan(
        self,
        directory: str,
        totals: list[int],
        visited: set[tuple[int, int]],
        *,
        depth: int,
    ) -> None:
        if depth > self._max_depth:
            return

        try:
            with os.scandir(directory) as iterator:
                entries = list(iterator)
        except OSError:
            return

        for entry in entries:
            try:
                if entry.is_dir():
                    identity = directory_identity(entry.path)
                    if identity is None or identity in visited:
                        continue
                    visited.add(identity)
                    self._scan(entry.path, totals, visited, depth=depth + 1)
                elif entry.is_file():
                    size = entry.stat().st_size
                    totals[0] += 1
                    totals[1] += size
            except OSError:
                continue


@final
class CacheStatisticsService:
    """Serve statistics, optionally through a persisted snapshot."""

    _scanner: CacheStatisticsScanner
    _snapshots: StatsSnapshotStore | None
    _logger: Logger

    def __init__(
        self,
        *,
        scanner: CacheStatisticsScanner | None = None,
        snapshots: StatsSnapshotStore | None = None,
        logger: Logger | None = None,
    ) -> None:
        self._scanner = scanner or CacheStatisticsScanner()
        self._snapshots = snapshots
        self._logger = logger or getLogger(__name__)

    def get(self, cache_path: str, *, use_snapshot: bool = False) -> CacheStatistics:
        """Return statistics for ``cache_path``.

        With ``use_snapshot`` a stored snapshot is returned when available;
        otherwise the tree is scanned and the result stored.
        """

        if use_snapshot and self._snapshots is not None:
            cached = self._snapshots.get(cache_path)
            if cached is not None:
                self._logger.debug("Using statistics snapshot from %s", cached.last_update)
                return cached

        started = time.perf_counter()
        stats = self._scanner.compute(cache_path)
        self._logger.info(
            "Computed cache statistics", extra={
                "purge_event": "stats.complete",
                "cache_path": cache_path,
                "file_count": stats.file_count,
                "size_label": format_bytes(stats.total_size_bytes),
                "duration_ms": (time.perf_counter() - started) * 1000,
            },
        )

        if self._snapshots is not None and cache_path:
            _ = self._snapshots.put(stats)
        return stats

    def invalidate(self) -> bool:
        """Drop stored snapshots."""

        if self._snapshots is None:
            return True
        return self._snapshots.clear()


__all__ = ["CacheStatisticsScanner", "CacheStatisticsService", "DEFAULT_MAX_DEPTH"]
