"""
Summary: Snapshot stores backing the statistics service.
Why: Persist the last scan between CLI runs and drop it whenever the cache is purged.
"""

from __future__ import annotations

from datetime import datetime
from typing import final

from ngxpurge.platform.db.stats_snapshot_dao import StatsSnapshotDAO, StatsSnapshotRow

from ..domain.models import TIMESTAMP_FORMAT, CacheStatistics
from ..usecases.ports import StatsSnapshotStore


@final
class SqliteStatsSnapshotStore(StatsSnapshotStore):
    """Adapter exposing ``StatsSnapshotDAO`` through the snapshot port."""

    def __init__(self, dao: StatsSnapshotDAO) -> None:
        """Store the DAO dependency."""
        self._dao = dao

    def get(self, cache_path: str) -> CacheStatistics | None:
        row = self._dao.get(cache_path)
        if row is None:
            return None
        try:
            computed_at = datetime.strptime(row.computed_at, TIMESTAMP_FORMAT)
        except ValueError:
            return None
        return CacheStatistics(
            file_count=row.file_count,
            total_size_bytes=row.total_size,
            cache_path=row.cache_path,
            computed_at=computed_at,
        )

    def put(self, stats: CacheStatistics) -> bool:
        return self._dao.upsert(
            StatsSnapshotRow(
                cache_path=stats.cache_path,
                file_count=stats.file_count,
                total_size=stats.total_size_bytes,
                computed_at=stats.last_update,
            )
        )

    def clear(self) -> bool:
        return self._dao.clear_all()


@final
class MemoryStatsSnapshotStore(StatsSnapshotStore):
    """Process-local snapshot store."""

    def __init__(self) -> None:
        self._snapshots: dict[str, CacheStatistics] = {}

    def get(self, cache_path: str) -> CacheStatistics | None:
        return self._snapshots.get(cache_path)

    def put(self, stats: CacheStatistics) -> bool:
        self._snapshots[stats.cache_path] = stats
        return True

    def clear(self) -> bool:
        self._snapshots.clear()
        return True


__all__ = ["MemoryStatsSnapshotStore", "SqliteStatsSnapshotStore"]
