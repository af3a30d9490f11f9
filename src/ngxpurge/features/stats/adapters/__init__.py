"""Adapters satisfying the statistics ports."""

from .snapshot_store import MemoryStatsSnapshotStore, SqliteStatsSnapshotStore

__all__ = ["MemoryStatsSnapshotStore", "SqliteStatsSnapshotStore"]
