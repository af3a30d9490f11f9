"""SQLite persistence for ngxpurge state."""

from .db_manager import DatabaseManager
from .stats_snapshot_dao import StatsSnapshotDAO

__all__ = ["DatabaseManager", "StatsSnapshotDAO"]
