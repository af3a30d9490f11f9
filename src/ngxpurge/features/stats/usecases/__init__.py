"""Statistics use cases."""

from .ports import StatsSnapshotStore
from .scanner import CacheStatisticsScanner, CacheStatisticsService

__all__ = ["CacheStatisticsScanner", "CacheStatisticsService", "StatsSnapshotStore"]
