"""Public surface for the cache statistics feature."""

from .domain import CacheStatistics, format_bytes
from .usecases import CacheStatisticsScanner, CacheStatisticsService, StatsSnapshotStore

__all__ = [
    "CacheStatistics",
    "CacheStatisticsScanner",
    "CacheStatisticsService",
    "StatsSnapshotStore",
    "format_bytes",
]
