"""Data structures describing cache statistics."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Final

TIMESTAMP_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"


@dataclass(slots=True, frozen=True)
class CacheStatistics:
    """File count and byte total observed under a cache root."""

    file_count: int
    total_size_bytes: int
    cache_path: str
    computed_at: datetime

    @classmethod
    def empty(cls, cache_path: str, computed_at: datetime | None = None) -> "CacheStatistics":
        return cls(
            file_count=0,
            total_size_bytes=0,
            cache_path=cache_path,
            computed_at=computed_at or datetime.now(),
        )

    @property
    def last_update(self) -> str:
        return self.computed_at.strftime(TIMESTAMP_FORMAT)


__all__ = ["CacheStatistics", "TIMESTAMP_FORMAT"]
