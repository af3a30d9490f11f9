"""Data access object for the cache_stats_snapshot table."""

import sqlite3
import threading
from dataclasses import dataclass
from typing import final

from ngxpurge.platform.logging import logger


@dataclass(slots=True, frozen=True)
class StatsSnapshotRow:
    """Raw snapshot row as persisted."""

    cache_path: str
    file_count: int
    total_size: int
    computed_at: str


@final
class StatsSnapshotDAO:
    """Data access object for cached statistics snapshots."""

    conn: sqlite3.Connection
    _lock: threading.Lock

    def __init__(self, conn: sqlite3.Connection) -> None:
        """Initialize DAO.

        Args:
            conn: Database connection.
        """
        self.conn = conn
        self._lock = threading.Lock()

    def upsert(self, row: StatsSnapshotRow) -> bool:
        """Insert or replace the snapshot for ``row.cache_path``.

        Returns:
            True if successful, False otherwise.
        """
        try:
            with self._lock:
                cursor = self.conn.cursor()
                _ = cursor.execute(
                    """
                    INSERT INTO cache_stats_snapshot (cache_path, file_count, total_size, computed_at)
                    VALUES (?, ?, ?, ?)
                    ON CONFLICT(cache_path) DO UPDATE SET
                        file_count = excluded.file_count,
                        total_size = excluded.total_size,
                        computed_at = excluded.computed_at,
                        updated_at = CURRENT_TIMESTAMP
                    """,
                    (row.cache_path, row.file_count, row.total_size, row.computed_at),
                )
                self.conn.commit()
            return True
        except sqlite3.Error as e:
            logger.error("Database error: %s", e)
            with self._lock:
                self.conn.rollback()
            return False

    def get(self, cache_path: str) -> StatsSnapshotRow | None:
        """Return the snapshot stored for ``cache_path`` if any."""
        try:
            with self._lock:
                cursor = self.conn.cursor()
                _ = cursor.execute(
                    """
                    SELECT cache_path, file_count, total_size, computed_at
                    FROM cache_stats_snapshot
                    WHERE cache_path = ?
                    """,
                    (cache_path,),
                )
                result = cursor.fetchone()
        except sqlite3.Error as e:
            logger.error("Database error: %s", e)
            return None

        if result is None:
            return None
        return StatsSnapshotRow(
            cache_path=result[0],
            file_count=int(result[1]),
            total_size=int(result[2]),
            computed_at=result[3],
        )

    def clear_all(self) -> bool:
        """Delete every stored snapshot.

        Returns True on success, False on failure. Errors are logged and the
        transaction is rolled back on failure.
        """
        try:
            with self._lock:
                _ = self.conn.execute("DELETE FROM cache_stats_snapshot")
                self.conn.commit()
            return True
        except sqlite3.Error as e:
            logger.error("Failed to clear statistics snapshots: %s", e)
            try:
                with self._lock:
                    self.conn.rollback()
            except sqlite3.Error:
                pass
            return False


__all__ = ["StatsSnapshotDAO", "StatsSnapshotRow"]
