"""Database manager for ngxpurge state."""

import sqlite3
from pathlib import Path
from typing import final

from ngxpurge.config.paths import default_data_dir
from ngxpurge.platform.filesystem import ensure_directory, ensure_parent_directory
from ngxpurge.platform.logging import logger


@final
class DatabaseManager:
    """Own the sqlite connection that stores cached statistics snapshots."""

    db_path: str | Path
    conn: sqlite3.Connection | None

    def __init__(self, db_path: Path | str | None = None) -> None:
        """Initialize database manager.

        Args:
            db_path: Path to database file. If None, use default path in project's data directory.
                   If ":memory:", use in-memory database.
        """
        if db_path == ":memory:":
            self.db_path = ":memory:"
        elif db_path is None:
            data_dir = default_data_dir()
            _ = ensure_directory(data_dir)
            self.db_path = data_dir / "ngxpurge.db"
        else:
            self.db_path = Path(db_path) if isinstance(db_path, str) else db_path
        self.conn = None

    def connect(self) -> sqlite3.Connection:
        """Connect to database and initialize schema."""
        if self.conn is not None:
            return self.conn

        try:
            if isinstance(self.db_path, Path):
                _ = ensure_parent_directory(self.db_path)

            try:
                self.conn = sqlite3.connect(
                    self.db_path,
                    timeout=30.0,
                    isolation_level="IMMEDIATE",
                    check_same_thread=False,
                )
            except sqlite3.OperationalError as e:
                if "unable to open database file" in str(e):
                    raise PermissionError(f"Unable to open database at {self.db_path}") from e
                raise

            _ = self.conn.execute("PRAGMA synchronous = NORMAL")
            _ = self.conn.execute("PRAGMA busy_timeout = 30000")
            self._init_schema(self.conn)
            return self.conn

        except sqlite3.Error as e:
            logger.error("Failed to connect to database: %s", e)
            raise

    def close(self) -> None:
        """Close the connection if one is open."""
        if self.conn is not None:
            self.conn.close()
            self.conn = None

    def _init_schema(self, conn: sqlite3.Connection) -> None:
        """Initialize database schema."""
        cursor = conn.cursor()
        _ = cursor.execute(
            """
            CREATE TABLE IF NOT EXISTS cache_stats_snapshot (
                cache_path TEXT PRIMARY KEY,
                file_count INTEGER NOT NULL,
                total_size INTEGER NOT NULL,
                computed_at TEXT NOT NULL,
                updated_at DATETIME DEFAULT CURRENT_TIMESTAMP
            )
            """
        )
        conn.commit()
        logger.debug("Statistics snapshot schema ready at %s", self.db_path)


__all__ = ["DatabaseManager"]
