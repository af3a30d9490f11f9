"""Filesystem helpers reused across multiple layers."""

from __future__ import annotations

import os
from pathlib import Path


def ensure_directory(directory: Path) -> Path:
    """Ensure ``directory`` exists as a folder and return it."""

    if directory.exists():
        if not directory.is_dir():
            raise NotADirectoryError(f"Path exists but is not a directory: {directory}")
        return directory

    directory.mkdir(parents=True, exist_ok=True)
    return directory


def ensure_parent_directory(path: Path) -> Path:
    """Ensure the parent directory for ``path`` exists and return it."""

    parent = path.parent
    return ensure_directory(parent)


def directory_identity(path: Path | str) -> tuple[int, int] | None:
    """Return the ``(st_dev, st_ino)`` pair used to detect directory cycles.

    Symlinks are followed so two routes into the same directory share an
    identity; unreadable paths yield ``None``.
    """

    try:
        info = os.stat(path)
    except OSError:
        return None
    return (info.st_dev, info.st_ino)


__all__ = ["directory_identity", "ensure_directory", "ensure_parent_directory"]
