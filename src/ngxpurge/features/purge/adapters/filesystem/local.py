"""Filesystem adapter for the purge use cases."""

from __future__ import annotations

import os
import shutil
from pathlib import Path
from typing import Final

from ngxpurge.platform.filesystem import directory_identity, ensure_directory
from ngxpurge.platform.logging import logger

from ...domain.models import CacheEntry
from ...usecases.ports import CacheFilesystem

DEFAULT_MAX_DEPTH: Final[int] = 32


class LocalCacheFilesystem(CacheFilesystem):
    """Thin wrapper around the local filesystem."""

    max_depth: int

    def __init__(self, max_depth: int = DEFAULT_MAX_DEPTH) -> None:
        self.max_depth = max_depth

    def connect(self, path: str) -> bool:
        return True

    def exists(self, path: str) -> bool:
        return Path(path).exists()

    def is_directory(self, path: str) -> bool:
        return Path(path).is_dir()

    def is_writable(self, path: str) -> bool:
        return os.access(path, os.W_OK)

    def list_recursive(self, path: str) -> tuple[CacheEntry, ...]:
        """List ``path`` recursively in name order.

        Directories reached twice (symlink loops, bind mounts) are listed
        once; deeper levels than ``max_depth`` come back empty.
        """

        root_identity = directory_identity(path)
        visited = {root_identity} if root_identity is not None else set()
        return self._list(Path(path), depth=1, visited=visited)

    def remove_recursive(self, path: str) -> None:
        """Remove ``path`` and everything below it.

        A symlinked root keeps its link: the directory it points to is
        emptied instead, and ``create_directory`` then finds it in place.
        """

        if not os.path.islink(path):
            shutil.rmtree(path)
            return

        logger.debug("Cache root %s is a symlink; emptying its target", path)
        with os.scandir(path) as iterator:
            entries = list(iterator)
        for entry in entries:
            if entry.is_dir(follow_symlinks=False):
                shutil.rmtree(entry.path)
            else:
                os.unlink(entry.path)

    def create_directory(self, path: str) -> None:
        _ = ensure_directory(Path(path))

    def _list(
        self,
        directory: Path,
        *,
        depth: int,
        visited: set[tuple[int, int]],
    ) -> tuple[CacheEntry, ...]:
        if depth > self.max_depth:
            logger.debug("Listing depth limit reached at %s", directory)
            return ()

        try:
            with os.scandir(directory) as iterator:
                entries = sorted(iterator, key=lambda entry: entry.name)
        except OSError as exc:
            logger.debug("Skipping unreadable directory %s: %s", directory, exc)
            return ()

        listing: list[CacheEntry] = []
        for entry in entries:
            try:
                is_dir = entry.is_dir()
            except OSError:
                continue

            if not is_dir:
                listing.append(CacheEntry.file(entry.name))
                continue

            identity = directory_identity(entry.path)
            if identity is None or identity in visited:
                listing.append(CacheEntry.directory(entry.name))
                continue
            visited.add(identity)
            children = self._list(Path(entry.path), depth=depth + 1, visited=visited)
            listing.append(CacheEntry.directory(entry.name, children))

        return tuple(listing)


__all__ = ["DEFAULT_MAX_DEPTH", "LocalCacheFilesystem"]
