"""Adapters satisfying the purge ports."""

from .filesystem.local import LocalCacheFilesystem
from .settings.memory import MemorySettingsStore

__all__ = ["LocalCacheFilesystem", "MemorySettingsStore"]
