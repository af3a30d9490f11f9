"""Tests for activation, deactivation and uninstall hooks."""

from __future__ import annotations

from datetime import datetime

from ngxpurge.application.services.lifecycle import activate, deactivate, uninstall
from ngxpurge.config.config import DEFAULT_OPTIONS
from ngxpurge.features.purge.adapters import MemorySettingsStore
from ngxpurge.features.stats import CacheStatistics
from ngxpurge.features.stats.adapters import MemoryStatsSnapshotStore


def _snapshots() -> MemoryStatsSnapshotStore:
    store = MemoryStatsSnapshotStore()
    _ = store.put(CacheStatistics(1, 1, "/c", datetime(2024, 1, 1)))
    return store


def test_activate_seeds_defaults_without_overwriting() -> None:
    settings = MemorySettingsStore({"cache_path": "/existing"})

    added = activate(settings)

    assert "cache_path" not in added
    assert set(added) == set(DEFAULT_OPTIONS) - {"cache_path"}
    assert settings.get_string("cache_path") == "/existing"
    assert activate(settings) == []


def test_deactivate_clears_snapshots_and_keeps_options() -> None:
    settings = MemorySettingsStore({"cache_path": "/c"})
    snapshots = _snapshots()

    assert deactivate(snapshots) is True

    assert snapshots.get("/c") is None
    assert settings.get_string("cache_path") == "/c"
    assert deactivate(None) is True


def test_uninstall_removes_every_option() -> None:
    settings = MemorySettingsStore({"cache_path": "/c", "auto_purge": False, "unrelated": 1})
    snapshots = _snapshots()

    removed = uninstall(settings, snapshots)

    assert set(removed) == {"cache_path", "auto_purge"}
    assert settings.as_dict() == {"unrelated": 1}
    assert snapshots.get("/c") is None
