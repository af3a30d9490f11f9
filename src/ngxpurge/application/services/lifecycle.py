"""Install, deactivate and uninstall hooks for the host integration.

Activation seeds defaults without overwriting operator choices, deactivation
only drops derived data, and uninstall removes every option ngxpurge owns.
"""

from __future__ import annotations

from logging import Logger, getLogger
from typing import Protocol, runtime_checkable

from ngxpurge.config.config import ALL_OPTIONS, DEFAULT_OPTIONS
from ngxpurge.features.purge.usecases.ports import SnapshotInvalidator


@runtime_checkable
class OptionsStore(Protocol):
    """Settings store able to seed and drop options."""

    def add(self, key: str, value: str | bool | int) -> bool:
        ...

    def delete(self, key: str) -> bool:
        ...


def activate(settings: OptionsStore, *, logger: Logger | None = None) -> list[str]:
    """Seed default options; returns the keys that were added."""

    log = logger or getLogger(__name__)
    added = [key for key, value in DEFAULT_OPTIONS.items() if settings.add(key, value)]
    if added:
        log.info("Seeded default options: %s", ", ".join(added))
    return added


def deactivate(snapshots: SnapshotInvalidator | None, *, logger: Logger | None = None) -> bool:
    """Drop derived statistics; options are left in place."""

    log = logger or getLogger(__name__)
    if snapshots is None:
        return True
    cleared = snapshots.clear()
    if not cleared:
        log.warning("Failed to clear statistics snapshots on deactivation")
    return cleared


def uninstall(
    settings: OptionsStore,
    snapshots: SnapshotInvalidator | None,
    *,
    logger: Logger | None = None,
) -> list[str]:
    """Remove every ngxpurge option and snapshot; returns deleted keys."""

    log = logger or getLogger(__name__)
    removed = [key for key in ALL_OPTIONS if settings.delete(key)]
    _ = deactivate(snapshots, logger=log)
    log.info("Removed options: %s", ", ".join(removed) if removed else "none")
    return removed


__all__ = ["OptionsStore", "activate", "deactivate", "uninstall"]
