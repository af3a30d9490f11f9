"""Ports for the purge feature.

Where: features/purge/usecases.
What: Protocols describing the settings store, filesystem capability and event bus.
Why: Keep the executor and trigger wiring independent of concrete infrastructure.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Final, Protocol, runtime_checkable

from ..domain.models import CacheDirectoryListing

# Event names consumed by the trigger registrar.
EVENT_STATUS_TRANSITION: Final[str] = "transition_post_status"

# Event emitted after a successful purge with the purged path.
ACTION_CACHE_PURGED: Final[str] = "cache_purged"

# Filters consulted by the core.
FILTER_PURGE_ACTIONS: Final[str] = "purge_actions"
FILTER_EXCLUDED_TYPES: Final[str] = "excluded_content_types"
FILTER_OVERRIDE_SHOULD_PURGE: Final[str] = "override_should_purge"
FILTER_ATTEMPT_GATE: Final[str] = "override_attempt_gate"


@runtime_checkable
class SettingsStore(Protocol):
    """Key-value options store."""

    def get_string(self, key: str, default: str = "") -> str:
        """Return a sanitized string option or ``default``."""
        ...

    def get_bool(self, key: str, default: bool = False) -> bool:
        """Return a boolean option or ``default``."""
        ...

    def set(self, key: str, value: str | bool | int) -> None:
        """Persist an option value."""
        ...


@runtime_checkable
class CacheFilesystem(Protocol):
    """Filesystem capability used to inspect and wipe the cache root."""

    def connect(self, path: str) -> bool:
        """Prepare access to ``path``; False when the filesystem is unavailable."""
        ...

    def exists(self, path: str) -> bool:
        ...

    def is_directory(self, path: str) -> bool:
        ...

    def is_writable(self, path: str) -> bool:
        ...

    def list_recursive(self, path: str) -> CacheDirectoryListing:
        """Return the recursive listing of ``path``; unreadable parts are omitted."""
        ...

    def remove_recursive(self, path: str) -> None:
        """Delete ``path`` and everything below it; raises ``OSError`` on failure."""
        ...

    def create_directory(self, path: str) -> None:
        """Create ``path`` as an empty directory; raises ``OSError`` on failure."""
        ...


@runtime_checkable
class EventBus(Protocol):
    """Named actions and filters."""

    def add_action(self, name: str, callback: Callable[..., Any], priority: int = 10) -> None:
        ...

    def remove_action(self, name: str, callback: Callable[..., Any]) -> bool:
        ...

    def do_action(self, name: str, *args: Any) -> int:
        ...

    def add_filter(self, name: str, callback: Callable[..., Any], priority: int = 10) -> None:
        ...

    def remove_filter(self, name: str, callback: Callable[..., Any]) -> bool:
        ...

    def apply_filters(self, name: str, value: Any, *args: Any) -> Any:
        ...


@runtime_checkable
class SnapshotInvalidator(Protocol):
    """Drop cached statistics once the cache contents change."""

    def clear(self) -> bool:
        """Remove stored snapshots; returns True on success."""
        ...


__all__ = [
    "ACTION_CACHE_PURGED",
    "CacheFilesystem",
    "EVENT_STATUS_TRANSITION",
    "EventBus",
    "FILTER_ATTEMPT_GATE",
    "FILTER_EXCLUDED_TYPES",
    "FILTER_OVERRIDE_SHOULD_PURGE",
    "FILTER_PURGE_ACTIONS",
    "SettingsStore",
    "SnapshotInvalidator",
]
