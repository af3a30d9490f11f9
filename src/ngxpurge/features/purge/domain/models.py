"""Value objects shared by the purge decision engine and executor."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Final

from ngxpurge.shared.options import (
    OPTION_AUTO_PURGE,
    OPTION_CACHE_PATH,
    OPTION_SHOW_FOOTER,
)

from .sanitizer import sanitize_cache_path

if TYPE_CHECKING:
    from ngxpurge.features.purge.usecases.ports import SettingsStore


class EntryKind(str, Enum):
    """Kind of node inside a recursive cache listing."""

    FILE = "f"
    DIRECTORY = "d"


@dataclass(slots=True, frozen=True)
class CacheEntry:
    """One node of a recursive directory listing.

    ``children`` is only meaningful for directories and is kept in listing
    order.
    """

    name: str
    kind: EntryKind
    children: tuple["CacheEntry", ...] = ()

    @property
    def is_file(self) -> bool:
        return self.kind is EntryKind.FILE

    @property
    def is_directory(self) -> bool:
        return self.kind is EntryKind.DIRECTORY

    @classmethod
    def file(cls, name: str) -> "CacheEntry":
        return cls(name=name, kind=EntryKind.FILE)

    @classmethod
    def directory(cls, name: str, children: Sequence["CacheEntry"] = ()) -> "CacheEntry":
        return cls(name=name, kind=EntryKind.DIRECTORY, children=tuple(children))


# A listing is the ordered children of a directory.
CacheDirectoryListing = Sequence[CacheEntry]


@dataclass(slots=True, frozen=True)
class ContentItem:
    """Publishable content whose status changed."""

    id: int
    content_type: str
    is_revision: bool = False
    is_autosave: bool = False


@dataclass(slots=True, frozen=True)
class PostStatusTransition:
    """Status change reported for a content item."""

    new_status: str
    old_status: str
    content_item: ContentItem | None

    def __str__(self) -> str:
        subject = "unknown item"
        if self.content_item is not None:
            subject = f"{self.content_item.content_type} #{self.content_item.id}"
        return f"{self.old_status} → {self.new_status} ({subject})"


@dataclass(slots=True, frozen=True)
class CacheConfiguration:
    """Settings snapshot taken at the start of a unit of work."""

    cache_path: str = ""
    auto_purge: bool = True
    show_stats_footer: bool = True

    @property
    def is_configured(self) -> bool:
        return bool(self.cache_path)

    @classmethod
    def from_settings(cls, store: "SettingsStore") -> "CacheConfiguration":
        """Read the current option values from ``store``.

        The stored path is normalised on the way in, so a hand-edited value
        containing ``..`` reads as unconfigured.
        """

        return cls(
            cache_path=sanitize_cache_path(store.get_string(OPTION_CACHE_PATH, ""), ""),
            auto_purge=store.get_bool(OPTION_AUTO_PURGE, True),
            show_stats_footer=store.get_bool(OPTION_SHOW_FOOTER, True),
        )


@dataclass(slots=True)
class PurgeGate:
    """Per unit of work flag recording that a purge already ran.

    Create one gate per request, job or CLI invocation; never share a gate
    across units of work or later purges would be suppressed.
    """

    purged: bool = False

    @property
    def is_done(self) -> bool:
        return self.purged

    def mark_done(self) -> None:
        self.purged = True


class PurgeStatus(str, Enum):
    """Outcome of a purge request."""

    PURGED = "purged"
    SKIPPED = "skipped"
    FAILED = "failed"


class PurgeErrorKind(str, Enum):
    """Reasons a purge could not run or did not complete."""

    UNCONFIGURED = "unconfigured"
    FILESYSTEM_UNAVAILABLE = "filesystem_unavailable"
    PATH_NOT_FOUND = "path_not_found"
    NOT_A_DIRECTORY = "not_a_directory"
    NOT_WRITABLE = "not_writable"
    NOT_A_CACHE_DIRECTORY = "not_a_cache_directory"
    REMOVE_FAILED = "remove_failed"
    RECREATE_FAILED = "recreate_failed"
    SETTINGS_UNREADABLE = "settings_unreadable"


ERROR_MESSAGES: Final[dict[PurgeErrorKind, str]] = {
    PurgeErrorKind.UNCONFIGURED: "Cache path is not configured.",
    PurgeErrorKind.FILESYSTEM_UNAVAILABLE: "Could not initialize filesystem access.",
    PurgeErrorKind.PATH_NOT_FOUND: "Cache path does not exist.",
    PurgeErrorKind.NOT_A_DIRECTORY: "Cache path is not a directory.",
    PurgeErrorKind.NOT_WRITABLE: "Cache path is not writable.",
    PurgeErrorKind.NOT_A_CACHE_DIRECTORY: "Path does not appear to be a valid Nginx cache directory.",
    PurgeErrorKind.REMOVE_FAILED: "Cache directory could not be removed.",
    PurgeErrorKind.RECREATE_FAILED: "Cache directory could not be recreated.",
    PurgeErrorKind.SETTINGS_UNREADABLE: "Settings could not be read.",
}


@dataclass(slots=True, frozen=True)
class PurgeError:
    """Typed failure surfaced to operators."""

    kind: PurgeErrorKind
    message: str

    @property
    def is_configuration_error(self) -> bool:
        return self.kind in {PurgeErrorKind.UNCONFIGURED, PurgeErrorKind.SETTINGS_UNREADABLE}

    @property
    def is_destructive_failure(self) -> bool:
        return self.kind in {PurgeErrorKind.REMOVE_FAILED, PurgeErrorKind.RECREATE_FAILED}


class CachePathError(Exception):
    """Raised when the configured cache path cannot be purged safely."""

    def __init__(self, kind: PurgeErrorKind, message: str | None = None) -> None:
        self.kind = kind
        self.message = message or ERROR_MESSAGES[kind]
        super().__init__(self.message)

    def to_error(self) -> PurgeError:
        return PurgeError(kind=self.kind, message=self.message)


@dataclass(slots=True, frozen=True)
class PurgeResult:
    """Outcome returned by the executor; never raised."""

    status: PurgeStatus
    cache_path: str
    error: PurgeError | None = None
    reason: str | None = None
    warnings: tuple[str, ...] = field(default_factory=tuple)

    @property
    def purged(self) -> bool:
        return self.status is PurgeStatus.PURGED

    @property
    def skipped(self) -> bool:
        return self.status is PurgeStatus.SKIPPED

    @property
    def failed(self) -> bool:
        return self.status is PurgeStatus.FAILED


__all__ = [
    "CacheConfiguration",
    "CacheDirectoryListing",
    "CacheEntry",
    "CachePathError",
    "ContentItem",
    "ERROR_MESSAGES",
    "EntryKind",
    "PostStatusTransition",
    "PurgeError",
    "PurgeErrorKind",
    "PurgeGate",
    "PurgeResult",
    "PurgeStatus",
]
