"""Use case wiping the configured cache root at most once per unit of work."""

from __future__ import annotations

import time
from logging import Logger, getLogger
from typing import Any, final

from ..domain.models import (
    CacheConfiguration,
    CachePathError,
    PurgeError,
    PurgeErrorKind,
    PurgeGate,
    PurgeResult,
    PurgeStatus,
)
from ..domain.validator import is_nginx_cache_listing
from .ports import (
    ACTION_CACHE_PURGED,
    FILTER_ATTEMPT_GATE,
    CacheFilesystem,
    EventBus,
    SettingsStore,
    SnapshotInvalidator,
)


@final
class CachePurger:
    """Validate, remove and recreate the cache root through injected ports.

    Removal and recreation are two separate steps. A crash in between
    leaves the cache root absent, which Nginx treats as a cold cache.
    """

    _settings: SettingsStore
    _filesystem: CacheFilesystem
    _events: EventBus
    _snapshots: SnapshotInvalidator | None
    _logger: Logger

    def __init__(
        self,
        *,
        settings: SettingsStore,
        filesystem: CacheFilesystem,
        events: EventBus,
        snapshots: SnapshotInvalidator | None = None,
        logger: Logger | None = None,
    ) -> None:
        self._settings = settings
        self._filesystem = filesystem
        self._events = events
        self._snapshots = snapshots
        self._logger = logger or getLogger(__name__)

    def current_configuration(self) -> CacheConfiguration:
        """Read the configuration afresh from the settings store.

        Raises:
            CachePathError: ``SETTINGS_UNREADABLE`` when the store fails to load.
        """

        try:
            return CacheConfiguration.from_settings(self._settings)
        except (OSError, ValueError) as exc:  # tomllib.TOMLDecodeError is a ValueError
            self._logger.error("Failed to read settings: %s", exc)
            raise CachePathError(PurgeErrorKind.SETTINGS_UNREADABLE) from exc

    def validate_cache_path(self, config: CacheConfiguration | None = None) -> None:
        """Raise ``CachePathError`` unless the cache root is safe to wipe."""

        config = config or self.current_configuration()
        path = config.cache_path

        if not path:
            raise CachePathError(PurgeErrorKind.UNCONFIGURED)
        if not self._filesystem.connect(path):
            raise CachePathError(PurgeErrorKind.FILESYSTEM_UNAVAILABLE)
        if not self._filesystem.exists(path):
            raise CachePathError(PurgeErrorKind.PATH_NOT_FOUND)
        if not self._filesystem.is_directory(path):
            raise CachePathError(PurgeErrorKind.NOT_A_DIRECTORY)
        if not self._filesystem.is_writable(path):
            raise CachePathError(PurgeErrorKind.NOT_WRITABLE)

        listing = self._filesystem.list_recursive(path)
        if listing and not is_nginx_cache_listing(listing):
            raise CachePathError(PurgeErrorKind.NOT_A_CACHE_DIRECTORY)

    def check(self, config: CacheConfiguration | None = None) -> PurgeError | None:
        """Return the validation error for the cache root, if any."""

        try:
            self.validate_cache_path(config)
        except CachePathError as exc:
            return exc.to_error()
        return None

    def should_attempt(self, context: Any = None) -> bool:
        """Global kill switch consulted before any purge work."""

        return bool(self._events.apply_filters(FILTER_ATTEMPT_GATE, True, context))

    def purge(
        self,
        gate: PurgeGate,
        *,
        config: CacheConfiguration | None = None,
        context: Any = None,
    ) -> PurgeResult:
        """Purge the cache unless ``gate`` shows this unit of work already did.

        Validation failures leave the gate open so a corrected configuration
        can still purge within the same unit of work. Failures after the
        destructive step has started close the gate.
        """

        if gate.is_done:
            self._logger.debug("Purge already handled for this unit of work")
            return PurgeResult(status=PurgeStatus.SKIPPED, cache_path="", reason="already_purged")

        try:
            config = config or self.current_configuration()
        except CachePathError as exc:
            return self._validation_failure("", exc)
        path = config.cache_path

        if not self.should_attempt(context):
            gate.mark_done()
            self._logger.info(
                "Purge vetoed by %s", FILTER_ATTEMPT_GATE, extra={
                    "purge_event": "purge.skipped",
                    "cache_path": path,
                    "reason": "attempt gate closed",
                },
            )
            return PurgeResult(status=PurgeStatus.SKIPPED, cache_path=path, reason="attempt_gate_closed")

        try:
            self.validate_cache_path(config)
        except CachePathError as exc:
            return self._validation_failure(path, exc)

        started = time.perf_counter()
        self._logger.info(
            "Purging cache at %s", path, extra={"purge_event": "purge.start", "cache_path": path}
        )

        destructive_error = self._wipe(path)
        if destructive_error is not None:
            gate.mark_done()
            self._logger.error(
                "Cache could not be purged: %s", destructive_error.message, extra={
                    "purge_event": "purge.error",
                    "cache_path": path,
                    "reason": destructive_error.message,
                },
            )
            return PurgeResult(status=PurgeStatus.FAILED, cache_path=path, error=destructive_error)

        warnings: list[str] = []
        if self._snapshots is not None and not self._snapshots.clear():
            warnings.append("stats_snapshot_not_cleared")

        try:
            _ = self._events.do_action(ACTION_CACHE_PURGED, path)
        except Exception as exc:  # the cache is already empty at this point
            self._logger.exception("%s observer failed: %s", ACTION_CACHE_PURGED, exc)
            warnings.append("observer_failed")

        gate.mark_done()
        self._logger.info(
            "Cache purged successfully", extra={
                "purge_event": "purge.complete",
                "cache_path": path,
                "duration_ms": (time.perf_counter() - started) * 1000,
            },
        )
        return PurgeResult(status=PurgeStatus.PURGED, cache_path=path, warnings=tuple(warnings))

    def _validation_failure(self, path: str, exc: CachePathError) -> PurgeResult:
        self._logger.error(
            "Cache could not be purged: %s", exc.message, extra={
                "purge_event": "purge.error",
                "cache_path": path,
                "reason": exc.message,
            },
        )
        return PurgeResult(status=PurgeStatus.FAILED, cache_path=path, error=exc.to_error())

    def _wipe(self, path: str) -> PurgeError | None:
        try:
            self._filesystem.remove_recursive(path)
        except OSError as exc:
            self._logger.debug("remove_recursive(%s) failed: %s", path, exc)
            return CachePathError(PurgeErrorKind.REMOVE_FAILED).to_error()

        try:
            self._filesystem.create_directory(path)
        except OSError as exc:
            self._logger.debug("create_directory(%s) failed: %s", path, exc)
            return CachePathError(PurgeErrorKind.RECREATE_FAILED).to_error()
        return None


__all__ = ["CachePurger"]
