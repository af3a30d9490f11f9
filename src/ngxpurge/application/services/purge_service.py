"""Application service wiring adapters into the purge and statistics use cases."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from logging import Logger, getLogger
from pathlib import Path
from typing import final

from ngxpurge.application.services.lifecycle import OptionsStore, activate, uninstall
from ngxpurge.config.config import (
    OPTION_AUTO_PURGE,
    OPTION_CACHE_PATH,
    OPTION_SHOW_FOOTER,
    TomlSettingsStore,
)
from ngxpurge.features.purge import (
    CacheConfiguration,
    CachePurger,
    ContentItem,
    PostStatusTransition,
    PurgeError,
    PurgeGate,
    PurgeResult,
    PurgeTriggers,
    PurgeVerdict,
    sanitize_cache_path,
)
from ngxpurge.features.purge.adapters import LocalCacheFilesystem
from ngxpurge.features.purge.domain.sanitizer import ErrorReporter
from ngxpurge.features.purge.usecases.ports import (
    EVENT_STATUS_TRANSITION,
    FILTER_EXCLUDED_TYPES,
    CacheFilesystem,
    EventBus,
    SettingsStore,
)
from ngxpurge.features.stats import CacheStatistics, CacheStatisticsService, StatsSnapshotStore
from ngxpurge.features.stats.adapters import SqliteStatsSnapshotStore
from ngxpurge.platform.db import DatabaseManager, StatsSnapshotDAO
from ngxpurge.platform.hooks import HookRegistry


@dataclass(slots=True, frozen=True)
class TransitionOutcome:
    """Verdict and purge result for a simulated status change."""

    verdict: PurgeVerdict
    result: PurgeResult | None


@final
class CachePurgeService:
    """Composition root for one host process.

    Collaborators are injected when given and built from the default
    adapters otherwise. Each call to ``start_unit_of_work`` produces a
    fresh ``PurgeGate``.
    """

    settings: SettingsStore
    filesystem: CacheFilesystem
    events: EventBus
    snapshots: StatsSnapshotStore
    purger: CachePurger
    statistics: CacheStatisticsService

    def __init__(
        self,
        *,
        settings: SettingsStore | None = None,
        filesystem: CacheFilesystem | None = None,
        events: EventBus | None = None,
        snapshots: StatsSnapshotStore | None = None,
        config_path: Path | str | None = None,
        db_path: Path | str | None = None,
        logger: Logger | None = None,
    ) -> None:
        self._logger = logger or getLogger(__name__)
        self._db_manager: DatabaseManager | None = None

        self.settings = settings or TomlSettingsStore(config_path)
        self.filesystem = filesystem or LocalCacheFilesystem()
        self.events = events or HookRegistry()
        if snapshots is None:
            self._db_manager = DatabaseManager(db_path)
            snapshots = SqliteStatsSnapshotStore(StatsSnapshotDAO(self._db_manager.connect()))
        self.snapshots = snapshots

        self.purger = CachePurger(
            settings=self.settings,
            filesystem=self.filesystem,
            events=self.events,
            snapshots=self.snapshots,
            logger=self._logger,
        )
        self.statistics = CacheStatisticsService(snapshots=self.snapshots, logger=self._logger)

    def close(self) -> None:
        if self._db_manager is not None:
            self._db_manager.close()

    def activate(self) -> list[str]:
        """Seed missing default options."""

        return activate(self._options_store(), logger=self._logger)

    def reset(self) -> list[str]:
        """Remove every option and snapshot, then seed the defaults again.

        Returns the keys that were removed.
        """

        store = self._options_store()
        removed = uninstall(store, self.snapshots, logger=self._logger)
        _ = activate(store, logger=self._logger)
        return removed

    def _options_store(self) -> OptionsStore:
        if not isinstance(self.settings, OptionsStore):
            raise TypeError(f"{type(self.settings).__name__} cannot add or delete options")
        return self.settings

    def configuration(self) -> CacheConfiguration:
        return CacheConfiguration.from_settings(self.settings)

    def start_unit_of_work(self, gate: PurgeGate | None = None) -> PurgeTriggers:
        """Register triggers bound to a fresh gate for one request or job."""

        triggers = PurgeTriggers(
            purger=self.purger,
            events=self.events,
            gate=gate or PurgeGate(),
            logger=self._logger,
        )
        _ = triggers.register()
        return triggers

    def purge_now(self) -> PurgeResult:
        """Operator-initiated purge in its own unit of work."""

        return self.purger.purge(PurgeGate())

    def check(self) -> PurgeError | None:
        return self.purger.check()

    def cache_statistics(self, *, use_snapshot: bool = False) -> CacheStatistics:
        return self.statistics.get(self.configuration().cache_path, use_snapshot=use_snapshot)

    def set_cache_path(self, raw: str, *, report: ErrorReporter | None = None) -> str:
        """Sanitize and store a new cache path; returns the stored value."""

        previous = self.settings.get_string(OPTION_CACHE_PATH, "")
        sanitized = sanitize_cache_path(raw, previous, report=report)
        self.settings.set(OPTION_CACHE_PATH, sanitized)
        if sanitized != previous:
            _ = self.statistics.invalidate()
        return sanitized

    def set_auto_purge(self, enabled: bool) -> None:
        self.settings.set(OPTION_AUTO_PURGE, enabled)

    def set_show_footer(self, enabled: bool) -> None:
        self.settings.set(OPTION_SHOW_FOOTER, enabled)

    def simulate_transition(
        self,
        new_status: str,
        old_status: str,
        content_item: ContentItem | None,
        *,
        excluded_types: Iterable[str] = (),
    ) -> TransitionOutcome:
        """Dispatch a status change through the event bus as the host would.

        With auto-purge off nothing is subscribed, so the decision is only
        evaluated and reported.
        """

        extra_exclusions = [name for name in excluded_types if name]

        def add_exclusions(current: object) -> list[str]:
            base = list(current) if isinstance(current, (list, tuple, set, frozenset)) else []
            return [*base, *extra_exclusions]

        if extra_exclusions:
            self.events.add_filter(FILTER_EXCLUDED_TYPES, add_exclusions)

        triggers = self.start_unit_of_work()
        try:
            if EVENT_STATUS_TRANSITION in triggers.subscriptions:
                _ = self.events.do_action(EVENT_STATUS_TRANSITION, new_status, old_status, content_item)
            verdict = triggers.last_verdict
            if verdict is None:
                verdict = triggers.evaluate(PostStatusTransition(new_status, old_status, content_item))
            return TransitionOutcome(verdict=verdict, result=triggers.last_result)
        finally:
            triggers.unregister()
            if extra_exclusions:
                _ = self.events.remove_filter(FILTER_EXCLUDED_TYPES, add_exclusions)


__all__ = ["CachePurgeService", "TransitionOutcome"]
