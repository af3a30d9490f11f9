"""Tests for the composition root wiring purge and statistics use cases."""

from __future__ import annotations

from collections.abc import Generator
from pathlib import Path

import pytest

from ngxpurge.application.services.purge_service import CachePurgeService
from ngxpurge.features.purge import ContentItem, PurgeErrorKind, PurgeGate
from ngxpurge.features.purge.adapters import MemorySettingsStore
from ngxpurge.features.purge.usecases.ports import ACTION_CACHE_PURGED, EVENT_STATUS_TRANSITION
from ngxpurge.features.stats.adapters import MemoryStatsSnapshotStore
from ngxpurge.platform.hooks import HookRegistry

POST = ContentItem(id=1, content_type="post")


@pytest.fixture
def service(tmp_path: Path, cache_root: Path) -> Generator[CachePurgeService, None, None]:
    """Service over a TOML settings file and an in-memory snapshot DB."""

    svc = CachePurgeService(config_path=tmp_path / "ngxpurge.toml", db_path=":memory:")
    _ = svc.activate()
    svc.settings.set("cache_path", str(cache_root))
    yield svc
    svc.close()


def test_publish_from_draft_purges_once(service: CachePurgeService, cache_root: Path) -> None:
    """A publish purges the cache and a repeat in the same unit is skipped."""

    emitted: list[str] = []
    service.events.add_action(ACTION_CACHE_PURGED, emitted.append)
    triggers = service.start_unit_of_work()

    _ = service.events.do_action(EVENT_STATUS_TRANSITION, "publish", "draft", POST)
    _ = service.events.do_action(EVENT_STATUS_TRANSITION, "publish", "publish", POST)

    assert triggers.gate.is_done
    assert emitted == [str(cache_root)]
    assert list(cache_root.iterdir()) == []
    triggers.unregister()


def test_units_of_work_get_fresh_gates(service: CachePurgeService) -> None:
    first = service.start_unit_of_work()
    first.unregister()
    second = service.start_unit_of_work()
    second.unregister()

    assert first.gate is not second.gate


def test_auto_purge_disabled_registers_nothing(service: CachePurgeService) -> None:
    service.set_auto_purge(False)

    triggers = service.start_unit_of_work()

    assert triggers.subscriptions == []


def test_purge_now_and_check(service: CachePurgeService, cache_root: Path) -> None:
    assert service.check() is None

    result = service.purge_now()

    assert result.purged
    assert result.cache_path == str(cache_root)


def test_check_reports_unconfigured() -> None:
    svc = CachePurgeService(
        settings=MemorySettingsStore(),
        snapshots=MemoryStatsSnapshotStore(),
    )

    error = svc.check()

    assert error is not None
    assert error.kind is PurgeErrorKind.UNCONFIGURED


def test_statistics_snapshot_invalidated_by_purge(service: CachePurgeService, cache_root: Path) -> None:
    before = service.cache_statistics()
    assert before.file_count == 3
    assert service.snapshots.get(str(cache_root)) is not None

    assert service.purge_now().purged

    assert service.snapshots.get(str(cache_root)) is None
    assert service.cache_statistics().file_count == 0


def test_cached_statistics_reuse_snapshot(service: CachePurgeService, cache_root: Path) -> None:
    first = service.cache_statistics()
    _ = (cache_root / "0123456789abcdef0123456789abcdef").write_bytes(b"new")

    cached = service.cache_statistics(use_snapshot=True)
    fresh = service.cache_statistics()

    assert cached.file_count == first.file_count
    assert fresh.file_count == first.file_count + 1


def test_set_cache_path_sanitizes_and_rejects_traversal(service: CachePurgeService, cache_root: Path) -> None:
    reports: list[str] = []

    stored = service.set_cache_path(f"{cache_root}///", report=lambda code, _msg: reports.append(code))
    rejected = service.set_cache_path("/var/../etc", report=lambda code, _msg: reports.append(code))

    assert stored == str(cache_root)
    assert rejected == str(cache_root)
    assert reports == ["invalid_path"]
    assert service.configuration().cache_path == str(cache_root)


def test_simulate_transition_with_exclusions(service: CachePurgeService) -> None:
    outcome = service.simulate_transition(
        "publish",
        "draft",
        ContentItem(id=2, content_type="product"),
        excluded_types=["product"],
    )

    assert outcome.verdict.should_purge is False
    assert outcome.verdict.reason == "excluded_type"
    assert outcome.result is None
    assert not service.events.has_filter("excluded_content_types")
    assert not service.events.has_action(EVENT_STATUS_TRANSITION)


def test_simulate_transition_purges(service: CachePurgeService) -> None:
    outcome = service.simulate_transition("trash", "publish", POST)

    assert outcome.verdict.should_purge is True
    assert outcome.result is not None
    assert outcome.result.purged


def test_simulate_transition_dispatches_through_event_bus(service: CachePurgeService) -> None:
    """Other subscribers of the status event see the simulated change too."""

    seen: list[tuple[str, str]] = []

    def observer(new_status: str, old_status: str, _item: ContentItem | None) -> None:
        seen.append((new_status, old_status))

    service.events.add_action(EVENT_STATUS_TRANSITION, observer, 20)

    outcome = service.simulate_transition("publish", "draft", POST)

    assert seen == [("publish", "draft")]
    assert outcome.result is not None
    assert outcome.result.purged


def test_simulate_transition_with_auto_purge_off(service: CachePurgeService, cache_root: Path) -> None:
    service.set_auto_purge(False)

    outcome = service.simulate_transition("publish", "draft", POST)

    assert outcome.verdict.should_purge is True
    assert outcome.result is None
    assert any(cache_root.iterdir())


def test_injected_collaborators_are_used() -> None:
    events = HookRegistry()
    settings = MemorySettingsStore({"cache_path": ""})
    snapshots = MemoryStatsSnapshotStore()

    svc = CachePurgeService(settings=settings, events=events, snapshots=snapshots)

    assert svc.settings is settings
    assert svc.events is events
    assert svc.snapshots is snapshots
    assert svc.purger.purge(PurgeGate()).failed


def test_reset_restores_defaults(service: CachePurgeService) -> None:
    removed = service.reset()

    assert "cache_path" in removed
    assert service.configuration().cache_path == ""
    assert service.configuration().auto_purge is True
