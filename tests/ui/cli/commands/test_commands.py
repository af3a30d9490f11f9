"""Tests for CLI command implementations."""

from __future__ import annotations

import io
from collections.abc import Callable
from pathlib import Path

import pytest
from rich.console import Console

from ngxpurge.application.services.purge_service import CachePurgeService
from ngxpurge.features.purge import PurgeErrorKind
from ngxpurge.ui.cli.args.options import (
    CheckArgs,
    ConfigArgs,
    FooterArgs,
    PurgeArgs,
    StatsArgs,
    TransitionArgs,
)
from ngxpurge.ui.cli.commands import (
    CheckCommand,
    ConfigCommand,
    FooterCommand,
    PurgeCommand,
    StatsCommand,
    TransitionCommand,
)


@pytest.fixture
def config_path(tmp_path: Path) -> Path:
    return tmp_path / "ngxpurge.toml"


@pytest.fixture
def service_factory() -> Callable[[Path | None], CachePurgeService]:
    def _factory(path: Path | None) -> CachePurgeService:
        return CachePurgeService(config_path=path, db_path=":memory:")

    return _factory


@pytest.fixture
def console() -> Console:
    return Console(file=io.StringIO(), width=120, color_system=None)


def _output(console: Console) -> str:
    file = console.file
    assert isinstance(file, io.StringIO)
    return file.getvalue()


def _configure(config_path: Path, service_factory: Callable[[Path | None], CachePurgeService], cache_path: str) -> None:
    service = service_factory(config_path)
    service.settings.set("cache_path", cache_path)
    service.close()


def test_purge_command_wipes_cache(
    config_path: Path,
    cache_root: Path,
    service_factory: Callable[[Path | None], CachePurgeService],
    console: Console,
) -> None:
    _configure(config_path, service_factory, str(cache_root))
    args = PurgeArgs(command="purge", config_path=config_path, verbose=False, quiet=False)

    result = PurgeCommand(args, service_factory=service_factory, console=console).execute()

    assert result.purged
    assert list(cache_root.iterdir()) == []
    assert "Cache purged" in _output(console)


def test_purge_command_reports_failure(
    config_path: Path,
    service_factory: Callable[[Path | None], CachePurgeService],
    console: Console,
) -> None:
    args = PurgeArgs(command="purge", config_path=config_path, verbose=False, quiet=True)

    result = PurgeCommand(args, service_factory=service_factory, console=console).execute()

    assert result.failed
    assert "Cache path is not configured." in _output(console)


def test_check_command(
    config_path: Path,
    tmp_path: Path,
    service_factory: Callable[[Path | None], CachePurgeService],
    console: Console,
) -> None:
    _configure(config_path, service_factory, str(tmp_path / "missing"))
    args = CheckArgs(command="check", config_path=config_path, verbose=False, quiet=False)

    error = CheckCommand(args, service_factory=service_factory, console=console).execute()

    assert error is not None
    assert error.kind is PurgeErrorKind.PATH_NOT_FOUND
    assert "path_not_found" in _output(console)


def test_stats_command_renders_table(
    config_path: Path,
    cache_root: Path,
    service_factory: Callable[[Path | None], CachePurgeService],
    console: Console,
) -> None:
    _configure(config_path, service_factory, str(cache_root))
    args = StatsArgs(command="stats", config_path=config_path, verbose=False, quiet=False, use_snapshot=False)

    stats = StatsCommand(args, service_factory=service_factory, console=console).execute()

    output = _output(console)
    assert stats.file_count == 3
    assert "Cached files" in output
    assert "30 B" in output


def test_config_command_set_path_and_show(
    config_path: Path,
    service_factory: Callable[[Path | None], CachePurgeService],
    console: Console,
) -> None:
    set_args = ConfigArgs(
        command="config",
        config_path=config_path,
        verbose=False,
        quiet=False,
        action="set-path",
        value="/var/run/nginx-cache/",
    )
    show_args = ConfigArgs(command="config", config_path=config_path, verbose=False, quiet=False, action="show")

    assert ConfigCommand(set_args, service_factory=service_factory, console=console).execute() is True
    assert ConfigCommand(show_args, service_factory=service_factory, console=console).execute() is True

    output = _output(console)
    assert "cache_path set to /var/run/nginx-cache" in output
    assert "auto_purge" in output
    assert 'cache_path = "/var/run/nginx-cache"' in config_path.read_text(encoding="utf-8")


def test_config_command_rejects_traversal(
    config_path: Path,
    service_factory: Callable[[Path | None], CachePurgeService],
    console: Console,
) -> None:
    args = ConfigArgs(
        command="config",
        config_path=config_path,
        verbose=False,
        quiet=False,
        action="set-path",
        value="/var/../etc",
    )

    assert ConfigCommand(args, service_factory=service_factory, console=console).execute() is False
    assert "Directory traversal not allowed" in _output(console)


def test_config_command_toggles_and_reset(
    config_path: Path,
    service_factory: Callable[[Path | None], CachePurgeService],
    console: Console,
) -> None:
    toggle = ConfigArgs(
        command="config",
        config_path=config_path,
        verbose=False,
        quiet=True,
        action="auto-purge",
        enabled=False,
    )
    reset = ConfigArgs(command="config", config_path=config_path, verbose=False, quiet=True, action="reset")

    assert ConfigCommand(toggle, service_factory=service_factory, console=console).execute()
    assert "auto_purge = false" in config_path.read_text(encoding="utf-8")

    assert ConfigCommand(reset, service_factory=service_factory, console=console).execute()
    text = config_path.read_text(encoding="utf-8")
    assert "auto_purge = false" not in text
    assert "auto_purge = true" in text


def test_transition_command(
    config_path: Path,
    cache_root: Path,
    service_factory: Callable[[Path | None], CachePurgeService],
    console: Console,
) -> None:
    _configure(config_path, service_factory, str(cache_root))
    args = TransitionArgs(
        command="transition",
        config_path=config_path,
        verbose=False,
        quiet=False,
        new_status="publish",
        old_status="draft",
        content_type="post",
        content_id=1,
        is_revision=False,
        is_autosave=False,
        no_item=False,
    )

    outcome = TransitionCommand(args, service_factory=service_factory, console=console).execute()

    assert outcome.verdict.reason == "first_publish"
    assert outcome.result is not None and outcome.result.purged
    assert "Decision:" in _output(console)


def test_footer_command_appends_comment(
    config_path: Path,
    tmp_path: Path,
    service_factory: Callable[[Path | None], CachePurgeService],
    console: Console,
    capsys: pytest.CaptureFixture[str],
) -> None:
    page = tmp_path / "page.html"
    _ = page.write_text("<html></html>", encoding="utf-8")
    args = FooterArgs(
        command="footer",
        config_path=config_path,
        verbose=False,
        quiet=False,
        input_path=page,
        content_type="text/html",
        cache_header="MISS",
    )

    output = FooterCommand(args, service_factory=service_factory, console=console).execute()

    assert output.startswith("<html></html>\n<!--")
    assert capsys.readouterr().out == output
