"""Command line argument options."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal, final


@final
@dataclass(slots=True)
class PurgeArgs:
    """Command line arguments for the ``purge`` subcommand."""

    command: Literal["purge"]
    config_path: Path | None
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class CheckArgs:
    """Command line arguments for the ``check`` subcommand."""

    command: Literal["check"]
    config_path: Path | None
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class StatsArgs:
    """Command line arguments for the ``stats`` subcommand."""

    command: Literal["stats"]
    config_path: Path | None
    verbose: bool
    quiet: bool
    use_snapshot: bool


@final
@dataclass(slots=True)
class ConfigArgs:
    """Command line arguments for the ``config`` subcommand family."""

    command: Literal["config"]
    config_path: Path | None
    verbose: bool
    quiet: bool
    action: Literal["show", "set-path", "auto-purge", "footer", "reset"]
    value: str | None = None
    enabled: bool | None = None


@final
@dataclass(slots=True)
class TransitionArgs:
    """Command line arguments for the ``transition`` subcommand."""

    command: Literal["transition"]
    config_path: Path | None
    verbose: bool
    quiet: bool
    new_status: str
    old_status: str
    content_type: str
    content_id: int
    is_revision: bool
    is_autosave: bool
    no_item: bool
    excluded_types: list[str] = field(default_factory=list)


@final
@dataclass(slots=True)
class FooterArgs:
    """Command line arguments for the ``footer`` subcommand."""

    command: Literal["footer"]
    config_path: Path | None
    verbose: bool
    quiet: bool
    input_path: Path | None
    content_type: str | None
    cache_header: str | None


CLIArgs = PurgeArgs | CheckArgs | StatsArgs | ConfigArgs | TransitionArgs | FooterArgs

__all__ = [
    "CLIArgs",
    "CheckArgs",
    "ConfigArgs",
    "FooterArgs",
    "PurgeArgs",
    "StatsArgs",
    "TransitionArgs",
]
