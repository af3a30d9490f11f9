"""Command line argument handling package."""

from ngxpurge.ui.cli.args.parser import ArgumentParser
from ngxpurge.ui.cli.args.options import (
    CheckArgs,
    CLIArgs,
    ConfigArgs,
    FooterArgs,
    PurgeArgs,
    StatsArgs,
    TransitionArgs,
)

__all__ = [
    "ArgumentParser",
    "CLIArgs",
    "CheckArgs",
    "ConfigArgs",
    "FooterArgs",
    "PurgeArgs",
    "StatsArgs",
    "TransitionArgs",
]
