"""Command execution package for CLI."""

from ngxpurge.ui.cli.commands.base import ServiceCommand
from ngxpurge.ui.cli.commands.footer import FooterCommand
from ngxpurge.ui.cli.commands.purge import CheckCommand, PurgeCommand
from ngxpurge.ui.cli.commands.settings import ConfigCommand
from ngxpurge.ui.cli.commands.stats import StatsCommand
from ngxpurge.ui.cli.commands.transition import TransitionCommand

__all__ = [
    "CheckCommand",
    "ConfigCommand",
    "FooterCommand",
    "PurgeCommand",
    "ServiceCommand",
    "StatsCommand",
    "TransitionCommand",
]
