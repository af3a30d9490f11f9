"""Display management for CLI interface."""

from ngxpurge.ui.cli.display.purge_result import PurgeResultDisplay
from ngxpurge.ui.cli.display.settings import SettingsDisplay
from ngxpurge.ui.cli.display.stats import StatsDisplay

__all__ = ["PurgeResultDisplay", "SettingsDisplay", "StatsDisplay"]
