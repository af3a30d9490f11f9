"""Stats command implementation for the CLI."""

from __future__ import annotations

from typing import final

from ngxpurge.application.services.purge_service import CachePurgeService
from ngxpurge.features.stats import CacheStatistics
from ngxpurge.ui.cli.args.options import StatsArgs
from ngxpurge.ui.cli.commands.base import ServiceCommand
from ngxpurge.ui.cli.display.stats import StatsDisplay


@final
class StatsCommand(ServiceCommand[StatsArgs]):
    """Show the file count and size of the cache directory."""

    def run(self, service: CachePurgeService) -> CacheStatistics:
        stats = service.cache_statistics(use_snapshot=self.args.use_snapshot)
        if not self.args.quiet:
            StatsDisplay(self.console).show_stats(stats, from_snapshot=self.args.use_snapshot)
        return stats
