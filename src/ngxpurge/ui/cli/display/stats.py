"""
Summary: Rich table rendering for cache statistics.
Why: Keep formatting concerns out of the stats command.
"""

from __future__ import annotations

from typing import final

from rich import box
from rich.console import Console
from rich.table import Table

from ngxpurge.features.stats import CacheStatistics, format_bytes


@final
class StatsDisplay:
    """Render ``CacheStatistics`` as a two-column table."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def show_stats(self, stats: CacheStatistics, *, from_snapshot: bool = False) -> None:
        if not stats.cache_path:
            self.console.print("[yellow]Cache path is not configured.[/yellow]")
            return

        table = Table(
            title="Nginx Cache Statistics",
            show_header=False,
            box=box.SIMPLE_HEAD,
        )
        table.add_column("Field", style="bold")
        table.add_column("Value")
        table.add_row("Cache path", stats.cache_path)
        table.add_row("Cached files", f"{stats.file_count:,}")
        table.add_row("Total size", format_bytes(stats.total_size_bytes))
        source = "snapshot" if from_snapshot else "scan"
        table.add_row("Last update", f"{stats.last_update} [dim]({source})[/dim]")
        self.console.print(table)
