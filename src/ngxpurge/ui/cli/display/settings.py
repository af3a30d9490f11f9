"""Display utilities for the settings document."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any, final

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from ngxpurge.config.config import ALL_OPTIONS


@final
class SettingsDisplay:
    """Render stored options, marking the unset ones."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def show_settings(self, options: Mapping[str, Any], path: Path | None = None) -> None:
        table = Table(
            title="ngxpurge settings",
            caption=str(path) if path is not None else None,
            show_header=True,
            header_style="bold magenta",
            box=box.SIMPLE_HEAD,
        )
        table.add_column("Option", style="bold")
        table.add_column("Value")

        for key in ALL_OPTIONS:
            table.add_row(key, self._format_value(options.get(key)))
        for key in sorted(k for k in options if k not in ALL_OPTIONS):
            table.add_row(Text(key, style="dim"), self._format_value(options[key]))

        self.console.print(table)

    @staticmethod
    def _format_value(value: Any) -> Text:
        if value is None or value == "":
            return Text("unset", style="dim")
        if isinstance(value, bool):
            return Text("on" if value else "off", style="green" if value else "yellow")
        return Text(str(value))
