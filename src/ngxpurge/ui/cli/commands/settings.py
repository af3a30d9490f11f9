"""src/ngxpurge/ui/cli/commands/settings.py
What: Implement the ``config`` subcommands.
Why: Route every settings write through the service so paths are sanitized.
"""

from __future__ import annotations

from typing import final

from ngxpurge.application.services.purge_service import CachePurgeService
from ngxpurge.config.config import TomlSettingsStore
from ngxpurge.ui.cli.args.options import ConfigArgs
from ngxpurge.ui.cli.commands.base import ServiceCommand
from ngxpurge.ui.cli.display.settings import SettingsDisplay


@final
class ConfigCommand(ServiceCommand[ConfigArgs]):
    """Inspect or change stored options; returns False when a value is rejected."""

    def run(self, service: CachePurgeService) -> bool:
        action = self.args.action

        if action == "show":
            self._show(service)
            return True

        if action == "set-path":
            return self._set_path(service, self.args.value or "")

        if action == "auto-purge":
            service.set_auto_purge(bool(self.args.enabled))
            self._confirm("auto_purge", bool(self.args.enabled))
            return True

        if action == "footer":
            service.set_show_footer(bool(self.args.enabled))
            self._confirm("show_footer", bool(self.args.enabled))
            return True

        removed = service.reset()
        if not self.args.quiet:
            self.console.print(f"[green]Settings reset to defaults ({len(removed)} option(s) removed).[/green]")
        return True

    def _show(self, service: CachePurgeService) -> None:
        settings = service.settings
        if isinstance(settings, TomlSettingsStore):
            SettingsDisplay(self.console).show_settings(settings.as_dict(), settings.path)
            return
        config = service.configuration()
        SettingsDisplay(self.console).show_settings(
            {
                "cache_path": config.cache_path,
                "auto_purge": config.auto_purge,
                "show_footer": config.show_stats_footer,
            }
        )

    def _set_path(self, service: CachePurgeService, raw: str) -> bool:
        rejected: list[str] = []

        def report(code: str, message: str) -> None:
            rejected.append(code)
            self.console.print(f"[red]{message}[/red]")

        stored = service.set_cache_path(raw, report=report)
        if rejected:
            return False
        if not self.args.quiet:
            shown = stored or "(cleared)"
            self.console.print(f"[green]cache_path set to {shown}[/green]")
        return True

    def _confirm(self, key: str, enabled: bool) -> None:
        if not self.args.quiet:
            self.console.print(f"[green]{key} turned {'on' if enabled else 'off'}[/green]")
