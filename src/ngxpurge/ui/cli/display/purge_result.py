"""Display utilities for purge, check and transition outcomes."""

from __future__ import annotations

from typing import Final, final

from rich.console import Console

from ngxpurge.application.services.purge_service import TransitionOutcome
from ngxpurge.features.purge import PurgeError, PurgeResult

SKIP_MESSAGES: Final[dict[str, str]] = {
    "already_purged": "Cache was already purged in this unit of work.",
    "attempt_gate_closed": "Purge attempt vetoed by a filter.",
}


@final
class PurgeResultDisplay:
    """Render purge outcomes in the CLI."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def show_result(self, result: PurgeResult, *, quiet: bool = False) -> None:
        """Print a one-line summary of a purge result plus any warnings."""

        if result.failed:
            message = result.error.message if result.error is not None else "unknown error"
            self.console.print(f"[red]Cache could not be purged. {message}[/red]")
        elif quiet:
            return
        elif result.purged:
            self.console.print(f"[green]Cache purged successfully.[/green] [dim]{result.cache_path}[/dim]")
        else:
            detail = SKIP_MESSAGES.get(result.reason or "", result.reason or "skipped")
            self.console.print(f"[yellow]Skipped: {detail}[/yellow]")

        if quiet:
            return
        for warning in result.warnings:
            self.console.print(f"[yellow]  • warning: {warning}[/yellow]")

    def show_check(self, error: PurgeError | None, cache_path: str, *, quiet: bool = False) -> None:
        """Print whether the configured cache path is ready for purging."""

        if error is not None:
            self.console.print(f"[red]{error.message}[/red] [dim]({error.kind.value})[/dim]")
            return
        if not quiet:
            self.console.print(f"[green]Cache directory is valid: {cache_path}[/green]")

    def show_transition(self, outcome: TransitionOutcome, *, quiet: bool = False) -> None:
        """Print the decision for a status change and the resulting purge."""

        verdict = outcome.verdict
        if not quiet:
            label = "[green]purge[/green]" if verdict.should_purge else "[yellow]no purge[/yellow]"
            suffix = f" (baseline: {verdict.baseline})" if verdict.overridden else ""
            self.console.print(f"Decision: {label} [dim]{verdict.reason}{suffix}[/dim]")
        if outcome.result is not None:
            self.show_result(outcome.result, quiet=quiet)
        elif verdict.should_purge and not quiet:
            self.console.print("[yellow]Auto purge is disabled; nothing was purged.[/yellow]")
