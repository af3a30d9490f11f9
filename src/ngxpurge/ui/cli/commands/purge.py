"""Purge and check command implementations for the CLI."""

from __future__ import annotations

from typing import final

from ngxpurge.application.services.purge_service import CachePurgeService
from ngxpurge.features.purge import PurgeError, PurgeResult
from ngxpurge.ui.cli.args.options import CheckArgs, PurgeArgs
from ngxpurge.ui.cli.commands.base import ServiceCommand
from ngxpurge.ui.cli.display.purge_result import PurgeResultDisplay


@final
class PurgeCommand(ServiceCommand[PurgeArgs]):
    """Wipe the configured cache directory immediately."""

    def run(self, service: CachePurgeService) -> PurgeResult:
        result = service.purge_now()
        PurgeResultDisplay(self.console).show_result(result, quiet=self.args.quiet)
        return result


@final
class CheckCommand(ServiceCommand[CheckArgs]):
    """Report whether the configured cache directory could be purged."""

    def run(self, service: CachePurgeService) -> PurgeError | None:
        error = service.check()
        PurgeResultDisplay(self.console).show_check(
            error,
            service.configuration().cache_path,
            quiet=self.args.quiet,
        )
        return error
