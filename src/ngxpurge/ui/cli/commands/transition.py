"""Transition command implementation for the CLI."""

from __future__ import annotations

from typing import final

from ngxpurge.application.services.purge_service import CachePurgeService, TransitionOutcome
from ngxpurge.features.purge import ContentItem
from ngxpurge.ui.cli.args.options import TransitionArgs
from ngxpurge.ui.cli.commands.base import ServiceCommand
from ngxpurge.ui.cli.display.purge_result import PurgeResultDisplay


@final
class TransitionCommand(ServiceCommand[TransitionArgs]):
    """Feed a status change through the decision engine and purge when visible."""

    def run(self, service: CachePurgeService) -> TransitionOutcome:
        item = None
        if not self.args.no_item:
            item = ContentItem(
                id=self.args.content_id,
                content_type=self.args.content_type,
                is_revision=self.args.is_revision,
                is_autosave=self.args.is_autosave,
            )

        outcome = service.simulate_transition(
            self.args.new_status,
            self.args.old_status,
            item,
            excluded_types=self.args.excluded_types,
        )
        PurgeResultDisplay(self.console).show_transition(outcome, quiet=self.args.quiet)
        return outcome
