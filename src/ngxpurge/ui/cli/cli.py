"""Command line interface for ngxpurge."""

import sys
from typing import final

from ngxpurge.features.purge import PurgeResult
from ngxpurge.platform.logging import logger
from ngxpurge.ui.cli.args import ArgumentParser
from ngxpurge.ui.cli.args.options import (
    CheckArgs,
    CLIArgs,
    ConfigArgs,
    FooterArgs,
    PurgeArgs,
    StatsArgs,
    TransitionArgs,
)
from ngxpurge.ui.cli.commands import (
    CheckCommand,
    ConfigCommand,
    FooterCommand,
    PurgeCommand,
    StatsCommand,
    TransitionCommand,
)


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)
            if not CommandProcessor._run(args):
                sys.exit(1)

        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)

    @staticmethod
    def _run(args: CLIArgs) -> bool:
        """Dispatch to the matching command; returns False on failure."""

        if isinstance(args, PurgeArgs):
            return not PurgeCommand(args).execute().failed

        if isinstance(args, CheckArgs):
            return CheckCommand(args).execute() is None

        if isinstance(args, StatsArgs):
            _ = StatsCommand(args).execute()
            return True

        if isinstance(args, ConfigArgs):
            return ConfigCommand(args).execute()

        if isinstance(args, TransitionArgs):
            result: PurgeResult | None = TransitionCommand(args).execute().result
            return result is None or not result.failed

        assert isinstance(args, FooterArgs)
        _ = FooterCommand(args).execute()
        return True


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failures exit through
        ``sys.exit(...)`` inside command processing.
    """
    CommandProcessor.process_command()
    return 0
