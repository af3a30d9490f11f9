"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import final

from ngxpurge.config.config import OPTION_LOG_FILE, TomlSettingsStore
from ngxpurge.platform.logging import DEFAULT_LOG_FILE, logger, setup_logger
from ngxpurge.ui.cli.args.options import (
    CheckArgs,
    CLIArgs,
    ConfigArgs,
    FooterArgs,
    PurgeArgs,
    StatsArgs,
    TransitionArgs,
)

TOGGLE_CHOICES: tuple[str, ...] = ("on", "off")


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        common = argparse.ArgumentParser(add_help=False)
        _ = common.add_argument(
            "--config",
            type=str,
            dest="config_path",
            metavar="CONFIG_FILE",
            help="Settings file to use (defaults to config/ngxpurge.toml)",
        )
        _ = common.add_argument(
            "--verbose",
            action="store_true",
            help="Show detailed information",
        )
        _ = common.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )

        parser = argparse.ArgumentParser(
            description="ngxpurge - Purge the Nginx FastCGI/proxy cache when content changes.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        subparsers = parser.add_subparsers(dest="command", required=True)

        _ = subparsers.add_parser(
            "purge",
            parents=[common],
            help="Validate the configured cache directory and wipe it now",
        )
        _ = subparsers.add_parser(
            "check",
            parents=[common],
            help="Validate the configured cache directory without purging",
        )

        stats_parser = subparsers.add_parser(
            "stats",
            parents=[common],
            help="Show file count and total size of the cache directory",
        )
        _ = stats_parser.add_argument(
            "--cached",
            action="store_true",
            help="Reuse the last stored snapshot instead of rescanning",
        )

        config_parser = subparsers.add_parser(
            "config",
            parents=[common],
            help="Inspect or change ngxpurge settings",
        )
        ArgumentParser._configure_config_parser(config_parser)

        transition_parser = subparsers.add_parser(
            "transition",
            parents=[common],
            help="Report a content status change and purge when it is visible",
        )
        ArgumentParser._configure_transition_parser(transition_parser)

        footer_parser = subparsers.add_parser(
            "footer",
            parents=[common],
            help="Append the diagnostic footer to an HTML page",
        )
        _ = footer_parser.add_argument(
            "--input",
            type=str,
            dest="input_path",
            metavar="HTML_FILE",
            help="HTML document to decorate (defaults to stdin)",
        )
        _ = footer_parser.add_argument(
            "--content-type",
            type=str,
            help="Content-Type header of the response",
        )
        _ = footer_parser.add_argument(
            "--cache-header",
            type=str,
            help="Value of the fastcgi-cache response header",
        )

        return parser

    @staticmethod
    def _configure_config_parser(parser: argparse.ArgumentParser) -> None:
        actions = parser.add_subparsers(dest="action", required=True)

        _ = actions.add_parser("show", help="Print current settings")

        set_path = actions.add_parser(
            "set-path",
            help="Store a new cache directory path",
        )
        _ = set_path.add_argument("value", type=str, metavar="CACHE_PATH")

        auto_purge = actions.add_parser(
            "auto-purge",
            help="Enable or disable purging on content changes",
        )
        _ = auto_purge.add_argument("toggle", choices=TOGGLE_CHOICES)

        footer = actions.add_parser(
            "footer",
            help="Enable or disable the HTML footer comment",
        )
        _ = footer.add_argument("toggle", choices=TOGGLE_CHOICES)

        _ = actions.add_parser(
            "reset",
            help="Remove every ngxpurge setting and stored snapshot",
        )

    @staticmethod
    def _configure_transition_parser(parser: argparse.ArgumentParser) -> None:
        _ = parser.add_argument("new_status", type=str, metavar="NEW_STATUS")
        _ = parser.add_argument("old_status", type=str, metavar="OLD_STATUS")
        _ = parser.add_argument(
            "--type",
            type=str,
            dest="content_type",
            default="post",
            help="Content type of the item (default: post)",
        )
        _ = parser.add_argument(
            "--id",
            type=int,
            dest="content_id",
            default=1,
            help="Identifier of the item",
        )
        _ = parser.add_argument(
            "--revision",
            action="store_true",
            help="Mark the item as a revision",
        )
        _ = parser.add_argument(
            "--autosave",
            action="store_true",
            help="Mark the item as an autosave",
        )
        _ = parser.add_argument(
            "--no-item",
            action="store_true",
            help="Report the transition without a content item",
        )
        _ = parser.add_argument(
            "--exclude",
            action="append",
            default=[],
            metavar="TYPE",
            help="Content type to exclude from purging (repeatable)",
        )

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.

        Raises:
            SystemExit: If validation fails.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        is_quiet = bool(getattr(parsed_args, "quiet", False))
        is_verbose = bool(getattr(parsed_args, "verbose", False))

        if is_quiet:
            log_level = logging.ERROR
        elif is_verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        config_path = Path(parsed_args.config_path) if parsed_args.config_path else None
        configured_log_file = TomlSettingsStore(config_path).get_string(OPTION_LOG_FILE, "")
        log_file_path = Path(configured_log_file) if configured_log_file else DEFAULT_LOG_FILE
        _ = setup_logger(log_file=log_file_path, console_level=log_level)

        command: str = parsed_args.command
        common = {
            "config_path": config_path,
            "verbose": is_verbose,
            "quiet": is_quiet,
        }

        if command == "purge":
            return PurgeArgs(command="purge", **common)

        if command == "check":
            return CheckArgs(command="check", **common)

        if command == "stats":
            return StatsArgs(command="stats", use_snapshot=bool(parsed_args.cached), **common)

        if command == "config":
            return ArgumentParser._process_config(parsed_args, common)

        if command == "transition":
            return ArgumentParser._process_transition(parsed_args, common)

        if command == "footer":
            return ArgumentParser._process_footer(parsed_args, common)

        logger.error("Unsupported command: %s", command)
        sys.exit(2)

    @staticmethod
    def _process_config(parsed_args: argparse.Namespace, common: dict) -> ConfigArgs:
        action = parsed_args.action
        value = getattr(parsed_args, "value", None)
        toggle = getattr(parsed_args, "toggle", None)
        return ConfigArgs(
            command="config",
            action=action,
            value=value,
            enabled=None if toggle is None else toggle == "on",
            **common,
        )

    @staticmethod
    def _process_transition(parsed_args: argparse.Namespace, common: dict) -> TransitionArgs:
        if parsed_args.content_id <= 0:
            logger.error("Content id must be a positive integer; received %s", parsed_args.content_id)
            sys.exit(1)

        return TransitionArgs(
            command="transition",
            new_status=parsed_args.new_status,
            old_status=parsed_args.old_status,
            content_type=parsed_args.content_type,
            content_id=parsed_args.content_id,
            is_revision=parsed_args.revision,
            is_autosave=parsed_args.autosave,
            no_item=parsed_args.no_item,
            excluded_types=list(parsed_args.exclude),
            **common,
        )

    @staticmethod
    def _process_footer(parsed_args: argparse.Namespace, common: dict) -> FooterArgs:
        input_path = Path(parsed_args.input_path) if parsed_args.input_path else None
        if input_path is not None and not input_path.is_file():
            logger.error("Input file does not exist: %s", input_path)
            sys.exit(1)

        return FooterArgs(
            command="footer",
            input_path=input_path,
            content_type=parsed_args.content_type,
            cache_header=parsed_args.cache_header,
            **common,
        )
