"""Command line interface package."""

from ngxpurge.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
