"""src/ngxpurge/ui/cli/commands/base.py
What: Provide shared wiring for CLI commands backed by the purge service.
Why: Every command needs the same service construction and console handling.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from pathlib import Path
from typing import Any, Generic, TypeVar

from rich.console import Console

from ngxpurge.application.services.purge_service import CachePurgeService

ArgsT = TypeVar("ArgsT")

ServiceFactory = Callable[[Path | None], CachePurgeService]


def default_service_factory(config_path: Path | None) -> CachePurgeService:
    return CachePurgeService(config_path=config_path)


class ServiceCommand(ABC, Generic[ArgsT]):
    """Base class for commands that run against ``CachePurgeService``."""

    args: ArgsT
    console: Console

    def __init__(
        self,
        args: ArgsT,
        *,
        service_factory: ServiceFactory | None = None,
        console: Console | None = None,
    ) -> None:
        self.args = args
        self.console = console or Console()
        self._service_factory = service_factory or default_service_factory

    def execute(self) -> Any:
        """Build the service, seed default options and run the command."""

        service = self._service_factory(getattr(self.args, "config_path", None))
        try:
            _ = service.activate()
            return self.run(service)
        finally:
            service.close()

    @abstractmethod
    def run(self, service: CachePurgeService) -> Any:
        """Run the command against a ready service."""
        pass
