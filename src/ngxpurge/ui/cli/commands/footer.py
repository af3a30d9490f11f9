"""Footer command implementation for the CLI."""

from __future__ import annotations

import sys
from typing import final

from ngxpurge.application.services.purge_service import CachePurgeService
from ngxpurge.features.purge.usecases.footer import append_footer, cache_status
from ngxpurge.platform.logging import logger
from ngxpurge.ui.cli.args.options import FooterArgs
from ngxpurge.ui.cli.commands.base import ServiceCommand


@final
class FooterCommand(ServiceCommand[FooterArgs]):
    """Write an HTML document to stdout with the footer comment appended."""

    def run(self, service: CachePurgeService) -> str:
        if self.args.input_path is not None:
            body = self.args.input_path.read_text(encoding="utf-8")
        else:
            body = sys.stdin.read()

        headers: list[tuple[str, str]] = []
        if self.args.content_type:
            headers.append(("Content-Type", self.args.content_type))
        if self.args.cache_header:
            headers.append(("fastcgi-cache", self.args.cache_header))

        logger.debug("Nginx cache status: %s", cache_status(headers))
        output = append_footer(body, service.configuration(), headers)
        _ = sys.stdout.write(output)
        return output
