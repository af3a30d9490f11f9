"""Diagnostic HTML comment appended to rendered frontend pages."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Final

from ..domain.models import CacheConfiguration

FOOTER_LINES: Final[tuple[str, ...]] = (
    "Performance optimized by ngxpurge",
    "Nginx cache purged automatically on content changes",
)

CACHE_STATUS_HEADER: Final[str] = "fastcgi-cache"

Headers = Mapping[str, str] | Iterable[tuple[str, str]]


@dataclass(slots=True, frozen=True)
class RequestContext:
    """Flags describing the request a page is rendered for."""

    is_admin: bool = False
    is_ajax: bool = False
    is_cron: bool = False
    is_rest: bool = False
    is_xmlrpc: bool = False

    @property
    def is_frontend(self) -> bool:
        return not (self.is_admin or self.is_ajax or self.is_cron or self.is_rest or self.is_xmlrpc)


def _header_items(headers: Headers) -> list[tuple[str, str]]:
    items = headers.items() if isinstance(headers, Mapping) else headers
    return [(str(name).strip().lower(), str(value).strip()) for name, value in items]


def render_footer_comment() -> str:
    """Return the fixed attribution comment."""

    return "\n<!--\n" + "\n".join(FOOTER_LINES) + "\n-->\n"


def is_html_response(headers: Headers) -> bool:
    """An absent Content-Type counts as HTML."""

    for name, value in _header_items(headers):
        if name == "content-type":
            return "text/html" in value.lower()
    return True


def cache_status(headers: Headers) -> str:
    """Return the Nginx cache status (HIT, MISS, BYPASS...) or ``UNKNOWN``."""

    for name, value in _header_items(headers):
        if name == CACHE_STATUS_HEADER and value:
            return value.upper()
    return "UNKNOWN"


def append_footer(
    body: str,
    config: CacheConfiguration,
    headers: Headers = (),
    context: RequestContext | None = None,
) -> str:
    """Append the footer comment to ``body`` when it is a frontend HTML page."""

    context = context or RequestContext()
    if not config.show_stats_footer or not context.is_frontend:
        return body
    if not is_html_response(headers):
        return body
    return body + render_footer_comment()


__all__ = [
    "FOOTER_LINES",
    "RequestContext",
    "append_footer",
    "cache_status",
    "is_html_response",
    "render_footer_comment",
]
