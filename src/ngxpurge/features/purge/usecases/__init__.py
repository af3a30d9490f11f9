"""Purge use cases: executor, trigger registrar, footer and ports."""

from .executor import CachePurger
from .footer import RequestContext, append_footer, cache_status, render_footer_comment
from .triggers import STRUCTURAL_EVENTS, PurgeTriggers

__all__ = [
    "CachePurger",
    "PurgeTriggers",
    "RequestContext",
    "STRUCTURAL_EVENTS",
    "append_footer",
    "cache_status",
    "render_footer_comment",
]
