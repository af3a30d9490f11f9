"""Small helpers shared across features without pulling in feature packages."""

from .options import OPTION_AUTO_PURGE, OPTION_CACHE_PATH, OPTION_LOG_FILE, OPTION_SHOW_FOOTER
from .text import parse_bool, safe_text

__all__ = [
    "OPTION_AUTO_PURGE",
    "OPTION_CACHE_PATH",
    "OPTION_LOG_FILE",
    "OPTION_SHOW_FOOTER",
    "parse_bool",
    "safe_text",
]
