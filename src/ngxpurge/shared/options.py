"""Option keys shared by the settings stores and the purge domain.

Both the TOML store and ``CacheConfiguration`` read these names, so they
live here rather than in either layer.
"""

from __future__ import annotations

from typing import Final

OPTION_CACHE_PATH: Final[str] = "cache_path"
OPTION_AUTO_PURGE: Final[str] = "auto_purge"
OPTION_SHOW_FOOTER: Final[str] = "show_footer"
OPTION_LOG_FILE: Final[str] = "log_file"

__all__ = [
    "OPTION_AUTO_PURGE",
    "OPTION_CACHE_PATH",
    "OPTION_LOG_FILE",
    "OPTION_SHOW_FOOTER",
]
