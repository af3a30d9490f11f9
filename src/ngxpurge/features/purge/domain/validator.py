"""
Summary: Structural sniff test deciding whether a listing looks like an Nginx cache.
Why: Refuse to wipe directories such as "/" or a web root when the path is misconfigured.
"""

from __future__ import annotations

import re
from typing import Final

from .models import CacheDirectoryListing

# Nginx names cache entries after the MD5 of the cache key.
_CACHE_KEY_NAME: Final[re.Pattern[str]] = re.compile(r"[0-9a-fA-F]{32}")


def is_cache_key_name(name: str) -> bool:
    """Return whether ``name`` is exactly 32 hexadecimal characters."""

    return _CACHE_KEY_NAME.fullmatch(name) is not None


def is_nginx_cache_listing(listing: CacheDirectoryListing) -> bool:
    """Validate a recursive listing against the Nginx cache layout.

    Files carrying an extension (temp files, lock files) are tolerated;
    every other file must be named like a cache key. Directories are
    checked recursively and an empty listing is valid.
    """

    for entry in listing:
        if entry.is_file:
            if "." in entry.name:
                continue
            if not is_cache_key_name(entry.name):
                return False
        elif entry.is_directory and not is_nginx_cache_listing(entry.children):
            return False
    return True


__all__ = ["is_cache_key_name", "is_nginx_cache_listing"]
