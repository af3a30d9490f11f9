"""Pure purge logic: data model, decision engine, validator and sanitizer."""

from .decision import INTERNAL_CONTENT_TYPES, PurgeVerdict, decide, should_purge
from .models import (
    CacheConfiguration,
    CacheDirectoryListing,
    CacheEntry,
    CachePathError,
    ContentItem,
    EntryKind,
    PostStatusTransition,
    PurgeError,
    PurgeErrorKind,
    PurgeGate,
    PurgeResult,
    PurgeStatus,
)
from .sanitizer import sanitize_cache_path
from .validator import is_cache_key_name, is_nginx_cache_listing

__all__ = [
    "CacheConfiguration",
    "CacheDirectoryListing",
    "CacheEntry",
    "CachePathError",
    "ContentItem",
    "EntryKind",
    "INTERNAL_CONTENT_TYPES",
    "PostStatusTransition",
    "PurgeError",
    "PurgeErrorKind",
    "PurgeGate",
    "PurgeResult",
    "PurgeStatus",
    "PurgeVerdict",
    "decide",
    "is_cache_key_name",
    "is_nginx_cache_listing",
    "sanitize_cache_path",
    "should_purge",
]
