"""Public surface for the purge feature."""

from .domain import (
    CacheConfiguration,
    CacheEntry,
    CachePathError,
    ContentItem,
    PostStatusTransition,
    PurgeError,
    PurgeErrorKind,
    PurgeGate,
    PurgeResult,
    PurgeStatus,
    PurgeVerdict,
    decide,
    is_nginx_cache_listing,
    sanitize_cache_path,
    should_purge,
)
from .usecases import CachePurger, PurgeTriggers

__all__ = [
    "CacheConfiguration",
    "CacheEntry",
    "CachePathError",
    "CachePurger",
    "ContentItem",
    "PostStatusTransition",
    "PurgeError",
    "PurgeErrorKind",
    "PurgeGate",
    "PurgeResult",
    "PurgeStatus",
    "PurgeTriggers",
    "PurgeVerdict",
    "decide",
    "is_nginx_cache_listing",
    "sanitize_cache_path",
    "should_purge",
]
