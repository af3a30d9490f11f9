"""Statistics value objects and formatting."""

from .models import CacheStatistics
from .units import format_bytes

__all__ = ["CacheStatistics", "format_bytes"]
