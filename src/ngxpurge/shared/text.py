"""
Summary: Text normalisation helpers for values read from settings and the CLI.
Why: Keep "safe text" and boolean coercion rules identical for every caller.
"""

from __future__ import annotations

import re
from typing import Final

_CONTROL_CHARS: Final[re.Pattern[str]] = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]")
_TAGS: Final[re.Pattern[str]] = re.compile(r"<[^>]*>")
_WHITESPACE: Final[re.Pattern[str]] = re.compile(r"\s+")

_TRUE_WORDS: Final[frozenset[str]] = frozenset({"1", "true", "yes", "on"})
_FALSE_WORDS: Final[frozenset[str]] = frozenset({"0", "false", "no", "off", ""})


def safe_text(value: object) -> str:
    """Return ``value`` as single-line plain text.

    Control characters and markup tags are dropped, whitespace runs
    (including tabs and newlines) collapse to one space and both ends are
    trimmed.
    """

    text = "" if value is None else str(value)
    text = _CONTROL_CHARS.sub("", text)
    text = _TAGS.sub("", text)
    text = _WHITESPACE.sub(" ", text)
    return text.strip()


def parse_bool(value: object, default: bool = False) -> bool:
    """Coerce persisted or user-supplied values into a boolean.

    Integers follow truthiness; strings accept ``1/0``, ``true/false``,
    ``yes/no`` and ``on/off`` in any case. Anything else yields ``default``.
    """

    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value != 0
    if isinstance(value, str):
        normalized = value.strip().lower()
        if normalized in _TRUE_WORDS:
            return True
        if normalized in _FALSE_WORDS:
            return False
    return default


__all__ = ["parse_bool", "safe_text"]
