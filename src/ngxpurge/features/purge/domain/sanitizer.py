"""
Summary: Normalise operator-supplied cache paths and reject traversal attempts.
Why: The sanitized path is later wiped recursively, so it must never climb out of its tree.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Final

from ngxpurge.platform.logging import logger
from ngxpurge.shared.text import safe_text

INVALID_PATH_CODE: Final[str] = "invalid_path"
TRAVERSAL_MESSAGE: Final[str] = "Invalid path: Directory traversal not allowed."

ErrorReporter = Callable[[str, str], None]


def _log_validation_error(code: str, message: str) -> None:
    logger.warning("%s (%s)", message, code)


def sanitize_cache_path(
    raw: object,
    previous_valid: str,
    *,
    report: ErrorReporter | None = None,
) -> str:
    """Return a normalised cache path, or ``previous_valid`` on traversal.

    NUL bytes and control characters are removed, whitespace is collapsed,
    backslashes become forward slashes and trailing slashes are dropped.
    Any ``..`` in the result rejects the value: ``report`` is told why and
    the previously stored path is returned unchanged.
    """

    path = str(raw if raw is not None else "").replace("\0", "")
    path = safe_text(path)
    path = path.replace("\\", "/")
    path = path.rstrip("/ ")

    if ".." in path:
        (report or _log_validation_error)(INVALID_PATH_CODE, TRAVERSAL_MESSAGE)
        return previous_valid

    return path


__all__ = ["ErrorReporter", "INVALID_PATH_CODE", "TRAVERSAL_MESSAGE", "sanitize_cache_path"]
