"""Human-readable byte sizes."""

from __future__ import annotations

from typing import Final

UNITS: Final[tuple[str, ...]] = ("B", "KB", "MB", "GB", "TB")


def format_bytes(size: int) -> str:
    """Render ``size`` with binary units rounded to two decimals.

    Examples: ``0`` -> ``"0 B"``, ``1536`` -> ``"1.5 KB"``,
    ``1073741824`` -> ``"1 GB"``. Sizes beyond the TB range stay in TB.
    """

    if size <= 0:
        return "0 B"

    value = float(size)
    index = 0
    while value >= 1024 and index < len(UNITS) - 1:
        value /= 1024
        index += 1

    number = f"{round(value, 2):.2f}".rstrip("0").rstrip(".")
    return f"{number} {UNITS[index]}"


__all__ = ["UNITS", "format_bytes"]
