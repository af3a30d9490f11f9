"""In-memory settings store for embedding and tests."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, final

from ngxpurge.shared.text import parse_bool, safe_text

from ...usecases.ports import SettingsStore


@final
class MemorySettingsStore(SettingsStore):
    """Dictionary-backed options store with the same coercion rules as the TOML store."""

    def __init__(self, initial: Mapping[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = dict(initial or {})

    def get_string(self, key: str, default: str = "") -> str:
        value = self._data.get(key)
        if value is None:
            return default
        return safe_text(value)

    def get_bool(self, key: str, default: bool = False) -> bool:
        return parse_bool(self._data.get(key), default)

    def set(self, key: str, value: str | bool | int) -> None:
        self._data[key] = value

    def add(self, key: str, value: str | bool | int) -> bool:
        if key in self._data:
            return False
        self._data[key] = value
        return True

    def delete(self, key: str) -> bool:
        return self._data.pop(key, None) is not None

    def as_dict(self) -> dict[str, Any]:
        return dict(self._data)


__all__ = ["MemorySettingsStore"]
