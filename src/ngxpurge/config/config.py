"""Settings persistence for ngxpurge.

Options live in a small TOML document. The store re-reads the document on
every lookup so each unit of work observes the current values.
"""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any, Final, final

from ngxpurge.config.file_ops import write_text_file
from ngxpurge.config.paths import default_config_path
from ngxpurge.platform.logging import logger
from ngxpurge.shared.options import (
    OPTION_AUTO_PURGE,
    OPTION_CACHE_PATH,
    OPTION_LOG_FILE,
    OPTION_SHOW_FOOTER,
)
from ngxpurge.shared.text import parse_bool, safe_text

DEFAULT_OPTIONS: Final[dict[str, Any]] = {
    OPTION_CACHE_PATH: "",
    OPTION_AUTO_PURGE: True,
    OPTION_SHOW_FOOTER: True,
}

ALL_OPTIONS: Final[tuple[str, ...]] = (
    OPTION_CACHE_PATH,
    OPTION_AUTO_PURGE,
    OPTION_SHOW_FOOTER,
    OPTION_LOG_FILE,
)

_OPTION_GUIDANCE: Final[dict[str, tuple[str, ...]]] = {
    OPTION_CACHE_PATH: (
        "# Absolute path of the Nginx cache directory",
        "# (the fastcgi_cache_path or proxy_cache_path directive)",
        '# Example: cache_path = "/var/run/nginx-cache"',
    ),
    OPTION_AUTO_PURGE: (
        "# Purge the cache automatically when content changes",
        "# Comment submissions and moderation never trigger a purge",
    ),
    OPTION_SHOW_FOOTER: (
        "# Append an HTML comment footer to rendered pages",
    ),
    OPTION_LOG_FILE: (
        "# Log file path (optional)",
        '# Example: log_file = "/var/log/ngxpurge.log"',
    ),
}


@final
class TomlSettingsStore:
    """Key-value settings store persisted as a commented TOML file."""

    path: Path

    def __init__(self, path: Path | str | None = None) -> None:
        self.path = default_config_path(path)

    def get_string(self, key: str, default: str = "") -> str:
        """Return ``key`` as safe single-line text, or ``default`` when unset."""

        value = self._read().get(key)
        if value is None:
            return default
        return safe_text(value)

    def get_bool(self, key: str, default: bool = False) -> bool:
        """Return ``key`` coerced to a boolean, or ``default`` when unset."""

        return parse_bool(self._read().get(key), default)

    def set(self, key: str, value: str | bool | int) -> None:
        """Persist ``value`` under ``key``."""

        data = self._read()
        data[key] = value
        self._save(data)
        logger.debug("Option %s updated in %s", key, self.path)

    def add(self, key: str, value: str | bool | int) -> bool:
        """Persist ``value`` only when ``key`` is not already present."""

        data = self._read()
        if key in data:
            return False
        data[key] = value
        self._save(data)
        return True

    def delete(self, key: str) -> bool:
        """Remove ``key``; returns whether it existed."""

        data = self._read()
        if key not in data:
            return False
        del data[key]
        self._save(data)
        return True

    def as_dict(self) -> dict[str, Any]:
        """Return a copy of every persisted option."""

        return dict(self._read())

    def _read(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "rb") as f:
                return tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.error("Failed to load settings from %s: %s", self.path, e)
            raise

    def _save(self, data: dict[str, Any]) -> None:
        try:
            write_text_file(self.path, self._render_toml(data))
        except OSError as e:
            logger.error("Failed to save settings: %s", e)
            raise

    def _render_toml(self, data: dict[str, Any]) -> str:
        """Render settings as TOML with inline guidance."""

        lines: list[str] = ["# ngxpurge settings", ""]

        for key in ALL_OPTIONS:
            lines.extend(_OPTION_GUIDANCE[key])
            if key in data and data[key] is not None:
                lines.append(f"{key} = {self._format_toml_value(data[key])}")
            elif key in DEFAULT_OPTIONS:
                lines.append(f"# {key} = {self._format_toml_value(DEFAULT_OPTIONS[key])}")
            lines.append("")

        extra_keys = sorted(key for key in data if key not in ALL_OPTIONS)
        if extra_keys:
            lines.append("# Additional options")
            for key in extra_keys:
                if data[key] is not None:
                    lines.append(f"{key} = {self._format_toml_value(data[key])}")
            lines.append("")

        return "\n".join(lines)

    @staticmethod
    def _format_toml_value(value: Any) -> str:
        """Format a value for TOML serialization.

        Args:
            value: Value to format

        Returns:
            str: Formatted value
        """
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, int):
            return str(value)
        text = (
            str(value)
            .replace("\\", "\\\\")
            .replace('"', '\\"')
            .replace("\n", "\\n")
            .replace("\t", "\\t")
        )
        return f'"{text}"'


__all__ = [
    "ALL_OPTIONS",
    "DEFAULT_OPTIONS",
    "OPTION_AUTO_PURGE",
    "OPTION_CACHE_PATH",
    "OPTION_LOG_FILE",
    "OPTION_SHOW_FOOTER",
    "TomlSettingsStore",
]
