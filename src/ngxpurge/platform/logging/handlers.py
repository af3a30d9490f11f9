"""Rich console handler with dedicated rendering for purge events."""

from __future__ import annotations

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class PurgeEventRichHandler(RichHandler):
    """Rich handler that renders structured purge events with icons.

    Records carrying a ``purge_event`` attribute (passed through ``extra``)
    are rendered as a single styled line; every other record falls back to
    the stock Rich rendering.
    """

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "purge.start": ("🧹", "cyan"),
        "purge.complete": ("✅", "green"),
        "purge.skipped": ("↪️", "yellow"),
        "purge.error": ("❌", "red"),
        "purge.decision": ("⚖️", "blue"),
        "stats.complete": ("📊", "magenta"),
    }
    _EVENT_LABELS: ClassVar[dict[str, str]] = {
        "purge.start": "Purging cache",
        "purge.complete": "Cache purged",
        "purge.skipped": "Purge skipped",
        "purge.error": "Purge failed",
        "purge.decision": "Purge decision",
        "stats.complete": "Statistics computed",
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 4

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = True
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    def _format_path(self, path: str) -> Text:
        """Render ``path`` keeping only its trailing segments."""

        pure_path = self._to_pure_path(path)
        separator = "\\" if isinstance(pure_path, PureWindowsPath) else "/"
        anchor = pure_path.anchor
        body_parts = [part for part in pure_path.parts if part and part != anchor]

        truncated = len(body_parts) > self._PATH_SEGMENT_LIMIT
        if truncated:
            body_parts = body_parts[-self._PATH_SEGMENT_LIMIT:]
            display = "…" + separator + separator.join(body_parts)
        else:
            display = anchor.rstrip("\\/") + separator + separator.join(body_parts) if anchor else separator.join(body_parts)

        text = Text()
        for char in display or ".":
            if char in {"/", "\\", "…"}:
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    @staticmethod
    def _to_pure_path(raw_path: str) -> PurePath:
        if "\\" in raw_path:
            return PureWindowsPath(raw_path)
        return PurePosixPath(raw_path)

    def _render_purge_event(self, record: logging.LogRecord) -> Text | None:
        """Render structured purge events with dedicated styling."""

        event = getattr(record, "purge_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        _ = body.append(self._EVENT_LABELS.get(event, event))

        cache_path = getattr(record, "cache_path", None)
        if cache_path:
            _ = body.append(" @ ")
            _ = body.append_text(self._format_path(str(cache_path)))

        details: list[str] = []
        if event == "purge.decision":
            transition = getattr(record, "transition", None)
            verdict = getattr(record, "verdict", None)
            if transition:
                details.append(str(transition))
            if isinstance(verdict, bool):
                details.append("purge" if verdict else "keep")
        elif event in {"purge.skipped", "purge.error"}:
            reason = getattr(record, "reason", None)
            if reason:
                details.append(str(reason))
        elif event == "stats.complete":
            file_count = getattr(record, "file_count", None)
            size_label = getattr(record, "size_label", None)
            if isinstance(file_count, int):
                details.append(f"files={file_count}")
            if size_label:
                details.append(f"size={size_label}")

        duration_ms = getattr(record, "duration_ms", None)
        if isinstance(duration_ms, (int, float)):
            details.append(f"{duration_ms:.2f} ms")
        if details:
            _ = body.append(" (" + ", ".join(details) + ")")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for purge events."""

        event_text = self._render_purge_event(record)
        if event_text is not None:
            return event_text
        return super().render_message(record, message)


__all__ = ["PurgeEventRichHandler"]
