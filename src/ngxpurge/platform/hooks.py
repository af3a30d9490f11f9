"""
Summary: In-process action/filter registry used as the ngxpurge event bus.
Why: Give triggers, filters and observers a narrow subscribe/emit/filter contract.
"""

from __future__ import annotations

import itertools
from collections import defaultdict
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, final

from ngxpurge.platform.logging import logger

DEFAULT_PRIORITY = 10

Callback = Callable[..., Any]


@dataclass(slots=True, order=True)
class _Registration:
    priority: int
    sequence: int
    callback: Callback = field(compare=False)


@final
class HookRegistry:
    """Named actions and filters dispatched in priority order.

    Lower priorities run first; callbacks sharing a priority run in the
    order they were registered.
    """

    def __init__(self) -> None:
        self._actions: defaultdict[str, list[_Registration]] = defaultdict(list)
        self._filters: defaultdict[str, list[_Registration]] = defaultdict(list)
        self._sequence = itertools.count()

    def add_action(self, name: str, callback: Callback, priority: int = DEFAULT_PRIORITY) -> None:
        """Subscribe ``callback`` to the ``name`` event."""

        self._register(self._actions, name, callback, priority)

    def remove_action(self, name: str, callback: Callback) -> bool:
        """Unsubscribe ``callback``; returns whether it was registered."""

        return self._unregister(self._actions, name, callback)

    def has_action(self, name: str) -> bool:
        return bool(self._actions.get(name))

    def do_action(self, name: str, *args: Any) -> int:
        """Invoke every callback subscribed to ``name``; returns the call count."""

        registrations = sorted(self._actions.get(name, []))
        for registration in registrations:
            registration.callback(*args)
        if registrations:
            logger.debug("Dispatched %s to %d callback(s)", name, len(registrations))
        return len(registrations)

    def add_filter(self, name: str, callback: Callback, priority: int = DEFAULT_PRIORITY) -> None:
        """Register ``callback`` to transform values passed through ``name``."""

        self._register(self._filters, name, callback, priority)

    def remove_filter(self, name: str, callback: Callback) -> bool:
        return self._unregister(self._filters, name, callback)

    def has_filter(self, name: str) -> bool:
        return bool(self._filters.get(name))

    def apply_filters(self, name: str, value: Any, *args: Any) -> Any:
        """Thread ``value`` through each filter callback; extra args are context."""

        for registration in sorted(self._filters.get(name, [])):
            value = registration.callback(value, *args)
        return value

    def _register(
        self,
        table: defaultdict[str, list[_Registration]],
        name: str,
        callback: Callback,
        priority: int,
    ) -> None:
        table[name].append(_Registration(priority, next(self._sequence), callback))

    @staticmethod
    def _unregister(
        table: defaultdict[str, list[_Registration]],
        name: str,
        callback: Callback,
    ) -> bool:
        registrations = table.get(name)
        if not registrations:
            return False
        kept = [item for item in registrations if item.callback != callback]
        removed = len(kept) != len(registrations)
        table[name] = kept
        return removed


__all__ = ["Callback", "DEFAULT_PRIORITY", "HookRegistry"]
