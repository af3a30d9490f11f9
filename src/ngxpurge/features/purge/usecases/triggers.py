"""
Summary: Bind platform events to the decision engine and the purge executor.
Why: Content changes purge through the decision engine; structural changes purge directly.
"""

from __future__ import annotations

from collections.abc import Iterable
from logging import Logger, getLogger
from typing import Any, Final, final

from ..domain.decision import PurgeVerdict, decide
from ..domain.models import CachePathError, ContentItem, PostStatusTransition, PurgeGate, PurgeResult
from .executor import CachePurger
from .ports import (
    EVENT_STATUS_TRANSITION,
    FILTER_EXCLUDED_TYPES,
    FILTER_OVERRIDE_SHOULD_PURGE,
    FILTER_PURGE_ACTIONS,
    EventBus,
)

# Site-wide changes that always purge. Comment activity is deliberately absent.
STRUCTURAL_EVENTS: Final[tuple[str, ...]] = (
    "switch_theme",
    "customize_save_after",
    "wp_update_nav_menu",
    "update_option_blogname",
    "update_option_blogdescription",
    "update_option_siteurl",
    "update_option_home",
    "update_option_sidebars_widgets",
)


def _as_names(value: Any) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Iterable):
        return [str(item) for item in value]
    return []


@final
class PurgeTriggers:
    """Subscribe purge handlers for one unit of work.

    Every handler shares the same ``PurgeGate``, so a menu update and a
    publish in the same request purge only once.
    """

    _purger: CachePurger
    _events: EventBus
    _gate: PurgeGate
    _logger: Logger

    def __init__(
        self,
        *,
        purger: CachePurger,
        events: EventBus,
        gate: PurgeGate | None = None,
        logger: Logger | None = None,
    ) -> None:
        self._purger = purger
        self._events = events
        self._gate = gate if gate is not None else PurgeGate()
        self._logger = logger or getLogger(__name__)
        self._subscriptions: list[str] = []
        self._last_verdict: PurgeVerdict | None = None
        self._last_result: PurgeResult | None = None

    @property
    def gate(self) -> PurgeGate:
        return self._gate

    @property
    def subscriptions(self) -> list[str]:
        return list(self._subscriptions)

    @property
    def last_verdict(self) -> PurgeVerdict | None:
        """Decision reached by the most recent status transition handled."""

        return self._last_verdict

    @property
    def last_result(self) -> PurgeResult | None:
        return self._last_result

    def register(self) -> list[str]:
        """Subscribe handlers when auto-purge is enabled; returns event names."""

        if self._subscriptions:
            return self.subscriptions

        try:
            config = self._purger.current_configuration()
        except CachePathError as exc:
            self._logger.warning("No triggers registered: %s", exc.message)
            return []

        if not config.auto_purge:
            self._logger.debug("Auto purge disabled; no triggers registered")
            return []

        self._events.add_action(EVENT_STATUS_TRANSITION, self.handle_status_transition)
        self._subscriptions.append(EVENT_STATUS_TRANSITION)

        structural = _as_names(
            self._events.apply_filters(FILTER_PURGE_ACTIONS, list(STRUCTURAL_EVENTS))
        )
        for name in structural:
            self._events.add_action(name, self.handle_structural_change)
            self._subscriptions.append(name)

        self._logger.debug("Registered purge triggers: %s", ", ".join(self._subscriptions))
        return self.subscriptions

    def unregister(self) -> None:
        for name in self._subscriptions:
            if name == EVENT_STATUS_TRANSITION:
                _ = self._events.remove_action(name, self.handle_status_transition)
            else:
                _ = self._events.remove_action(name, self.handle_structural_change)
        self._subscriptions.clear()

    def evaluate(self, transition: PostStatusTransition) -> PurgeVerdict:
        """Run the decision engine with the bus-provided exclusions and override."""

        excluded = set(_as_names(self._events.apply_filters(FILTER_EXCLUDED_TYPES, [])))

        def override(verdict: bool, context: PostStatusTransition) -> bool:
            return bool(
                self._events.apply_filters(FILTER_OVERRIDE_SHOULD_PURGE, verdict, context)
            )

        verdict = decide(transition, excluded, override)
        self._logger.debug(
            "Purge decision for %s: %s", transition, verdict.reason, extra={
                "purge_event": "purge.decision",
                "transition": str(transition),
                "verdict": verdict.should_purge,
            },
        )
        return verdict

    def handle_status_transition(
        self,
        new_status: str,
        old_status: str,
        content_item: ContentItem | None,
    ) -> PurgeResult | None:
        """Purge when the decision engine says a status change is visible."""

        transition = PostStatusTransition(
            new_status=new_status,
            old_status=old_status,
            content_item=content_item,
        )
        self._last_verdict = self.evaluate(transition)
        self._last_result = None
        if not self._last_verdict.should_purge:
            return None
        self._last_result = self._purger.purge(self._gate, context=transition)
        return self._last_result

    def handle_structural_change(self, *_args: Any) -> PurgeResult:
        """Purge unconditionally, once per unit of work."""

        self._last_result = self._purger.purge(self._gate)
        return self._last_result


__all__ = ["PurgeTriggers", "STRUCTURAL_EVENTS"]
