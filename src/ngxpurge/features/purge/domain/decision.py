"""
Summary: Pure classifier deciding whether a content status change warrants a full purge.
Why: Filter out revisions, autosaves and internal types so the cache is not flushed needlessly.
"""

from __future__ import annotations

from collections.abc import Callable, Collection
from dataclasses import dataclass
from typing import Final

from .models import PostStatusTransition

PUBLISH: Final[str] = "publish"
TRASH: Final[str] = "trash"

# Platform-internal content types that never render on the frontend.
INTERNAL_CONTENT_TYPES: Final[frozenset[str]] = frozenset(
    {
        "revision",
        "nav_menu_item",
        "customize_changeset",
        "oembed_cache",
        "wp_global_styles",
    }
)

OverrideHook = Callable[[bool, PostStatusTransition], bool]


@dataclass(slots=True, frozen=True)
class PurgeVerdict:
    """Decision plus the rule that produced it."""

    should_purge: bool
    reason: str
    baseline: bool | None = None

    @property
    def overridden(self) -> bool:
        return self.baseline is not None and self.baseline != self.should_purge


def baseline_reason(new_status: str, old_status: str) -> str | None:
    """Return the publish-boundary rule matched by a status pair, if any.

    Any crossing of the publish boundary, any update while live and any
    trashing counts; every other pair (draft to pending, draft to draft)
    does not.
    """

    if new_status == PUBLISH and old_status != PUBLISH:
        return "first_publish"
    if new_status == PUBLISH and old_status == PUBLISH:
        return "republish"
    if old_status == PUBLISH and new_status != PUBLISH:
        return "unpublish"
    if new_status == TRASH:
        return "trash"
    return None


def decide(
    transition: PostStatusTransition | None,
    excluded_types: Collection[str] = frozenset(),
    external_override: OverrideHook | None = None,
) -> PurgeVerdict:
    """Classify ``transition`` and explain the verdict."""

    if transition is None or transition.content_item is None:
        return PurgeVerdict(False, "missing_item")

    item = transition.content_item
    if item.is_revision:
        return PurgeVerdict(False, "revision")
    if item.is_autosave:
        return PurgeVerdict(False, "autosave")
    if item.content_type in INTERNAL_CONTENT_TYPES:
        return PurgeVerdict(False, "internal_type")
    if item.content_type in excluded_types:
        return PurgeVerdict(False, "excluded_type")

    reason = baseline_reason(transition.new_status, transition.old_status)
    baseline = reason is not None
    verdict = baseline
    if external_override is not None:
        verdict = bool(external_override(baseline, transition))

    if verdict != baseline:
        reason = "override"
    return PurgeVerdict(verdict, reason or "no_publish_boundary", baseline=baseline)


def should_purge(
    transition: PostStatusTransition | None,
    excluded_types: Collection[str] = frozenset(),
    external_override: OverrideHook | None = None,
) -> bool:
    """Return whether ``transition`` should trigger a full cache purge."""

    return decide(transition, excluded_types, external_override).should_purge


__all__ = [
    "INTERNAL_CONTENT_TYPES",
    "OverrideHook",
    "PUBLISH",
    "PurgeVerdict",
    "TRASH",
    "baseline_reason",
    "decide",
    "should_purge",
]
