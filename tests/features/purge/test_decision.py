"""Tests for the purge decision engine."""

from __future__ import annotations

import pytest

from ngxpurge.features.purge import ContentItem, PostStatusTransition, decide, should_purge
from ngxpurge.features.purge.domain.decision import INTERNAL_CONTENT_TYPES, baseline_reason

STATUSES = ("publish", "draft", "pending", "private", "future", "trash", "auto-draft", "inherit")


def _post(**overrides: object) -> ContentItem:
    values: dict[str, object] = {"id": 1, "content_type": "post"}
    values.update(overrides)
    return ContentItem(**values)  # type: ignore[arg-type]


def _transition(new: str, old: str, item: ContentItem | None = None) -> PostStatusTransition:
    return PostStatusTransition(new_status=new, old_status=old, content_item=item or _post())


@pytest.mark.parametrize(
    ("new", "old", "reason"),
    [
        ("publish", "draft", "first_publish"),
        ("publish", "future", "first_publish"),
        ("publish", "publish", "republish"),
        ("draft", "publish", "unpublish"),
        ("private", "publish", "unpublish"),
        ("trash", "draft", "trash"),
        ("trash", "trash", "trash"),
    ],
)
def test_publish_boundary_crossings_purge(new: str, old: str, reason: str) -> None:
    """Any publish-boundary crossing or trashing purges and names the rule."""

    verdict = decide(_transition(new, old))

    assert verdict.should_purge is True
    assert verdict.reason == reason
    assert verdict.baseline is True


@pytest.mark.parametrize(("new", "old"), [("draft", "draft"), ("pending", "draft"), ("private", "future")])
def test_changes_behind_the_publish_boundary_do_not_purge(new: str, old: str) -> None:
    verdict = decide(_transition(new, old))

    assert verdict.should_purge is False
    assert verdict.reason == "no_publish_boundary"


@pytest.mark.parametrize("status", [s for s in STATUSES if s not in {"publish", "trash"}])
def test_unchanged_non_public_status_never_purges(status: str) -> None:
    assert should_purge(_transition(status, status)) is False


@pytest.mark.parametrize("old", STATUSES)
def test_trash_purges_regardless_of_previous_status(old: str) -> None:
    assert should_purge(_transition("trash", old)) is True


@pytest.mark.parametrize("new", STATUSES)
@pytest.mark.parametrize("old", STATUSES)
def test_revisions_never_purge(new: str, old: str) -> None:
    """Revision writes are bookkeeping whatever the status pair."""

    assert should_purge(_transition(new, old, _post(is_revision=True))) is False


def test_missing_item_does_not_purge() -> None:
    transition = PostStatusTransition(new_status="publish", old_status="draft", content_item=None)

    verdict = decide(transition)

    assert verdict.should_purge is False
    assert verdict.reason == "missing_item"
    assert decide(None).reason == "missing_item"


def test_autosave_does_not_purge() -> None:
    verdict = decide(_transition("publish", "draft", _post(is_autosave=True)))

    assert verdict.should_purge is False
    assert verdict.reason == "autosave"


@pytest.mark.parametrize("content_type", sorted(INTERNAL_CONTENT_TYPES))
def test_internal_content_types_do_not_purge(content_type: str) -> None:
    verdict = decide(_transition("publish", "draft", _post(content_type=content_type)))

    assert verdict.should_purge is False
    assert verdict.reason == "internal_type"


def test_excluded_content_types_do_not_purge() -> None:
    transition = _transition("publish", "draft", _post(content_type="product"))

    assert should_purge(transition, {"product"}) is False
    assert decide(transition, {"product"}).reason == "excluded_type"
    assert should_purge(transition, {"page"}) is True


def test_override_receives_baseline_and_transition() -> None:
    """The override sees the baseline verdict and the full transition."""

    seen: list[tuple[bool, PostStatusTransition]] = []
    transition = _transition("pending", "draft")

    def override(verdict: bool, context: PostStatusTransition) -> bool:
        seen.append((verdict, context))
        return True

    verdict = decide(transition, external_override=override)

    assert seen == [(False, transition)]
    assert verdict.should_purge is True
    assert verdict.reason == "override"
    assert verdict.baseline is False
    assert verdict.overridden is True


def test_override_can_veto_a_publish() -> None:
    verdict = decide(_transition("publish", "draft"), external_override=lambda verdict, _ctx: False)

    assert verdict.should_purge is False
    assert verdict.overridden is True


def test_confirming_override_keeps_rule_reason() -> None:
    verdict = decide(_transition("publish", "draft"), external_override=lambda verdict, _ctx: verdict)

    assert verdict.reason == "first_publish"
    assert verdict.overridden is False


def test_override_not_consulted_for_excluded_items() -> None:
    calls: list[bool] = []

    def override(verdict: bool, _context: PostStatusTransition) -> bool:
        calls.append(verdict)
        return True

    assert should_purge(_transition("publish", "draft", _post(is_revision=True)), external_override=override) is False
    assert calls == []


def test_baseline_reason_for_unrelated_pair_is_none() -> None:
    assert baseline_reason("pending", "draft") is None
