"""Tests for shared text helpers."""

import pytest

from ngxpurge.shared import parse_bool, safe_text


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("  plain  ", "plain"),
        ("a\t\tb\nc", "a b c"),
        ("x\x00y\x07z", "xyz"),
        ("<script>alert(1)</script>done", "alert(1)done"),
        (None, ""),
        (42, "42"),
    ],
)
def test_safe_text(raw: object, expected: str) -> None:
    assert safe_text(raw) == expected


@pytest.mark.parametrize(
    ("raw", "default", "expected"),
    [
        (True, False, True),
        (0, True, False),
        (2, False, True),
        ("Yes", False, True),
        ("off", True, False),
        ("", True, False),
        ("maybe", True, True),
        (None, False, False),
        (1.5, True, True),
    ],
)
def test_parse_bool(raw: object, default: bool, expected: bool) -> None:
    assert parse_bool(raw, default) is expected
