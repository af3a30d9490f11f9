"""Tests for the diagnostic HTML footer."""

from __future__ import annotations

from ngxpurge.features.purge import CacheConfiguration
from ngxpurge.features.purge.usecases.footer import (
    FOOTER_LINES,
    RequestContext,
    append_footer,
    cache_status,
    is_html_response,
    render_footer_comment,
)

PAGE = "<html><body>Hello</body></html>"


def test_footer_comment_wraps_fixed_lines() -> None:
    comment = render_footer_comment()

    assert comment.startswith("\n<!--\n")
    assert comment.endswith("\n-->\n")
    for line in FOOTER_LINES:
        assert line in comment


def test_footer_appended_to_frontend_html() -> None:
    body = append_footer(PAGE, CacheConfiguration(), {"Content-Type": "text/html; charset=UTF-8"})

    assert body == PAGE + render_footer_comment()


def test_footer_skipped_when_disabled() -> None:
    assert append_footer(PAGE, CacheConfiguration(show_stats_footer=False)) == PAGE


def test_footer_skipped_for_non_html_responses() -> None:
    headers = [("content-type", "application/json")]

    assert append_footer("{}", CacheConfiguration(), headers) == "{}"


def test_footer_skipped_outside_frontend_requests() -> None:
    for context in (
        RequestContext(is_admin=True),
        RequestContext(is_ajax=True),
        RequestContext(is_cron=True),
        RequestContext(is_rest=True),
        RequestContext(is_xmlrpc=True),
    ):
        assert not context.is_frontend
        assert append_footer(PAGE, CacheConfiguration(), context=context) == PAGE


def test_missing_content_type_counts_as_html() -> None:
    assert is_html_response({}) is True
    assert is_html_response({"X-Other": "1"}) is True


def test_cache_status_reads_nginx_header() -> None:
    assert cache_status({"Fastcgi-Cache": "hit"}) == "HIT"
    assert cache_status([("fastcgi-cache", "BYPASS")]) == "BYPASS"
    assert cache_status({}) == "UNKNOWN"
