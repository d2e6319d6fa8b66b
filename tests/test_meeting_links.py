from __future__ import annotations

import random

import pytest

from app.exceptions import ConfigurationError
from app.services.meeting_links import MeetingLinkPool, load_meeting_links, parse_meeting_links

PREFIX = "https://meet.google.com/"


def test_parse_keeps_only_prefixed_lines():
    text = "\n".join([
        "  https://meet.google.com/abc-defg-hij  ",
        "",
        "# comment",
        "https://zoom.us/j/123",
        "https://meet.google.com/klm-nopq-rst",
    ])

    assert parse_meeting_links(text, PREFIX) == (
        "https://meet.google.com/abc-defg-hij",
        "https://meet.google.com/klm-nopq-rst",
    )


def test_load_meeting_links_from_file(tmp_path):
    path = tmp_path / "links.txt"
    path.write_text("https://meet.google.com/one-link-aaa\nnot a link\n", encoding="utf-8")

    pool = load_meeting_links(path, PREFIX)

    assert pool.links == ("https://meet.google.com/one-link-aaa",)


def test_load_fails_without_usable_links(tmp_path):
    path = tmp_path / "links.txt"
    path.write_text("nothing useful\n", encoding="utf-8")

    with pytest.raises(ConfigurationError):
        load_meeting_links(path, PREFIX)
    with pytest.raises(ConfigurationError):
        load_meeting_links(tmp_path / "missing.txt", PREFIX)


def test_pool_is_immutable_and_picks_with_replacement(link_pool):
    rng = random.Random(0)
    picks = [link_pool.pick(rng) for _ in range(50)]

    assert all(p in link_pool for p in picks)
    assert len(set(picks)) < len(picks)
    assert isinstance(link_pool.links, tuple)


def test_empty_pool_rejected():
    with pytest.raises(ConfigurationError):
        MeetingLinkPool([])
