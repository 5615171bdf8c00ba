from __future__ import annotations

import pytest

from video_module.videokit.models import VideoCandidate
from video_module.videokit.utils import (
    deduplicate_candidates,
    filter_embeddable,
    filter_min_duration,
    parse_duration,
)
from tests.conftest import make_candidate


@pytest.mark.parametrize(
    "value, expected",
    [
        ("PT1M30S", 90),
        ("PT2H", 7200),
        ("PT45S", 45),
        ("PT1H2M3S", 3723),
        ("PT0S", 0),
        ("garbage", 0),
        ("", 0),
        (None, 0),
    ],
)
def test_parse_duration(value, expected):
    assert parse_duration(value) == expected


def test_filter_embeddable_drops_non_embeddable():
    ok = make_candidate(1)
    blocked = VideoCandidate(id="video000002", embeddable=False)
    assert filter_embeddable([ok, blocked]) == [ok]


def test_filter_min_duration_keeps_boundary():
    short = make_candidate(1, duration=119)
    boundary = make_candidate(2, duration=120)
    long = make_candidate(3, duration=3600)
    assert filter_min_duration([short, boundary, long], 120) == [boundary, long]


def test_deduplicate_keeps_first_and_updates_seen():
    first = make_candidate(1, title="first")
    dup = make_candidate(1, title="second")
    other = make_candidate(2)
    seen = {"video000009"}
    assert deduplicate_candidates([first, dup, other], seen) == [first, other]
    assert seen == {"video000009", "video000001", "video000002"}


def test_candidate_coerces_statistics():
    c = VideoCandidate(id="abc", viewCount="1500", likeCount=None, duration_seconds="x", publishedAt="")
    assert c.view_count == 1500
    assert c.like_count == 0
    assert c.duration_seconds == 0
    assert c.published_at is None
    assert c.url == "https://www.youtube.com/watch?v=abc"
    assert c.embed_url == "https://www.youtube.com/embed/abc"
