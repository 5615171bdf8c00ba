from __future__ import annotations

import pytest

from video_module.videokit.models import TextSegment, VideoRecommendation, VideoReference
from video_module.videokit.parser import DEFAULT_VIDEO_TITLE, extract_video_ids, parse_markup, render_plain


def test_bracket_link_is_parsed_with_title():
    text = "Recommended Video: [Photosynthesis Explained](https://www.youtube.com/watch?v=dQw4w9WgXcQ)\nEnjoy!"
    parts = parse_markup(text)
    assert [type(p) for p in parts] == [TextSegment, VideoReference, TextSegment]
    ref = parts[1]
    assert ref.video_id == "dQw4w9WgXcQ"
    assert ref.title == "Photosynthesis Explained"
    assert ref.url == "https://www.youtube.com/watch?v=dQw4w9WgXcQ"
    assert parts[0].text == "Recommended Video: "
    assert parts[2].text == "\nEnjoy!"


@pytest.mark.parametrize(
    "url",
    [
        "https://youtu.be/dQw4w9WgXcQ",
        "http://m.youtube.com/watch?v=dQw4w9WgXcQ",
        "https://www.youtube.com/embed/dQw4w9WgXcQ",
        "https://youtube.com/shorts/dQw4w9WgXcQ",
        "https://www.youtube.com/v/dQw4w9WgXcQ",
    ],
)
def test_bare_url_forms(url):
    assert extract_video_ids(f"Watch this: {url}") == ["dQw4w9WgXcQ"]


def test_bare_url_title_comes_from_same_line():
    text = "1. Cell Division Basics\nChannel: Bio | Views: 10\n2. Mitosis Song https://youtu.be/abcdefghijk"
    refs = [p for p in parse_markup(text) if isinstance(p, VideoReference)]
    assert refs[0].title == "Mitosis Song"


def test_bare_url_on_its_own_line_gets_default_title():
    refs = [p for p in parse_markup("Look:\nhttps://youtu.be/abcdefghijk\n") if isinstance(p, VideoReference)]
    assert refs[0].title == DEFAULT_VIDEO_TITLE


def test_url_with_extra_parameters():
    text = "https://www.youtube.com/watch?v=abcdefghijk&t=30s is good"
    ref = parse_markup(text)[0]
    assert ref.video_id == "abcdefghijk"
    assert ref.url == "https://www.youtube.com/watch?v=abcdefghijk&t=30s"


def test_id_ending_with_dash():
    assert extract_video_ids("see https://youtu.be/abcdefghij-") == ["abcdefghij-"]


def test_non_youtube_links_stay_text():
    text = "Read [this](https://example.com/watch?v=abcdefghijk) and https://vimeo.com/123"
    parts = parse_markup(text)
    assert parts == [TextSegment(text=text)]


def test_short_id_is_not_matched():
    assert extract_video_ids("https://youtu.be/short") == []


def test_render_plain_restores_text():
    text = (
        "Brief Explanation: ok\n\n"
        "Recommended Video: [A](https://www.youtube.com/watch?v=abcdefghijk)\n"
        "Also https://youtu.be/ABCDEFGHIJK?si=xyz.\n"
    )
    assert render_plain(parse_markup(text)) == text


def test_empty_text():
    assert parse_markup("") == []


RECOMMENDATION_TEXT = (
    'I found some great educational videos about "cells":\n'
    "\n"
    "1. Cell Biology Basics by CrashCourse\n"
    "2. Mitosis Explained by Amoeba Sisters - short intro\n"
)


def test_recommendation_lines_become_cards():
    parts = parse_markup(RECOMMENDATION_TEXT)
    cards = [p for p in parts if isinstance(p, VideoRecommendation)]
    assert [(c.title, c.channel) for c in cards] == [
        ("Cell Biology Basics", "CrashCourse"),
        ("Mitosis Explained", "Amoeba Sisters"),
    ]
    assert isinstance(parts[0], TextSegment)
    assert parts[0].text == 'I found some great educational videos about "cells":'
    assert parts[-1] == TextSegment(text=" short intro\n")
    assert render_plain(parts) == RECOMMENDATION_TEXT
    assert extract_video_ids(RECOMMENDATION_TEXT) == []


def test_recommendation_cards_need_video_response_marker():
    text = "Stand by Me by Ben E. King\n"
    assert parse_markup(text) == [TextSegment(text=text)]


def test_recommendation_cards_skipped_when_urls_present():
    text = "Watch on YouTube:\nGravity Explained by Physics Girl\nhttps://youtu.be/abcdefghijk"
    parts = parse_markup(text)
    assert not any(isinstance(p, VideoRecommendation) for p in parts)
    assert extract_video_ids(text) == ["abcdefghijk"]


def test_recommendation_card_at_end_of_text():
    text = "Here is a YouTube video for you:\nNewton's Laws by Khan Academy"
    card = parse_markup(text)[-1]
    assert isinstance(card, VideoRecommendation)
    assert (card.title, card.channel) == ("Newton's Laws", "Khan Academy")
    assert render_plain(parse_markup(text)) == text
