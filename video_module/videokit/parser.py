"""
응답 텍스트의 YouTube 링크 파싱 (클라이언트 렌더러와 같은 규칙)

텍스트를 일반 텍스트 조각과 동영상 참조로 나눈다. 매칭되지 않은 구간은
한 글자도 바꾸지 않으므로 render_plain(parse_markup(text)) == text 이다.

URL이 하나도 없고 영상 검색 응답처럼 보이는 텍스트는 "제목 by 채널" 줄을
VideoRecommendation 카드로 분리한다.
"""
from __future__ import annotations

import re
from typing import List

from .models import MarkupPart, TextSegment, VideoRecommendation, VideoReference

DEFAULT_VIDEO_TITLE = "YouTube Video"
MAX_TITLE_LENGTH = 200

_URL_PREFIX = r"https?://(?:www\.|m\.)?(?:youtube\.com/(?:watch\?v=|embed/|v/|shorts/)|youtu\.be/)"
_VIDEO_ID = r"[A-Za-z0-9_-]{11}"
# 꼬리 파라미터(&t=30s 등)는 단어 경계에서 끝날 때만 포함한다
_URL_SUFFIX = r"(?:[^\s\])]*\b)?"

_MARKUP_RE = re.compile(
    r"\[(?P<link_title>[^\]\n]+)\]"
    r"\((?P<link_url>" + _URL_PREFIX + r"(?P<link_id>" + _VIDEO_ID + r")" + _URL_SUFFIX + r")\)"
    r"|(?P<bare_url>" + _URL_PREFIX + r"(?P<bare_id>" + _VIDEO_ID + r")" + _URL_SUFFIX + r")",
    re.IGNORECASE,
)

# 줄 시작(번호 허용) + 대문자로 시작하는 제목 " by " 대문자로 시작하는 채널
_RECOMMENDATION_RE = re.compile(
    r"(?:^|\n)\s*(?:\d+\.\s*)?(?P<title>[A-Z][^:\n]*?) by (?P<channel>[A-Z][^:\n]*?)(?:\s*-|\s*\n|$)",
    re.MULTILINE,
)
VIDEO_RESPONSE_MARKERS = (
    "I found some great educational videos",
    "YouTube video",
    "Watch on YouTube",
)


def parse_markup(text: str) -> List[MarkupPart]:
    """텍스트를 순서대로 TextSegment / VideoReference (/ VideoRecommendation) 목록으로 분리"""
    if not _MARKUP_RE.search(text) and is_video_search_response(text):
        return _parse_recommendations(text)

    parts: List[MarkupPart] = []
    last_index = 0

    for match in _MARKUP_RE.finditer(text):
        start, end = match.span()
        if start > last_index:
            parts.append(TextSegment(text=text[last_index:start]))

        raw = match.group(0)
        if match.group("link_id"):
            title = match.group("link_title").strip() or DEFAULT_VIDEO_TITLE
            parts.append(
                VideoReference(
                    video_id=match.group("link_id"),
                    title=title,
                    url=match.group("link_url"),
                    raw=raw,
                )
            )
        else:
            parts.append(
                VideoReference(
                    video_id=match.group("bare_id"),
                    title=_title_from_line(text, start, end),
                    url=match.group("bare_url"),
                    raw=raw,
                )
            )
        last_index = end

    if last_index < len(text):
        parts.append(TextSegment(text=text[last_index:]))
    return parts


def render_plain(parts: List[MarkupPart]) -> str:
    """임베드 실패 시 보여줄 원문 텍스트 복원"""
    return "".join(p.text if isinstance(p, TextSegment) else p.raw for p in parts)


def extract_video_ids(text: str) -> List[str]:
    return [p.video_id for p in parse_markup(text) if isinstance(p, VideoReference)]


def is_video_search_response(text: str) -> bool:
    return any(marker in text for marker in VIDEO_RESPONSE_MARKERS)


def _parse_recommendations(text: str) -> List[MarkupPart]:
    """URL 없는 추천 목록: "제목 by 채널" 줄을 카드로 분리"""
    parts: List[MarkupPart] = []
    last_index = 0
    for match in _RECOMMENDATION_RE.finditer(text):
        start, end = match.span()
        if start > last_index:
            parts.append(TextSegment(text=text[last_index:start]))
        parts.append(
            VideoRecommendation(
                title=match.group("title").strip(),
                channel=match.group("channel").strip(),
                raw=match.group(0),
            )
        )
        last_index = end

    if last_index < len(text):
        parts.append(TextSegment(text=text[last_index:]))
    return parts


def _title_from_line(text: str, start: int, end: int) -> str:
    """URL과 같은 줄에 있는 텍스트를 제목으로 사용"""
    line_start = text.rfind("\n", 0, start) + 1
    line_end = text.find("\n", end)
    if line_end == -1:
        line_end = len(text)
    line = text[line_start:line_end]
    raw = text[start:end]

    if line.strip() == raw:
        return DEFAULT_VIDEO_TITLE

    candidate = (line[: start - line_start] + line[end - line_start:]).strip()
    if not candidate or len(candidate) >= MAX_TITLE_LENGTH:
        return DEFAULT_VIDEO_TITLE

    candidate = re.sub(r"^\d+\.\s*", "", candidate)
    candidate = re.sub(r"^-\s*", "", candidate).strip()
    return candidate or DEFAULT_VIDEO_TITLE
