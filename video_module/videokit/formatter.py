"""
영상 추천 응답 포맷터

- LLM 경유 모드: 후보 3개를 프롬프트에 넣고 LLM이 1개를 고르게 한다
- 직접 모드: LLM 없이 번호 목록을 만든다
- 결과 없음: 링크가 전혀 없는 안내 문구
"""
from __future__ import annotations

import re
from typing import Sequence, Tuple

from .config import flags
from .config.prompts import CANDIDATE_BLOCK, RECOMMENDATION_PROMPT
from .models import VideoCandidate, VideoReference
from .parser import parse_markup

_URL_RE = re.compile(r"\S*https?://\S+", re.IGNORECASE)
_LINK_CHARS_RE = re.compile(r"[\[\]()]")


def format_views(view_count: int) -> str:
    """천 단위 구분 (1234567 -> 1,234,567)"""
    return f"{view_count:,}"


def format_duration(seconds: int) -> str:
    """초 -> M:SS 또는 H:MM:SS"""
    hours, remainder = divmod(max(seconds, 0), 3600)
    minutes, secs = divmod(remainder, 60)
    if hours:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes}:{secs:02d}"


def truncate_description(description: str, limit: int = flags.DESCRIPTION_MAX_LENGTH) -> str:
    description = (description or "").strip()
    if len(description) > limit:
        return description[:limit] + "..."
    return description


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# LLM 경유 모드
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

def build_recommendation_prompt(topic: str, candidates: Sequence[VideoCandidate]) -> str:
    """상위 후보(최대 3개)의 실제 제목/ID를 그대로 넣은 추천 프롬프트"""
    top = list(candidates)[: flags.PROMPT_CANDIDATES]
    blocks = []
    for index, c in enumerate(top, start=1):
        blocks.append(
            CANDIDATE_BLOCK.format(
                index=index,
                title=c.title,
                channel=c.channel_title or "Unknown",
                views=format_views(c.view_count),
                published=c.published_at.date().isoformat() if c.published_at else "Unknown",
                duration=format_duration(c.duration_seconds),
                video_id=c.id,
                url=c.url,
                description=truncate_description(c.description) or "(no description)",
            )
        )
    return RECOMMENDATION_PROMPT.format(topic=topic, count=len(top), candidates="\n\n".join(blocks))


def validate_recommendation(text: str, candidates: Sequence[VideoCandidate]) -> bool:
    """LLM 응답에 후보 ID를 가리키는 링크가 정확히 1개 있는지 확인"""
    allowed = {c.id for c in list(candidates)[: flags.PROMPT_CANDIDATES]}
    refs = [p for p in parse_markup(text) if isinstance(p, VideoReference)]
    return len(refs) == 1 and refs[0].video_id in allowed


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# 직접 모드
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

def _candidate_block(index: int, candidate: VideoCandidate) -> str:
    return "\n".join(
        [
            f"{index}. {candidate.title}",
            f"Channel: {candidate.channel_title or 'Unknown'} | Views: {format_views(candidate.view_count)}",
            candidate.url,
        ]
    )


def format_direct(topic: str, candidates: Sequence[VideoCandidate]) -> str:
    """상위 N개(최대 5개)를 번호 목록으로 출력"""
    top = list(candidates)[: flags.DIRECT_MAX_RESULTS]
    if not top:
        return no_results_message(topic)

    blocks = [f'I found some great educational videos about "{_sanitize_topic(topic)}":']
    blocks.extend(_candidate_block(i, c) for i, c in enumerate(top, start=1))
    return "\n\n".join(blocks)


def format_multi_topic(groups: Sequence[Tuple[str, Sequence[VideoCandidate]]]) -> str:
    """다중 주제 요청: 주제별 제목 줄 + 번호 목록"""
    found = [(topic, list(cands)) for topic, cands in groups if cands]
    if not found:
        topics = ", ".join(topic for topic, _ in groups)
        return no_results_message(topics)

    blocks = ["I found some great educational videos for these topics:"]
    index = 1
    for topic, cands in found:
        blocks.append(f"Topic: {_sanitize_topic(topic)}")
        for candidate in cands:
            blocks.append(_candidate_block(index, candidate))
            index += 1

    missing = [topic for topic, cands in groups if not cands]
    if missing:
        blocks.append("No videos were found for: " + ", ".join(_sanitize_topic(t) for t in missing))
    return "\n\n".join(blocks)


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# 결과 없음
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

def no_results_message(topic: str) -> str:
    """URL이나 [제목](링크) 패턴이 절대 들어가지 않는 안내 문구"""
    clean = _sanitize_topic(topic)
    subject = f' about "{clean}"' if clean else ""
    return (
        f"Sorry, I couldn't find any embeddable educational videos{subject} right now. "
        "Try rephrasing your request or searching for a broader topic."
    )


def ask_for_topic_message() -> str:
    return "What topic would you like a video about? For example: \"Find a video about photosynthesis\"."


def _sanitize_topic(topic: str) -> str:
    topic = _URL_RE.sub("", topic or "")
    topic = _LINK_CHARS_RE.sub("", topic)
    return " ".join(topic.split())
