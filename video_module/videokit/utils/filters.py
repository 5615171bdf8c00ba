"""
VideoKit 유틸리티 함수 (길이 파싱, 임베드/쇼츠 필터, 중복 제거)
"""
from __future__ import annotations

import re
from typing import Iterable, List, Optional

from ..models import VideoCandidate

_DURATION_RE = re.compile(r"PT(?:(\d+)H)?(?:(\d+)M)?(?:(\d+)S)?")


def parse_duration(duration: Optional[str]) -> int:
    """
    ISO-8601 형식 길이("PT#H#M#S")를 초 단위로 변환

    각 구성요소는 생략 가능하며 없으면 0으로 본다.
    PT 그룹을 찾을 수 없으면 0을 반환한다 (파싱 불가).
    """
    if not duration:
        return 0
    match = _DURATION_RE.search(duration)
    if not match:
        return 0
    hours, minutes, seconds = (int(part) if part else 0 for part in match.groups())
    return hours * 3600 + minutes * 60 + seconds


def filter_embeddable(candidates: Iterable[VideoCandidate]) -> List[VideoCandidate]:
    """Provider가 임베드 가능으로 표시한 영상만 유지"""
    return [c for c in candidates if c.embeddable is True]


def filter_min_duration(candidates: Iterable[VideoCandidate], min_seconds: int) -> List[VideoCandidate]:
    """쇼츠 제외: min_seconds 미만 영상 제거"""
    return [c for c in candidates if c.duration_seconds >= min_seconds]


def deduplicate_candidates(
    candidates: Iterable[VideoCandidate], seen: set[str] | None = None
) -> List[VideoCandidate]:
    """중복 제거 (ID 기반, 먼저 나온 항목 유지)"""
    seen = seen if seen is not None else set()
    out: List[VideoCandidate] = []
    for candidate in candidates:
        if candidate.id in seen:
            continue
        seen.add(candidate.id)
        out.append(candidate)
    return out
