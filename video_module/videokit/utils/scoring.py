"""
동영상 후보 관련도 점수 계산
"""
from __future__ import annotations

import math
from datetime import datetime, timezone
from typing import Iterable, List, Optional

from ..config import flags
from ..models import RankedResult, VideoCandidate


def freshness(candidate: VideoCandidate, now: datetime) -> float:
    """
    최신성 점수 [0, 1]

    게시 시점이 now면 1, 365일 이상 지났으면 0.
    게시 시각을 모르면 0.
    """
    if candidate.published_at is None:
        return 0.0
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    age_ms = (now - candidate.published_at).total_seconds() * 1000
    return max(0.0, min(1.0, 1 - age_ms / flags.FRESHNESS_WINDOW_MS))


def engagement(candidate: VideoCandidate) -> float:
    """좋아요 / 조회수"""
    return candidate.like_count / max(candidate.view_count, 1)


def relevance_score(candidate: VideoCandidate, now: datetime) -> float:
    """
    관련도 점수

    가중치:
    - log10(조회수 + 1): flags.WEIGHT_VIEWS
    - 참여율: flags.WEIGHT_ENGAGEMENT
    - 최신성: flags.WEIGHT_FRESHNESS
    """
    return (
        math.log10(candidate.view_count + 1) * flags.WEIGHT_VIEWS
        + engagement(candidate) * flags.WEIGHT_ENGAGEMENT
        + freshness(candidate, now) * flags.WEIGHT_FRESHNESS
    )


def rank_candidates(
    candidates: Iterable[VideoCandidate], now: Optional[datetime] = None
) -> List[RankedResult]:
    """점수 내림차순 정렬 (동점은 원래 순서 유지)"""
    now = now or datetime.now(timezone.utc)
    scored = [RankedResult(candidate=c, score=relevance_score(c, now)) for c in candidates]
    # sorted는 stable이므로 동점 시 API 응답 순서가 유지된다
    return sorted(scored, key=lambda r: r.score, reverse=True)


def rank(candidates: Iterable[VideoCandidate], now: Optional[datetime] = None) -> List[VideoCandidate]:
    return [r.candidate for r in rank_candidates(candidates, now)]
