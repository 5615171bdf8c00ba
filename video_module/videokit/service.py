from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

import httpx
from pydantic import ValidationError

from .api import YouTubeAPIClient
from .config import flags
from .config.video_config import VideoConfig
from .errors import UpstreamUnavailableError, VideoAPIError
from .formatter import (
    ask_for_topic_message,
    build_recommendation_prompt,
    format_direct,
    format_multi_topic,
    no_results_message,
    validate_recommendation,
)
from .llm import VideoLLMClient
from .models import SearchStrategy, TopicQuery, VideoCandidate, VideoReply
from .utils import deduplicate_candidates, filter_embeddable, filter_min_duration, rank

logger = logging.getLogger(__name__)

# 전략 하나가 실패해도 다음 전략으로 넘어가는 예외
_STRATEGY_ERRORS = (UpstreamUnavailableError, httpx.HTTPError, ValueError)


class VideoSearchService:
    """High-level service for educational video search, ranking and replies."""

    def __init__(
        self,
        yt_client: YouTubeAPIClient | None = None,
        *,
        trusted_channels: Iterable[str] = flags.TRUSTED_CHANNELS,
        strategy_templates: Iterable[str] = flags.STRATEGY_TEMPLATES,
        target_results: int = flags.TARGET_RESULTS,
        max_search_results: int = flags.MAX_SEARCH_RESULTS,
        min_duration_seconds: int = flags.MIN_DURATION_SECONDS,
        clock: Callable[[], datetime] | None = None,
    ):
        self.yt = yt_client or YouTubeAPIClient(api_key=VideoConfig.YOUTUBE_API_KEY)
        self.trusted_channels = [c for c in trusted_channels if c.strip()]
        self.strategy_templates = [t for t in strategy_templates if t.strip()]
        self.target_results = target_results
        self.max_search_results = max_search_results
        self.min_duration_seconds = min_duration_seconds
        self.clock = clock or (lambda: datetime.now(timezone.utc))

    def build_strategies(self, topic: str) -> List[SearchStrategy]:
        """신뢰 채널 OR 쿼리 → 설정된 템플릿 순서"""
        strategies: List[SearchStrategy] = []
        if self.trusted_channels:
            channels = " | ".join(f'"{name}"' for name in self.trusted_channels)
            strategies.append(
                SearchStrategy(label="trusted_channels", query_template=f"{{topic}} ({channels})")
            )
        for index, template in enumerate(self.strategy_templates, start=1):
            strategies.append(SearchStrategy(label=f"template_{index}", query_template=template))
        return strategies

    async def _fetch_candidates(self, query: str) -> List[VideoCandidate]:
        """검색 1회 + 상세 조회 1회 → 임베드 가능한 후보"""
        items = await self.yt.search_videos(query, max_results=self.max_search_results)
        if not items:
            return []

        details = await self.yt.get_videos([it.video_id for it in items])
        detail_map = {d.video_id: d for d in details}

        merged: List[VideoCandidate] = []
        for it in items:
            d = detail_map.get(it.video_id)
            if d is None:
                # 상세 정보가 없으면 임베드 가능 여부를 알 수 없다
                continue
            try:
                merged.append(d.to_candidate(it))
            except ValidationError as exc:
                logger.warning("⚠️ 후보 변환 실패, 항목만 제외 (video_id=%s): %s", it.video_id, exc)
        return filter_embeddable(merged)

    async def search(self, topic: str, max_results: int = flags.DEFAULT_MAX_RESULTS) -> List[VideoCandidate]:
        """
        전략을 순서대로 시도하며 후보를 누적하고, 점수순으로 정렬해 반환

        누적 개수가 target_results에 도달하면 멈춘다.
        전략 하나의 실패는 로그만 남기고 다음 전략으로 진행하며,
        모두 실패하거나 결과가 없으면 빈 리스트를 반환한다.
        """
        topic = topic.strip()
        if not topic:
            return []

        collected: List[VideoCandidate] = []
        seen: set[str] = set()

        for strategy in self.build_strategies(topic):
            query = strategy.render(topic)
            try:
                found = await self._fetch_candidates(query)
            except _STRATEGY_ERRORS as exc:
                logger.warning("⚠️ 검색 전략 실패 (strategy=%s, q=%r): %s", strategy.label, query, exc)
                continue

            if not found:
                logger.info("검색 전략 결과 없음 (strategy=%s, q=%r)", strategy.label, query)
                continue

            added = deduplicate_candidates(found, seen)
            collected.extend(added)
            logger.info(f"✅ 전략 {strategy.label}: {len(added)}개 추가 (누적 {len(collected)}개)")

            if len(collected) >= self.target_results:
                break

        if not collected:
            logger.info("🧊 영상 결과 없음: topic=%r", topic)
            return []

        return rank(collected, self.clock())[:max_results]

    async def search_simple(
        self,
        topic: str,
        max_results: int = flags.DEFAULT_MAX_RESULTS,
        *,
        raise_errors: bool = False,
    ) -> List[VideoCandidate]:
        """
        단일 전략 검색 + 쇼츠(min_duration_seconds 미만) 제외

        raise_errors=True면 Provider 오류를 빈 결과 대신 UpstreamUnavailableError로 올린다.
        """
        topic = topic.strip()
        if not topic:
            return []

        try:
            found = await self._fetch_candidates(topic)
        except _STRATEGY_ERRORS as exc:
            logger.warning("⚠️ 단순 검색 실패 (q=%r): %s", topic, exc)
            if not raise_errors:
                return []
            if isinstance(exc, UpstreamUnavailableError):
                raise
            raise VideoAPIError(f"YouTube 검색 실패: {exc.__class__.__name__}") from exc

        long_enough = filter_min_duration(found, self.min_duration_seconds)
        if len(long_enough) < len(found):
            logger.info(f"쇼츠 필터링: {len(found) - len(long_enough)}개 제외 (q={topic!r})")
        return rank(long_enough, self.clock())[:max_results]

    async def search_many(
        self, subtopics: Sequence[str], per_topic: int = flags.PER_SUBTOPIC_RESULTS
    ) -> List[Tuple[str, List[VideoCandidate]]]:
        """다중 주제: 주제별로 검색하고, 앞 주제에서 나온 영상은 제외"""
        groups: List[Tuple[str, List[VideoCandidate]]] = []
        shown: set[str] = set()
        for subtopic in list(subtopics)[: flags.MAX_SUBTOPICS]:
            found = await self.search(subtopic, max_results=per_topic + len(shown))
            fresh = deduplicate_candidates(found, shown)[:per_topic]
            groups.append((subtopic, fresh))
        return groups

    async def recommend(self, topic: TopicQuery, llm: Optional[VideoLLMClient] = None) -> VideoReply:
        """
        채팅 영상 요청 처리

        - 다중 주제: 직접 모드
        - 단일 주제: LLM 경유 모드, LLM 실패/검증 실패 시 직접 모드
        - 결과 없음: 링크 없는 안내 문구
        """
        if topic.is_multi:
            groups = await self.search_many(topic.subtopics)
            videos = [c for _, cands in groups for c in cands]
            mode = "direct" if videos else "empty"
            return VideoReply(reply=format_multi_topic(groups), videos=videos, mode=mode)

        if not topic.text:
            return VideoReply(reply=ask_for_topic_message(), mode="empty")

        candidates = await self.search(topic.text)
        if not candidates:
            return VideoReply(reply=no_results_message(topic.text), mode="empty")

        if llm is not None:
            top = candidates[: flags.PROMPT_CANDIDATES]
            prompt = build_recommendation_prompt(topic.text, top)
            try:
                reply = await llm.complete(prompt, max_tokens=VideoConfig.MAX_TOKENS_RECOMMENDATION)
            except UpstreamUnavailableError as exc:
                logger.warning("LLM 추천 실패, 직접 모드로 대체: %s", exc)
            else:
                if validate_recommendation(reply, top):
                    return VideoReply(reply=reply, videos=top, mode="llm")
                logger.warning("LLM 추천 응답 검증 실패, 직접 모드로 대체 (topic=%r)", topic.text)

        return VideoReply(reply=format_direct(topic.text, candidates), videos=candidates, mode="direct")
