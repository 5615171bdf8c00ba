from __future__ import annotations

import sys
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional

import pytest
from fastapi import FastAPI
from httpx import AsyncClient, ASGITransport

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.append(str(ROOT_DIR))

from server.app import create_app
from server.config import AppSettings
from server.search_log import SearchLogWriter
from video_module.videokit.api import YouTubeSearchItem, YouTubeVideoDetail
from video_module.videokit.errors import LLMError
from video_module.videokit.models import TopicQuery, VideoCandidate, VideoReply

API_HEADERS = {"X-API-Key": "sk-test"}
FIXED_NOW = datetime(2025, 1, 1, tzinfo=timezone.utc)


def make_video_id(n: int) -> str:
    """11자리 YouTube 형식 ID"""
    return f"video{n:06d}"


def make_candidate(
    n: int,
    *,
    title: Optional[str] = None,
    views: int = 1000,
    likes: int = 10,
    duration: int = 600,
    published_at: Optional[datetime] = FIXED_NOW,
    channel: str = "Test Channel",
) -> VideoCandidate:
    return VideoCandidate(
        id=make_video_id(n),
        title=title or f"Video {n}",
        channel_title=channel,
        description=f"Description {n}",
        published_at=published_at,
        view_count=views,
        like_count=likes,
        duration_seconds=duration,
        embeddable=True,
    )


def make_search_item(video_id: str, title: str = "") -> YouTubeSearchItem:
    return YouTubeSearchItem(
        video_id=video_id,
        title=title or f"Search {video_id}",
        description="",
        channel_title="Search Channel",
        publish_time="2024-06-01T00:00:00Z",
    )


def make_detail(
    video_id: str,
    *,
    views: Any = 1000,
    likes: Any = 10,
    duration: Optional[str] = "PT10M",
    embeddable: bool = True,
    published: str = "2024-06-01T00:00:00Z",
) -> YouTubeVideoDetail:
    return YouTubeVideoDetail(
        video_id=video_id,
        title=f"Detail {video_id}",
        description="detail description",
        channel_title="Detail Channel",
        publish_time=published,
        view_count=views,
        like_count=likes,
        duration_iso8601=duration,
        embeddable=embeddable,
    )


class FakeYouTubeClient:
    """쿼리별 결과를 미리 지정하는 YouTube 클라이언트"""

    def __init__(self):
        self.results: Dict[str, List[str]] = {}
        self.details: Dict[str, YouTubeVideoDetail] = {}
        self.errors: Dict[str, Exception] = {}
        self.search_calls: List[str] = []
        self.detail_calls: List[List[str]] = []

    def add(self, query: str, *details: YouTubeVideoDetail) -> None:
        self.results[query] = [d.video_id for d in details]
        for d in details:
            self.details[d.video_id] = d

    async def search_videos(self, q: str, *, max_results: int = 10, lang: str | None = None):
        self.search_calls.append(q)
        if q in self.errors:
            raise self.errors[q]
        return [make_search_item(vid) for vid in self.results.get(q, [])][:max_results]

    async def get_videos(self, ids: List[str]):
        self.detail_calls.append(list(ids))
        return [self.details[vid] for vid in ids if vid in self.details]


class StubLLM:
    """VideoLLMClient 스텁"""

    def __init__(self, api_key: str = "sk-test"):
        self.api_key = api_key
        self.reply: str = "stub reply"
        self.summary: str = "Summary: stub"
        self.analysis: str = "The board shows a right triangle."
        self.error: Optional[Exception] = None
        self.complete_calls: List[Dict[str, Any]] = []
        self.summarize_calls: List[str] = []
        self.image_calls: List[str] = []
        self.close_count = 0

    def _maybe_raise(self) -> None:
        if self.error is not None:
            raise self.error

    async def complete(self, prompt: str, *, max_tokens: int = 800, temperature: float = 0.7) -> str:
        self.complete_calls.append({"prompt": prompt, "max_tokens": max_tokens, "temperature": temperature})
        self._maybe_raise()
        return self.reply

    async def summarize(self, text: str) -> str:
        self.summarize_calls.append(text)
        self._maybe_raise()
        return self.summary

    async def analyze_image(self, image_data_url: str) -> str:
        self.image_calls.append(image_data_url)
        self._maybe_raise()
        return self.analysis

    async def close(self) -> None:
        self.close_count += 1


class StubLLMFactory:
    """요청 키별 StubLLM 생성 기록"""

    def __init__(self):
        self.llm = StubLLM()
        self.keys: List[str] = []

    def __call__(self, api_key: str) -> StubLLM:
        self.keys.append(api_key)
        self.llm.api_key = api_key
        return self.llm


class StubVideoService:
    """VideoSearchService 스텁"""

    def __init__(self):
        self.videos: List[VideoCandidate] = []
        self.reply: VideoReply = VideoReply(reply="no videos", mode="empty")
        self.recommend_calls: List[Dict[str, Any]] = []
        self.search_calls: List[Dict[str, Any]] = []
        self.simple_calls: List[Dict[str, Any]] = []

    async def recommend(self, topic: TopicQuery, llm=None) -> VideoReply:
        self.recommend_calls.append({"topic": topic, "llm": llm})
        return self.reply

    async def search(self, topic: str, max_results: int = 5) -> List[VideoCandidate]:
        self.search_calls.append({"topic": topic, "max_results": max_results})
        return list(self.videos)[:max_results]

    async def search_simple(
        self, topic: str, max_results: int = 5, *, raise_errors: bool = False
    ) -> List[VideoCandidate]:
        self.simple_calls.append({"topic": topic, "max_results": max_results, "raise_errors": raise_errors})
        return list(self.videos)[:max_results]


@dataclass
class TestContext:
    """테스트에서 사용할 스텁 모음"""

    video: StubVideoService = field(default_factory=StubVideoService)
    llm_factory: StubLLMFactory = field(default_factory=StubLLMFactory)
    settings: AppSettings = field(default_factory=AppSettings)
    search_log: Optional[SearchLogWriter] = None

    @property
    def llm(self) -> StubLLM:
        return self.llm_factory.llm

    def fail_llm(self, message: str = "upstream exploded: secret detail") -> None:
        self.llm.error = LLMError(message)


@pytest.fixture
def anyio_backend():
    """trio 의존성 없이 asyncio 백엔드만 사용"""
    return "asyncio"


@pytest.fixture
def test_context(tmp_path) -> TestContext:
    ctx = TestContext()
    ctx.settings.search_log.csv_path = tmp_path / "logs" / "video_searches.csv"
    ctx.search_log = SearchLogWriter(ctx.settings.search_log.csv_path)
    return ctx


@pytest.fixture
def fastapi_app(test_context: TestContext) -> FastAPI:
    return create_app(
        test_context.settings,
        video_service=test_context.video,
        llm_factory=test_context.llm_factory,
        search_log=test_context.search_log,
    )


@pytest.fixture
async def async_client(fastapi_app: FastAPI):
    transport = ASGITransport(app=fastapi_app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client
