"""
VideoKit - 학습 도우미용 유튜브 영상 검색/추천 모듈

BALVIS 프로젝트를 위한 YouTube Data API 기반 영상 검색, 순위화, 응답 포맷
"""

from .service import VideoSearchService
from .query import QueryClassifier, TopicExtractor
from .parser import parse_markup, render_plain, extract_video_ids
from .llm import VideoLLMClient
from .models import (
    VideoCandidate,
    SearchStrategy,
    RankedResult,
    TopicQuery,
    TextSegment,
    VideoReference,
    VideoRecommendation,
    VideoReply,
)
from .errors import VideoKitError, UpstreamUnavailableError, VideoAPIError, LLMError

__version__ = "0.1.0"

__all__ = [
    "VideoSearchService",
    "QueryClassifier",
    "TopicExtractor",
    "parse_markup",
    "render_plain",
    "extract_video_ids",
    "VideoLLMClient",
    "VideoCandidate",
    "SearchStrategy",
    "RankedResult",
    "TopicQuery",
    "TextSegment",
    "VideoReference",
    "VideoRecommendation",
    "VideoReply",
    "VideoKitError",
    "UpstreamUnavailableError",
    "VideoAPIError",
    "LLMError",
]
