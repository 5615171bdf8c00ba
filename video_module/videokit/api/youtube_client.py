"""
YouTube API 클라이언트 (Data API v3)
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import httpx

from ..config.video_config import VideoConfig
from ..errors import VideoAPIError
from ..models import VideoCandidate
from ..utils import parse_duration

logger = logging.getLogger(__name__)


@dataclass
class YouTubeSearchItem:
    """YouTube 검색 결과 아이템"""
    video_id: str
    title: str
    description: str
    channel_title: str
    publish_time: str


@dataclass
class YouTubeVideoDetail:
    """YouTube 동영상 상세 정보"""
    video_id: str
    title: str
    description: str
    channel_title: str
    publish_time: str
    view_count: Any
    like_count: Any
    duration_iso8601: Optional[str]
    embeddable: bool

    def to_candidate(self, search_item: Optional[YouTubeSearchItem] = None) -> VideoCandidate:
        """검색 결과와 병합해 VideoCandidate 생성 (상세 값 우선)"""
        return VideoCandidate(
            id=self.video_id,
            title=self.title or (search_item.title if search_item else ""),
            channel_title=self.channel_title or (search_item.channel_title if search_item else ""),
            description=self.description or (search_item.description if search_item else ""),
            published_at=self.publish_time or (search_item.publish_time if search_item else None),
            view_count=self.view_count,
            like_count=self.like_count,
            duration_seconds=parse_duration(self.duration_iso8601),
            embeddable=self.embeddable,
        )


class YouTubeAPIClient:
    """YouTube Data API v3 클라이언트"""

    def __init__(
        self,
        api_key: Optional[str] = None,
        timeout: float | None = None,
        base_url: str | None = None,
    ):
        self.api_key = api_key if api_key is not None else VideoConfig.YOUTUBE_API_KEY
        self.timeout = timeout or VideoConfig.TIMEOUT
        self.base_url = base_url or VideoConfig.YOUTUBE_BASE_URL

    async def _get(self, path: str, params: Dict[str, Any]) -> Dict[str, Any]:
        if not self.api_key:
            raise VideoAPIError("YOUTUBE_API_KEY가 설정되지 않았습니다.")

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                resp = await client.get(f"{self.base_url}/{path}", params={**params, "key": self.api_key})
                resp.raise_for_status()
                return resp.json()
        except httpx.HTTPStatusError as exc:
            # 응답 본문에는 키 관련 정보가 있을 수 있으므로 상태 코드만 남긴다
            raise VideoAPIError(f"YouTube API {path} 응답 오류: HTTP {exc.response.status_code}") from exc
        except httpx.HTTPError as exc:
            raise VideoAPIError(f"YouTube API {path} 호출 실패: {exc}") from exc
        except ValueError as exc:
            raise VideoAPIError(f"YouTube API {path} JSON 파싱 실패: {exc}") from exc

    async def search_videos(
        self, q: str, *, max_results: int = 10, lang: str | None = None
    ) -> List[YouTubeSearchItem]:
        """YouTube 동영상 검색 (임베드/배포 가능, 엄격한 세이프서치)"""
        params = {
            "part": "snippet",
            "type": "video",
            "q": q,
            "maxResults": max_results,
            "videoEmbeddable": "true",
            "videoSyndicated": "true",
            "safeSearch": "strict",
            "relevanceLanguage": lang or VideoConfig.RELEVANCE_LANGUAGE,
        }
        data = await self._get("search", params)

        items: List[YouTubeSearchItem] = []
        for it in data.get("items", []):
            vid = (it.get("id") or {}).get("videoId")
            sn = it.get("snippet") or {}
            if not vid or not sn:
                continue
            items.append(
                YouTubeSearchItem(
                    video_id=vid,
                    title=sn.get("title", ""),
                    description=sn.get("description", ""),
                    channel_title=sn.get("channelTitle", ""),
                    publish_time=sn.get("publishedAt", ""),
                )
            )
        return items

    async def get_videos(self, ids: List[str]) -> List[YouTubeVideoDetail]:
        """YouTube 동영상 상세 정보 조회 (ID 묶음 1회 호출)"""
        if not ids:
            return []

        params = {
            "part": "snippet,contentDetails,statistics,status",
            "id": ",".join(ids),
        }
        data = await self._get("videos", params)

        details: List[YouTubeVideoDetail] = []
        for it in data.get("items", []):
            vid = it.get("id")
            if not vid:
                continue
            sn = it.get("snippet") or {}
            stats = it.get("statistics") or {}
            cd = it.get("contentDetails") or {}
            st = it.get("status") or {}
            details.append(
                YouTubeVideoDetail(
                    video_id=vid,
                    title=sn.get("title", ""),
                    description=sn.get("description", ""),
                    channel_title=sn.get("channelTitle", ""),
                    publish_time=sn.get("publishedAt", ""),
                    view_count=stats.get("viewCount", 0),
                    like_count=stats.get("likeCount", 0),
                    duration_iso8601=cd.get("duration"),
                    embeddable=st.get("embeddable") is True,
                )
            )
        return details
