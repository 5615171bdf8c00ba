"""
영상 검색 / 검색 로그 API
"""
from __future__ import annotations

import asyncio
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import Field, field_validator

from ..config import AppSettings
from ..dependencies import get_search_log, get_settings, get_video_service, require_api_key
from ..utils import CamelModel, dump_videos

router = APIRouter(prefix="/api", tags=["VIDEO"])
logger = logging.getLogger(__name__)


class VideoQueryRequest(CamelModel):
    """영상 검색어 입력"""

    query: str = Field(..., description="검색어")
    max_results: Optional[int] = Field(default=None, ge=1, le=20, description="반환 개수")

    @field_validator("query")
    @classmethod
    def validate_query(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("query는 비어 있을 수 없습니다.")
        return value.strip()


@router.post("/youtube-search", status_code=status.HTTP_200_OK)
async def youtube_search(
    request: VideoQueryRequest,
    api_key: str = Depends(require_api_key),
    video_service=Depends(get_video_service),
    settings: AppSettings = Depends(get_settings),
):
    """단일 전략 검색 (쇼츠 제외) 후 점수순 반환, Provider 오류는 500"""
    max_results = request.max_results or settings.video.max_results
    videos = await video_service.search_simple(request.query, max_results=max_results, raise_errors=True)
    return {"videos": dump_videos(videos), "query": request.query, "count": len(videos)}


@router.post("/log-video-search", status_code=status.HTTP_200_OK)
async def log_video_search(
    request: VideoQueryRequest,
    api_key: str = Depends(require_api_key),
    video_service=Depends(get_video_service),
    search_log=Depends(get_search_log),
):
    """검색어와 첫 번째 결과를 CSV에 기록"""
    videos = await video_service.search(request.query, max_results=1)
    top = videos[0] if videos else None

    try:
        await asyncio.to_thread(search_log.append, request.query, top)
    except OSError as exc:
        logger.exception("검색 로그 기록 실패: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to log video search",
        ) from exc

    return {
        "status": "logged",
        "query": request.query,
        "video": dump_videos([top])[0] if top else None,
    }
