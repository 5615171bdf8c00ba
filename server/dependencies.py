"""
FastAPI 의존성 헬퍼
"""
from __future__ import annotations

from typing import Optional

from fastapi import Depends, Header, HTTPException, Request, status

from .config import AppSettings
from .models import ErrorMessage


async def get_settings(request: Request) -> AppSettings:
    """앱 설정 조회"""
    return request.app.state.app_settings


async def get_video_service(request: Request):
    """영상 검색 서비스 인스턴스"""
    return request.app.state.video_service


async def get_classifier(request: Request):
    """영상 요청 판별기"""
    return request.app.state.classifier


async def get_topic_extractor(request: Request):
    """검색 주제 추출기"""
    return request.app.state.topic_extractor


async def get_search_log(request: Request):
    """검색 로그 CSV 작성기"""
    return request.app.state.search_log


async def get_optional_api_key(
    x_api_key: Optional[str] = Header(default=None, alias="X-API-Key"),
) -> Optional[str]:
    """X-API-Key 헤더 (없으면 None)"""
    if x_api_key is None or not x_api_key.strip():
        return None
    return x_api_key.strip()


async def require_api_key(api_key: Optional[str] = Depends(get_optional_api_key)) -> str:
    """X-API-Key 필수: 없으면 외부 호출 전에 401"""
    if api_key is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=ErrorMessage.MISSING_API_KEY.value,
        )
    return api_key


async def get_llm_client(request: Request, api_key: str = Depends(require_api_key)):
    """요청 키로 만든 LLM 클라이언트 (응답 후 close)"""
    client = request.app.state.llm_factory(api_key)
    try:
        yield client
    finally:
        await client.close()
