"""
화이트보드 이미지 분석 API
"""
from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Request, status
from pydantic import Field

from video_module.videokit.errors import UpstreamUnavailableError

from ..config import AppSettings
from ..dependencies import get_optional_api_key, get_settings
from ..models import ErrorMessage
from ..utils import CamelModel, to_image_data_url

router = APIRouter(prefix="/api", tags=["WHITEBOARD"])
logger = logging.getLogger(__name__)


class WhiteboardRequest(CamelModel):
    """화이트보드 분석 입력"""

    image: Optional[str] = Field(default=None, description="base64 이미지 또는 data URL")
    api_key: Optional[str] = Field(default=None, description="OpenAI 키 (헤더 대신 사용 가능)")


@router.post("/analyze-whiteboard", status_code=status.HTTP_200_OK)
async def analyze_whiteboard(
    request: WhiteboardRequest,
    http_request: Request,
    header_key: Optional[str] = Depends(get_optional_api_key),
    settings: AppSettings = Depends(get_settings),
):
    """화이트보드 그림 분석 + 고정 후속 질문 목록 (키 확인이 이미지 검증보다 먼저)"""
    api_key = header_key or (request.api_key or "").strip()
    if not api_key:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=ErrorMessage.MISSING_API_KEY.value,
        )

    if not (request.image or "").strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="image: Field required",
        )

    try:
        image_url = to_image_data_url(request.image)
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exc),
        ) from exc

    llm = http_request.app.state.llm_factory(api_key)
    try:
        analysis = await llm.analyze_image(image_url)
    except UpstreamUnavailableError as exc:
        logger.exception("화이트보드 분석 실패: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=settings.whiteboard.error_message,
        ) from exc
    finally:
        await llm.close()

    return {"analysis": analysis, "suggestions": list(settings.whiteboard.suggested_actions)}
