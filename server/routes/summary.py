"""
텍스트 요약 API
"""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import Field, field_validator

from video_module.videokit.errors import UpstreamUnavailableError

from ..config import AppSettings
from ..dependencies import get_llm_client, get_settings
from ..utils import CamelModel

router = APIRouter(prefix="/api", tags=["SUMMARY"])
logger = logging.getLogger(__name__)


class SummarizeRequest(CamelModel):
    """요약 입력"""

    text: str = Field(..., description="요약할 텍스트")

    @field_validator("text")
    @classmethod
    def validate_text(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("text는 비어 있을 수 없습니다.")
        return value.strip()


@router.post("/summarize", status_code=status.HTTP_200_OK)
async def summarize(
    request: SummarizeRequest,
    llm=Depends(get_llm_client),
    settings: AppSettings = Depends(get_settings),
):
    """텍스트 요약 엔드포인트"""
    text = request.text
    if len(text) > settings.summary.max_text_length:
        logger.info(
            "요약 입력 잘림: len=%d → %d", len(text), settings.summary.max_text_length
        )
        text = text[: settings.summary.max_text_length]

    try:
        summary_text = await llm.summarize(text)
    except UpstreamUnavailableError as exc:
        logger.exception("요약 생성 실패: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=settings.summary.error_message,
        ) from exc

    return {"summary": summary_text}
