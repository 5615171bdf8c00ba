"""
채팅 API (일반 대화 + 영상 추천)
"""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import Field, field_validator

from video_module.videokit.errors import UpstreamUnavailableError

from ..config import AppSettings
from ..dependencies import (
    get_classifier,
    get_llm_client,
    get_settings,
    get_topic_extractor,
    get_video_service,
)
from ..models import ReplyMode
from ..utils import CamelModel, dump_videos

router = APIRouter(prefix="/api", tags=["CHAT"])
logger = logging.getLogger(__name__)


class ChatRequest(CamelModel):
    """채팅 입력"""

    message: str = Field(..., description="사용자 메시지")

    @field_validator("message")
    @classmethod
    def validate_message(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("message는 비어 있을 수 없습니다.")
        return value.strip()


@router.post("/chat", status_code=status.HTTP_200_OK)
async def chat(
    request: ChatRequest,
    llm=Depends(get_llm_client),
    video_service=Depends(get_video_service),
    classifier=Depends(get_classifier),
    topic_extractor=Depends(get_topic_extractor),
    settings: AppSettings = Depends(get_settings),
):
    """채팅 엔드포인트 (영상 요청이면 검색/추천 파이프라인으로 분기)"""
    message = request.message

    if classifier.is_video_request(message):
        topic = topic_extractor.extract(message)
        logger.info("영상 요청: topic=%r subtopics=%s", topic.text, topic.subtopics)
        result = await video_service.recommend(topic, llm)
        return {
            "reply": result.reply,
            "videos": dump_videos(result.videos),
            "mode": result.mode,
        }

    try:
        reply = await llm.complete(
            message,
            max_tokens=settings.chat.max_tokens,
            temperature=settings.chat.temperature,
        )
    except UpstreamUnavailableError as exc:
        logger.exception("채팅 응답 생성 실패: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=settings.chat.error_message,
        ) from exc

    return {"reply": reply, "mode": ReplyMode.CHAT.value}
