"""
FastAPI 서버 설정 정의
"""
from __future__ import annotations

from pathlib import Path
from typing import List

from pydantic import BaseModel, Field

from video_module.videokit.config import flags


class ChatSettings(BaseModel):
    """일반 채팅 설정"""

    max_tokens: int = Field(default=800, ge=1, description="최대 토큰")
    temperature: float = Field(default=0.7, ge=0.0, le=2.0, description="샘플링 온도")
    error_message: str = Field(
        default="Failed to get a response from the language model.",
        description="LLM 실패 시 클라이언트에 보낼 일반 오류 문구",
    )


class VideoSettings(BaseModel):
    """영상 검색/추천 설정"""

    trigger_phrases: List[str] = Field(
        default_factory=lambda: list(flags.TRIGGER_PHRASES),
        description="영상 요청으로 판별할 문구 (포함 여부)",
    )
    directive_prefix: str = Field(
        default=flags.DIRECTIVE_PREFIX,
        description="다중 주제 지시문 접두사 (시작 문자열)",
    )
    trusted_channels: List[str] = Field(
        default_factory=lambda: list(flags.TRUSTED_CHANNELS),
        description="첫 번째 검색 전략에 쓸 신뢰 채널 목록",
    )
    strategy_templates: List[str] = Field(
        default_factory=lambda: list(flags.STRATEGY_TEMPLATES),
        description="검색 전략 쿼리 템플릿 ({topic} 치환)",
    )
    target_results: int = Field(default=flags.TARGET_RESULTS, ge=1, description="조기 종료 누적 개수")
    max_results: int = Field(default=flags.DEFAULT_MAX_RESULTS, ge=1, le=20, description="검색 API 기본 반환 개수")
    min_duration_seconds: int = Field(default=flags.MIN_DURATION_SECONDS, ge=0, description="쇼츠 제외 기준 (초)")


class SummarySettings(BaseModel):
    """요약 설정"""

    max_text_length: int = Field(default=50_000, ge=1, description="요약 입력 최대 글자 수")
    error_message: str = Field(default="Failed to summarize text.", description="LLM 실패 시 오류 문구")


class PDFSettings(BaseModel):
    """PDF 텍스트 추출 설정"""

    max_upload_bytes: int = Field(default=10 * 1024 * 1024, ge=1, description="업로드 최대 크기 (바이트)")


class WhiteboardSettings(BaseModel):
    """화이트보드 분석 설정"""

    suggested_actions: List[str] = Field(
        default_factory=lambda: [
            "Explain this in more detail",
            "Find a video about this topic",
            "Give me a practice problem",
            "Summarize the key concepts",
        ],
        description="분석 결과와 함께 보낼 후속 질문",
    )
    error_message: str = Field(default="Failed to analyze the whiteboard.", description="LLM 실패 시 오류 문구")


class SearchLogSettings(BaseModel):
    """영상 검색 CSV 로그 설정"""

    csv_path: Path = Field(
        default=Path("server_storage/video_searches.csv"),
        description="검색 로그 CSV 경로 (없으면 헤더와 함께 생성)",
    )


class AppSettings(BaseModel):
    """서버 전체 설정"""

    chat: ChatSettings = Field(default_factory=ChatSettings)
    video: VideoSettings = Field(default_factory=VideoSettings)
    summary: SummarySettings = Field(default_factory=SummarySettings)
    pdf: PDFSettings = Field(default_factory=PDFSettings)
    whiteboard: WhiteboardSettings = Field(default_factory=WhiteboardSettings)
    search_log: SearchLogSettings = Field(default_factory=SearchLogSettings)
