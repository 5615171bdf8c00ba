"""
공유 데이터 모델과 Enum 정의
"""
from __future__ import annotations

from enum import Enum


class ReplyMode(str, Enum):
    """채팅 응답 생성 방식"""
    CHAT = "chat"        # 일반 LLM 채팅
    LLM = "llm"          # LLM이 후보 중 1개 선택
    DIRECT = "direct"    # 번호 목록 직접 생성
    EMPTY = "empty"      # 결과 없음 / 주제 없음


class ErrorMessage(str, Enum):
    """클라이언트에 노출하는 오류 문구"""
    MISSING_API_KEY = "API key is required"
    INVALID_REQUEST = "Invalid request"
    UPSTREAM_FAILURE = "Upstream service unavailable"
