"""
VideoKit 모듈 설정
"""
import os
from dotenv import load_dotenv

# .env 파일 로드
load_dotenv()


class VideoConfig:
    """VideoKit 모듈 설정"""

    # ━━━ YouTube Data API v3 ━━━
    YOUTUBE_API_KEY: str = os.getenv("YOUTUBE_API_KEY") or os.getenv("KEY", "")
    YOUTUBE_BASE_URL: str = "https://www.googleapis.com/youtube/v3"
    TIMEOUT: float = float(os.getenv("VIDEO_TIMEOUT", "10"))  # HTTP 타임아웃 (초)
    RELEVANCE_LANGUAGE: str = "en"

    # ━━━ LLM 설정 ━━━
    # OpenAI 키는 서버에 두지 않고 요청의 X-API-Key 헤더로 받는다
    CHAT_MODEL: str = os.getenv("CHAT_MODEL", "gpt-4o")
    VISION_MODEL: str = os.getenv("VISION_MODEL", "gpt-4o")
    LLM_TIMEOUT: float = 30.0
    CHAT_TEMPERATURE: float = 0.7
    MAX_TOKENS_CHAT: int = 800
    MAX_TOKENS_RECOMMENDATION: int = 600
    MAX_TOKENS_SUMMARY: int = 500
    MAX_TOKENS_WHITEBOARD: int = 1000

    @classmethod
    def validate(cls):
        """설정 검증"""
        from . import flags

        if not cls.YOUTUBE_API_KEY:
            raise ValueError("YOUTUBE_API_KEY 환경 변수가 설정되지 않았습니다.")

        if flags.MAX_SEARCH_RESULTS < 1:
            raise ValueError(f"MAX_SEARCH_RESULTS는 1 이상이어야 합니다: {flags.MAX_SEARCH_RESULTS}")

        if flags.TARGET_RESULTS < 1:
            raise ValueError(f"TARGET_RESULTS는 1 이상이어야 합니다: {flags.TARGET_RESULTS}")
