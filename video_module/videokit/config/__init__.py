"""
VideoKit 설정 모듈
"""
from . import flags
from .video_config import VideoConfig
from .prompts import (
    RECOMMENDATION_PROMPT,
    CANDIDATE_BLOCK,
    SUMMARY_SYSTEM_PROMPT,
    WHITEBOARD_PROMPT,
)

__all__ = [
    "flags",
    "VideoConfig",
    "RECOMMENDATION_PROMPT",
    "CANDIDATE_BLOCK",
    "SUMMARY_SYSTEM_PROMPT",
    "WHITEBOARD_PROMPT",
]
