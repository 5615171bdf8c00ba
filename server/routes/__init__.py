"""
FastAPI 라우터 모음
"""

from .chat import router as chat_router
from .video import router as video_router
from .summary import router as summary_router
from .pdf import router as pdf_router
from .whiteboard import router as whiteboard_router

__all__ = ["chat_router", "video_router", "summary_router", "pdf_router", "whiteboard_router"]
