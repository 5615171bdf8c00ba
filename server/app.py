"""
FastAPI 애플리케이션 생성
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any, Callable

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from video_module.videokit import QueryClassifier, TopicExtractor, VideoLLMClient
from video_module.videokit.errors import UpstreamUnavailableError

from .config import AppSettings
from .models import ErrorMessage
from .routes import chat_router, pdf_router, summary_router, video_router, whiteboard_router
from .search_log import SearchLogWriter
from .utils import describe_validation_error

logger = logging.getLogger(__name__)


def _ensure_service(service: Any, factory: Callable[[], Any]):
    """주입된 서비스가 없으면 기본 인스턴스 생성"""
    if service is not None:
        return service
    return factory()


def _default_video_service(settings: AppSettings):
    from video_module.videokit.service import VideoSearchService

    return VideoSearchService(
        trusted_channels=settings.video.trusted_channels,
        strategy_templates=settings.video.strategy_templates,
        target_results=settings.video.target_results,
        min_duration_seconds=settings.video.min_duration_seconds,
    )


def _register_exception_handlers(app: FastAPI) -> None:
    """모든 오류를 {"error": ...} 형태로 응답"""

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": describe_validation_error(exc)},
        )

    @app.exception_handler(UpstreamUnavailableError)
    async def upstream_exception_handler(request: Request, exc: UpstreamUnavailableError):
        # 외부 API 오류 내용은 로그에만 남긴다
        logger.error("외부 서비스 오류 (%s %s): %s", request.method, request.url.path, exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": ErrorMessage.UPSTREAM_FAILURE.value},
        )


def create_app(
    settings: AppSettings | None = None,
    *,
    video_service=None,
    llm_factory: Callable[[str], Any] | None = None,
    search_log=None,
) -> FastAPI:
    """FastAPI 앱 생성"""
    base_settings = settings or AppSettings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # 주입되지 않은 서비스는 기동 시점에 생성
        app.state.video_service = _ensure_service(
            app.state.video_service, lambda: _default_video_service(base_settings)
        )
        try:
            yield
        finally:
            logger.info("BALVIS gateway 종료")

    app = FastAPI(
        title="BALVIS Study Assistant Gateway",
        version="1.0.0",
        description="BALVIS 학습 도우미를 위한 채팅/영상 검색 API Gateway",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.state.app_settings = base_settings
    app.state.video_service = video_service
    app.state.llm_factory = llm_factory or VideoLLMClient
    app.state.search_log = _ensure_service(
        search_log, lambda: SearchLogWriter(base_settings.search_log.csv_path)
    )
    app.state.classifier = QueryClassifier(
        base_settings.video.trigger_phrases, base_settings.video.directive_prefix
    )
    app.state.topic_extractor = TopicExtractor(
        base_settings.video.trigger_phrases, base_settings.video.directive_prefix
    )

    _register_exception_handlers(app)

    app.include_router(chat_router)
    app.include_router(video_router)
    app.include_router(summary_router)
    app.include_router(pdf_router)
    app.include_router(whiteboard_router)

    @app.get("/health")
    async def health_check():
        """간단한 헬스 체크"""
        return {"status": "ok"}

    return app
