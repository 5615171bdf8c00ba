"""
로컬 실행 진입점: python -m server
"""
import logging
import os

import uvicorn

from video_module.videokit.config import VideoConfig


def main() -> None:
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO"),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    # YOUTUBE_API_KEY 누락 시 기동 단계에서 실패
    VideoConfig.validate()
    uvicorn.run(
        "server.app:create_app",
        factory=True,
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000")),
    )


if __name__ == "__main__":
    main()
