"""
영상 검색 CSV 로그 (append-only)
"""
from __future__ import annotations

import csv
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from video_module.videokit.models import VideoCandidate

logger = logging.getLogger(__name__)

CSV_HEADER = ["timestamp", "query", "video_id", "title", "channel", "views"]


class SearchLogWriter:
    """검색어와 첫 번째 결과를 CSV 한 줄로 기록 (잠금 없음)"""

    def __init__(self, csv_path: Path | str):
        self.csv_path = Path(csv_path)

    def append(
        self,
        query: str,
        video: Optional[VideoCandidate],
        timestamp: Optional[datetime] = None,
    ) -> list[str]:
        timestamp = timestamp or datetime.now(timezone.utc)
        row = [
            timestamp.isoformat(),
            query,
            video.id if video else "",
            video.title if video else "",
            video.channel_title if video else "",
            str(video.view_count) if video else "",
        ]

        self.csv_path.parent.mkdir(parents=True, exist_ok=True)
        is_new = not self.csv_path.exists() or self.csv_path.stat().st_size == 0
        with self.csv_path.open("a", newline="", encoding="utf-8") as fp:
            writer = csv.writer(fp)
            if is_new:
                writer.writerow(CSV_HEADER)
            writer.writerow(row)

        logger.info("검색 로그 기록: query=%r video_id=%s", query, row[2] or "-")
        return row
