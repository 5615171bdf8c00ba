"""
VideoKit 데이터 모델 정의
"""
from datetime import datetime, timezone
from typing import List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

WATCH_URL = "https://www.youtube.com/watch?v={video_id}"
EMBED_URL = "https://www.youtube.com/embed/{video_id}"


class VideoCandidate(BaseModel):
    """검색 결과와 상세 조회 결과를 합친 동영상 후보 (요청 단위, 불변)"""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    id: str = Field(..., min_length=1, description="YouTube 동영상 ID")
    title: str = Field(default="", description="동영상 제목")
    channel_title: str = Field(default="", description="채널명")
    description: str = Field(default="", description="동영상 설명")
    published_at: Optional[datetime] = Field(default=None, description="게시 시각")
    view_count: int = Field(default=0, ge=0, description="조회수")
    like_count: int = Field(default=0, ge=0, description="좋아요 수")
    duration_seconds: int = Field(default=0, ge=0, description="길이 (초)")
    embeddable: bool = Field(default=False, description="외부 플레이어 임베드 허용 여부")
    url: str = Field(default="", description="시청 URL")
    embed_url: str = Field(default="", description="임베드 URL")

    @model_validator(mode="before")
    @classmethod
    def fill_urls(cls, data):
        """url/embedUrl이 비어 있으면 ID로 생성"""
        if not isinstance(data, dict) or not data.get("id"):
            return data
        data = dict(data)
        if not data.get("url"):
            data["url"] = WATCH_URL.format(video_id=data["id"])
        if not (data.get("embed_url") or data.get("embedUrl")):
            data["embedUrl"] = EMBED_URL.format(video_id=data["id"])
        return data

    @field_validator("view_count", "like_count", "duration_seconds", mode="before")
    @classmethod
    def coerce_count(cls, v) -> int:
        """누락/숫자가 아닌 통계값은 0으로 처리"""
        try:
            count = int(v)
        except (TypeError, ValueError):
            return 0
        return max(0, count)

    @field_validator("published_at", mode="before")
    @classmethod
    def blank_published_at(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("published_at")
    @classmethod
    def ensure_utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        if v is not None and v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v


class SearchStrategy(BaseModel):
    """토픽을 검색 쿼리로 바꾸는 전략 (순서대로 시도)"""

    model_config = ConfigDict(frozen=True)

    label: str = Field(..., description="전략 이름 (로그용)")
    query_template: str = Field(..., description="{topic} 자리표시자를 포함한 쿼리 템플릿")

    def render(self, topic: str) -> str:
        return self.query_template.replace("{topic}", topic).strip()


class RankedResult(BaseModel):
    """점수가 계산된 후보"""

    model_config = ConfigDict(frozen=True)

    candidate: VideoCandidate
    score: float


class TopicQuery(BaseModel):
    """메시지에서 추출한 검색 주제"""

    text: str = Field(default="", description="검색 주제 원문")
    subtopics: List[str] = Field(default_factory=list, description="다중 주제 요청의 하위 주제")
    is_multi: bool = Field(default=False, description="다중 주제 지시문 여부")


class TextSegment(BaseModel):
    """마크업 파서 결과: 일반 텍스트"""

    kind: Literal["text"] = "text"
    text: str


class VideoRecommendation(BaseModel):
    """마크업 파서 결과: URL 없는 "제목 by 채널" 추천 줄"""

    kind: Literal["recommendation"] = "recommendation"
    title: str
    channel: str
    raw: str = Field(..., description="원문에서 매칭된 구간 (그대로 복원용)")


class VideoReference(BaseModel):
    """마크업 파서 결과: 동영상 링크"""

    kind: Literal["video"] = "video"
    video_id: str
    title: str
    url: str
    raw: str = Field(..., description="원문에서 매칭된 구간 (그대로 복원용)")


MarkupPart = Union[TextSegment, VideoReference, VideoRecommendation]


class VideoReply(BaseModel):
    """채팅 영상 요청에 대한 최종 응답"""

    reply: str = Field(..., description="사용자에게 보여줄 텍스트")
    videos: List[VideoCandidate] = Field(default_factory=list, description="응답에 사용된 후보")
    mode: Literal["llm", "direct", "empty"] = Field(..., description="응답 생성 방식")
