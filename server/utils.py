"""
서버 유틸 함수 모음
"""
from __future__ import annotations

import base64
import binascii
import re
from typing import Any, Iterable, List

from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from video_module.videokit.models import VideoCandidate

from .models import ErrorMessage

_DATA_URL_RE = re.compile(r"^data:(?P<mime>image/[a-zA-Z0-9.+-]+);base64,(?P<data>.+)$", re.DOTALL)


class CamelModel(BaseModel):
    """camelCase/snake_case 둘 다 받는 요청 모델"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def dump_videos(videos: Iterable[VideoCandidate]) -> List[dict[str, Any]]:
    """VideoCandidate를 camelCase JSON으로 직렬화"""
    return [video.model_dump(by_alias=True, mode="json") for video in videos]


def to_image_data_url(image: str) -> str:
    """
    base64 이미지(또는 data URL)를 검증하고 data URL로 정규화

    Raises:
        ValueError: base64 디코딩 실패 또는 빈 이미지
    """
    image = image.strip()
    match = _DATA_URL_RE.match(image)
    mime, payload = (match.group("mime"), match.group("data")) if match else ("image/png", image)
    payload = "".join(payload.split())
    try:
        decoded = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise ValueError("image는 올바른 base64 문자열이어야 합니다.") from exc
    if not decoded:
        raise ValueError("image가 비어 있습니다.")
    return f"data:{mime};base64,{payload}"


def describe_validation_error(exc: RequestValidationError) -> str:
    """검증 오류를 한 줄 메시지로 변환 (첫 번째 오류 기준)"""
    errors = exc.errors()
    if not errors:
        return ErrorMessage.INVALID_REQUEST.value
    first = errors[0]
    loc = [str(part) for part in first.get("loc", ()) if part not in ("body", "query", "header")]
    msg = first.get("msg", ErrorMessage.INVALID_REQUEST.value)
    return f"{'.'.join(loc)}: {msg}" if loc else msg
