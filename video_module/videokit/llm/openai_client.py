"""
VideoKit LLM 클라이언트 (OpenAI)
"""
from __future__ import annotations

import logging

from openai import AsyncOpenAI, OpenAIError

from ..config.video_config import VideoConfig
from ..config.prompts import SUMMARY_SYSTEM_PROMPT, WHITEBOARD_PROMPT
from ..errors import LLMError

logger = logging.getLogger(__name__)


class VideoLLMClient:
    """
    채팅/요약/화이트보드 분석용 LLM 클라이언트

    OpenAI 키는 요청마다 사용자가 X-API-Key 헤더로 넘긴다.
    """

    def __init__(self, api_key: str, client: AsyncOpenAI | None = None):
        self.api_key = api_key
        self.client = client or AsyncOpenAI(api_key=api_key, timeout=VideoConfig.LLM_TIMEOUT)

    async def close(self) -> None:
        """요청마다 만든 AsyncOpenAI의 HTTP 연결 풀 정리"""
        await self.client.close()

    async def _chat(self, messages: list, *, model: str, max_tokens: int, temperature: float) -> str:
        try:
            resp = await self.client.chat.completions.create(
                model=model,
                messages=messages,
                max_tokens=max_tokens,
                temperature=temperature,
            )
        except OpenAIError as exc:
            logger.warning("OpenAI 호출 실패 (model=%s): %s", model, exc)
            raise LLMError(f"OpenAI 호출 실패: {exc.__class__.__name__}") from exc

        if not resp.choices:
            raise LLMError("OpenAI 응답에 choices가 없습니다.")
        content = resp.choices[0].message.content or ""
        return content.strip()

    async def complete(
        self,
        prompt: str,
        *,
        max_tokens: int = VideoConfig.MAX_TOKENS_CHAT,
        temperature: float = VideoConfig.CHAT_TEMPERATURE,
    ) -> str:
        """단일 사용자 메시지 완성"""
        return await self._chat(
            [{"role": "user", "content": prompt}],
            model=VideoConfig.CHAT_MODEL,
            max_tokens=max_tokens,
            temperature=temperature,
        )

    async def summarize(self, text: str) -> str:
        """텍스트 요약"""
        return await self._chat(
            [
                {"role": "system", "content": SUMMARY_SYSTEM_PROMPT},
                {"role": "user", "content": text},
            ],
            model=VideoConfig.CHAT_MODEL,
            max_tokens=VideoConfig.MAX_TOKENS_SUMMARY,
            temperature=0.3,
        )

    async def analyze_image(self, image_data_url: str) -> str:
        """화이트보드 이미지 분석 (vision)"""
        return await self._chat(
            [
                {
                    "role": "user",
                    "content": [
                        {"type": "text", "text": WHITEBOARD_PROMPT},
                        {"type": "image_url", "image_url": {"url": image_data_url}},
                    ],
                }
            ],
            model=VideoConfig.VISION_MODEL,
            max_tokens=VideoConfig.MAX_TOKENS_WHITEBOARD,
            temperature=0.4,
        )
