"""
영상 요청 판별 및 검색 주제 추출
"""
from __future__ import annotations

import re
from typing import Iterable, List

from .config import flags
from .models import TopicQuery

# [동사구] [a|me a|some] video(s) [연결어] <주제> [?.]
_TOPIC_RE = re.compile(
    r"(?:find|show|get|search for)?\s*(?:a|me a|some)?\s*videos?\b\s*"
    r"(?:(?:about|on|for|related to|regarding)\b)?[:\s]*(.+?)\s*[?.]*\s*$",
    re.IGNORECASE,
)
_CONNECTORS = {"about", "on", "for", "related to", "regarding"}


class QueryClassifier:
    """메시지가 영상 요청인지 판별 (포함 여부 검사)"""

    def __init__(
        self,
        trigger_phrases: Iterable[str] = flags.TRIGGER_PHRASES,
        directive_prefix: str = flags.DIRECTIVE_PREFIX,
    ):
        self.trigger_phrases = [p.lower() for p in trigger_phrases if p.strip()]
        self.directive_prefix = directive_prefix.lower()

    def is_directive(self, message: str) -> bool:
        """다중 주제 지시문("Find educational videos about: a, b")은 시작 문자열로만 판별"""
        return bool(self.directive_prefix) and message.strip().lower().startswith(self.directive_prefix)

    def is_video_request(self, message: str) -> bool:
        lowered = message.lower()
        if self.is_directive(message):
            return True
        return any(phrase in lowered for phrase in self.trigger_phrases)


class TopicExtractor:
    """자연어 메시지에서 검색 주제 추출"""

    def __init__(
        self,
        trigger_phrases: Iterable[str] = flags.TRIGGER_PHRASES,
        directive_prefix: str = flags.DIRECTIVE_PREFIX,
    ):
        # 긴 문구부터 제거해야 "find me a video"가 "find a video"보다 먼저 지워진다
        self.trigger_phrases = sorted((p for p in trigger_phrases if p.strip()), key=len, reverse=True)
        self.classifier = QueryClassifier(self.trigger_phrases, directive_prefix)

    def extract(self, message: str) -> TopicQuery:
        text = message.strip().lower()

        if self.classifier.is_directive(text):
            _, _, rest = text.partition(":")
            topic = rest.strip()
            subtopics = _split_subtopics(topic)
            return TopicQuery(text=topic, subtopics=subtopics, is_multi=len(subtopics) > 1)

        match = _TOPIC_RE.search(text)
        if match:
            topic = match.group(1).strip()
            if topic in _CONNECTORS:
                # "find a video about" 처럼 주제가 비어 있는 경우
                topic = ""
        else:
            topic = self._strip_triggers(text)
        return TopicQuery(text=topic, subtopics=[topic] if topic else [])

    def _strip_triggers(self, text: str) -> str:
        for phrase in self.trigger_phrases:
            text = re.sub(re.escape(phrase), "", text, flags=re.IGNORECASE)
        return text.strip()


def _split_subtopics(topic: str) -> List[str]:
    return [part.strip() for part in topic.split(",") if part.strip()]
