"""
VideoKit 예외 정의
"""


class VideoKitError(Exception):
    """VideoKit 기본 예외"""


class UpstreamUnavailableError(VideoKitError):
    """외부 API(YouTube, OpenAI) 네트워크 오류 또는 non-2xx 응답"""


class VideoAPIError(UpstreamUnavailableError):
    """YouTube Data API 호출 실패"""


class LLMError(UpstreamUnavailableError):
    """OpenAI 호출 실패"""
