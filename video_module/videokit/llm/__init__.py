from .openai_client import VideoLLMClient

__all__ = ["VideoLLMClient"]
