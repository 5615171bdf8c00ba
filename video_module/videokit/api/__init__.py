from .youtube_client import YouTubeAPIClient, YouTubeSearchItem, YouTubeVideoDetail

__all__ = ["YouTubeAPIClient", "YouTubeSearchItem", "YouTubeVideoDetail"]
