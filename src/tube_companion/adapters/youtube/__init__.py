"""YouTube platform adapters."""

from tube_companion.adapters.youtube.base import MAX_COMMENT_RESULTS, YouTubeAdapter
from tube_companion.adapters.youtube.data_api import YouTubeDataAPIAdapter
from tube_companion.adapters.youtube.stub import StubYouTubeAdapter
from tube_companion.config import settings
from tube_companion.domain.errors import ConfigurationError


def get_youtube_adapter() -> YouTubeAdapter:
    """Get the configured YouTube adapter.

    Raises:
        ConfigurationError: If the Data API adapter is selected without an API key.
    """
    provider_name = settings.youtube_provider.lower()

    if provider_name == "stub":
        return StubYouTubeAdapter()

    if not settings.youtube_api_key:
        raise ConfigurationError("YouTube API key not configured")
    return YouTubeDataAPIAdapter(api_key=settings.youtube_api_key)


__all__ = [
    "MAX_COMMENT_RESULTS",
    "YouTubeAdapter",
    "YouTubeDataAPIAdapter",
    "StubYouTubeAdapter",
    "get_youtube_adapter",
]
