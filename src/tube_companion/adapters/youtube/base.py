"""Base interface for YouTube platform adapters."""

from abc import ABC, abstractmethod
from typing import Any

from tube_companion.domain.models import MutationResult, VideoDetails

MAX_COMMENT_RESULTS = 100


class YouTubeAdapter(ABC):
    """Abstract base class for the platform side of the proxy.

    Implementations:
    - YouTubeDataAPIAdapter: Reads from the YouTube Data API with an API key
    - StubYouTubeAdapter: Returns canned data for development and tests

    Neither implementation holds OAuth credentials, so write actions are
    acknowledged with a SIMULATED outcome and leave the platform unchanged.
    """

    @abstractmethod
    async def fetch_video_details(self, video_id: str) -> VideoDetails:
        """Fetch snippet and statistics for one video.

        Raises:
            NotFoundError: If the platform knows no such video.
            UpstreamError: If the platform answers with an error status.
        """
        ...

    @abstractmethod
    async def fetch_video_comments(
        self,
        video_id: str,
        max_results: int = MAX_COMMENT_RESULTS,
    ) -> list[dict[str, Any]]:
        """Fetch top-level comment threads, in the platform's item shape.

        Returns an empty list when the video has no comments.
        """
        ...

    @abstractmethod
    async def update_video_details(
        self,
        video_id: str,
        title: str | None,
        description: str | None,
    ) -> MutationResult:
        """Update the title and description of a video."""
        ...

    @abstractmethod
    async def post_comment(
        self,
        video_id: str,
        text: str,
        parent_comment_id: str | None = None,
    ) -> MutationResult:
        """Post a comment, or a reply when ``parent_comment_id`` is given."""
        ...

    @abstractmethod
    async def delete_comment(self, comment_id: str) -> MutationResult:
        """Delete a comment."""
        ...

    async def health_check(self) -> bool:
        """Check if the platform API is reachable."""
        return True

    async def close(self) -> None:
        """Release any held connections."""
        return None
