"""YouTube adapter using the Data API v3 with a server-held API key."""

from typing import Any

import httpx

from tube_companion.adapters.youtube.base import MAX_COMMENT_RESULTS, YouTubeAdapter
from tube_companion.config import settings
from tube_companion.domain.enums import MutationOutcome
from tube_companion.domain.errors import NotFoundError, UpstreamError
from tube_companion.domain.models import MutationResult, VideoDetails
from tube_companion.logging import get_logger

logger = get_logger(__name__)


class YouTubeDataAPIAdapter(YouTubeAdapter):
    """Reads video metadata and comment threads from the YouTube Data API.

    Uses:
    - videos.list (part=snippet,statistics) for details and counters
    - commentThreads.list (part=snippet) for top-level comments

    Writes (videos.update, comments.insert, comments.delete) need the
    youtube.force-ssl OAuth scope, which an API key cannot grant. They are
    logged and answered with a SIMULATED outcome.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the adapter.

        Args:
            api_key: YouTube Data API key.
            base_url: API root, defaults to ``settings.youtube_api_base_url``.
            client: Optional pre-built HTTP client (used by tests).
        """
        self.api_key = api_key
        self.base_url = (base_url or settings.youtube_api_base_url).rstrip("/")
        self._client = client

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=settings.youtube_request_timeout)
        return self._client

    async def _get(self, path: str, params: dict[str, Any]) -> dict[str, Any]:
        """Issue a GET against the Data API and return the decoded body."""
        client = await self._get_client()
        try:
            response = await client.get(
                f"{self.base_url}/{path}",
                params={**params, "key": self.api_key},
            )
        except httpx.HTTPError as e:
            logger.error("youtube_api_unreachable", path=path, error=str(e))
            raise UpstreamError(f"YouTube API error: {e}") from e

        try:
            data = response.json()
        except ValueError:
            data = {}
        if not isinstance(data, dict):
            data = {}

        if not response.is_success:
            error = data.get("error")
            message = (error.get("message") if isinstance(error, dict) else None) or "Unknown error"
            logger.error(
                "youtube_api_error",
                path=path,
                status=response.status_code,
                message=message,
            )
            raise UpstreamError(f"YouTube API error: {message}", status_code=response.status_code)

        return data

    async def fetch_video_details(self, video_id: str) -> VideoDetails:
        data = await self._get("videos", {"part": "snippet,statistics", "id": video_id})

        items = data.get("items") or []
        if not items:
            logger.warning("youtube_video_not_found", video_id=video_id)
            raise NotFoundError("Video not found")

        video = items[0]
        snippet = video.get("snippet", {})
        return VideoDetails(
            id=video["id"],
            title=snippet.get("title", ""),
            description=snippet.get("description", ""),
            thumbnails=snippet.get("thumbnails", {}),
            statistics=video.get("statistics", {}),
            published_at=snippet.get("publishedAt"),
        )

    async def fetch_video_comments(
        self,
        video_id: str,
        max_results: int = MAX_COMMENT_RESULTS,
    ) -> list[dict[str, Any]]:
        data = await self._get(
            "commentThreads",
            {
                "part": "snippet",
                "videoId": video_id,
                "maxResults": min(max_results, MAX_COMMENT_RESULTS),
            },
        )

        items: list[dict[str, Any]] = data.get("items") or []
        logger.debug("youtube_comments_fetched", video_id=video_id, count=len(items))
        return items

    async def update_video_details(
        self,
        video_id: str,
        title: str | None,
        description: str | None,
    ) -> MutationResult:
        logger.info("youtube_update_video_simulated", video_id=video_id, title=title)
        return MutationResult(MutationOutcome.SIMULATED, "Video updated (demo mode)")

    async def post_comment(
        self,
        video_id: str,
        text: str,
        parent_comment_id: str | None = None,
    ) -> MutationResult:
        logger.info(
            "youtube_post_comment_simulated",
            video_id=video_id,
            parent_comment_id=parent_comment_id,
            length=len(text),
        )
        return MutationResult(MutationOutcome.SIMULATED, "Comment posted (demo mode)")

    async def delete_comment(self, comment_id: str) -> MutationResult:
        logger.info("youtube_delete_comment_simulated", comment_id=comment_id)
        return MutationResult(MutationOutcome.SIMULATED, "Comment deleted (demo mode)")

    async def health_check(self) -> bool:
        """Check that the API key is accepted."""
        try:
            await self._get("videoCategories", {"part": "snippet", "regionCode": "US"})
            return True
        except UpstreamError as e:
            logger.warning("youtube_health_check_failed", error=str(e))
            return False

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None
