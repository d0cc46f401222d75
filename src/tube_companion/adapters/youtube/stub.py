"""Stub YouTube adapter for development and testing."""

from typing import Any

from tube_companion.adapters.youtube.base import MAX_COMMENT_RESULTS, YouTubeAdapter
from tube_companion.domain.enums import MutationOutcome
from tube_companion.domain.errors import NotFoundError
from tube_companion.domain.models import MutationResult, VideoDetails
from tube_companion.logging import get_logger

logger = get_logger(__name__)

SAMPLE_COMMENTS = [
    {
        "id": "comment1",
        "snippet": {
            "videoId": "",
            "topLevelComment": {
                "id": "comment1",
                "snippet": {
                    "authorDisplayName": "John Doe",
                    "authorChannelId": {"value": "UCxxxxxxxxxxxxxxxxxxxxxxx"},
                    "textDisplay": "Great video! Very helpful content.",
                    "likeCount": 12,
                    "publishedAt": "2025-01-15T12:00:00Z",
                    "updatedAt": "2025-01-15T12:00:00Z",
                },
            },
            "totalReplyCount": 0,
        },
    },
    {
        "id": "comment2",
        "snippet": {
            "videoId": "",
            "topLevelComment": {
                "id": "comment2",
                "snippet": {
                    "authorDisplayName": "Jane Smith",
                    "authorChannelId": {"value": "UCyyyyyyyyyyyyyyyyyyyyyyy"},
                    "textDisplay": "Thanks for sharing this tutorial. Looking forward to more!",
                    "likeCount": 8,
                    "publishedAt": "2025-01-15T14:30:00Z",
                    "updatedAt": "2025-01-15T14:30:00Z",
                },
            },
            "totalReplyCount": 0,
        },
    },
]


class StubYouTubeAdapter(YouTubeAdapter):
    """Stub adapter that serves canned metadata for any video ID.

    IDs listed in ``missing`` behave as unknown to the platform, and IDs in
    ``without_comments`` have no comment threads.
    """

    def __init__(
        self,
        missing: set[str] | None = None,
        without_comments: set[str] | None = None,
    ) -> None:
        self.missing = missing or set()
        self.without_comments = without_comments or set()
        self.mutations: list[tuple[str, dict[str, Any]]] = []

    async def fetch_video_details(self, video_id: str) -> VideoDetails:
        logger.info("stub_fetch_video_details", video_id=video_id)
        if video_id in self.missing:
            raise NotFoundError("Video not found")

        return VideoDetails(
            id=video_id,
            title="Sample YouTube Video",
            description=(
                "This is a sample video description that demonstrates "
                "the YouTube companion dashboard functionality."
            ),
            thumbnails={
                "default": {"url": f"https://img.youtube.com/vi/{video_id}/default.jpg"},
                "medium": {"url": f"https://img.youtube.com/vi/{video_id}/mqdefault.jpg"},
                "high": {"url": f"https://img.youtube.com/vi/{video_id}/hqdefault.jpg"},
                "maxres": {"url": f"https://img.youtube.com/vi/{video_id}/maxresdefault.jpg"},
            },
            statistics={
                "viewCount": "1234567",
                "likeCount": "89012",
                "commentCount": "3456",
            },
            published_at="2025-01-15T10:00:00Z",
        )

    async def fetch_video_comments(
        self,
        video_id: str,
        max_results: int = MAX_COMMENT_RESULTS,
    ) -> list[dict[str, Any]]:
        logger.info("stub_fetch_video_comments", video_id=video_id)
        if video_id in self.without_comments:
            return []

        threads = []
        for sample in SAMPLE_COMMENTS[: min(max_results, MAX_COMMENT_RESULTS)]:
            thread = {**sample, "snippet": {**sample["snippet"], "videoId": video_id}}
            threads.append(thread)
        return threads

    async def update_video_details(
        self,
        video_id: str,
        title: str | None,
        description: str | None,
    ) -> MutationResult:
        self.mutations.append(
            ("updateVideoDetails", {"video_id": video_id, "title": title, "description": description})
        )
        return MutationResult(MutationOutcome.SIMULATED, "Video updated (demo mode)")

    async def post_comment(
        self,
        video_id: str,
        text: str,
        parent_comment_id: str | None = None,
    ) -> MutationResult:
        self.mutations.append(
            ("postComment", {"video_id": video_id, "text": text, "parent_comment_id": parent_comment_id})
        )
        return MutationResult(MutationOutcome.SIMULATED, "Comment posted (demo mode)")

    async def delete_comment(self, comment_id: str) -> MutationResult:
        self.mutations.append(("deleteComment", {"comment_id": comment_id}))
        return MutationResult(MutationOutcome.SIMULATED, "Comment deleted (demo mode)")
