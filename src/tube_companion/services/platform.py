"""Client for the YouTube proxy endpoint."""

from typing import Any

import httpx

from tube_companion.config import settings
from tube_companion.domain.enums import ProxyAction
from tube_companion.domain.models import Comment, MutationResult, VideoDetails, parse_timestamp
from tube_companion.logging import get_logger
from tube_companion.services.auth import AuthSession
from tube_companion.services.events import EventLogger

logger = get_logger(__name__)


class ProxyCallError(Exception):
    """The proxy answered with an error or could not be reached."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


def comment_from_thread(item: dict[str, Any]) -> Comment:
    """Map a platform comment thread (or bare comment) to a Comment."""
    snippet = item.get("snippet", {})
    top_level = snippet.get("topLevelComment")
    if top_level:
        snippet = top_level.get("snippet", {})

    return Comment(
        id=str(item.get("id", "")),
        author_name=snippet.get("authorDisplayName", ""),
        text=snippet.get("textDisplay", ""),
        like_count=int(snippet.get("likeCount", 0) or 0),
        published_at=parse_timestamp(snippet.get("publishedAt")),
        parent_id=snippet.get("parentId"),
    )


class PlatformClient:
    """Wraps the five proxy actions for the dashboard.

    No method raises: failures are recorded as error events and turned into
    ``None``, an empty list or a FAILED ``MutationResult``. ``is_loading`` is
    set for the duration of every call.
    """

    def __init__(
        self,
        events: EventLogger,
        auth: AuthSession | None = None,
        proxy_url: str | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            events: Event logger for API-call and error events.
            auth: Session whose bearer token is forwarded to the proxy.
            proxy_url: Proxy endpoint, defaults to ``settings.proxy_url``.
            client: Optional pre-built HTTP client (used by tests).
        """
        self.events = events
        self.auth = auth
        self.proxy_url = proxy_url or settings.proxy_url
        self._client = client
        self.is_loading = False

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=settings.proxy_request_timeout)
        return self._client

    async def _invoke(self, action: ProxyAction, **params: Any) -> Any:
        """POST one action to the proxy and return the decoded body."""
        body = {"action": action.value, **{k: v for k, v in params.items() if v is not None}}
        headers = {}
        if self.auth is not None and self.auth.access_token:
            headers["Authorization"] = f"Bearer {self.auth.access_token}"

        client = await self._get_client()
        try:
            response = await client.post(self.proxy_url, json=body, headers=headers)
        except httpx.HTTPError as e:
            raise ProxyCallError(f"Proxy unreachable: {e}") from e

        try:
            data = response.json()
        except ValueError:
            data = None

        if response.status_code != 200:
            message = data.get("error") if isinstance(data, dict) else None
            raise ProxyCallError(message or f"Proxy error: {response.status_code}", response.status_code)

        return data

    async def fetch_video_details(self, video_id: str) -> VideoDetails | None:
        self.is_loading = True
        try:
            data = await self._invoke(ProxyAction.FETCH_VIDEO_DETAILS, videoId=video_id)
            self.events.log_api_call("/youtube/videos", "GET", 200, {"video_id": video_id})
            return VideoDetails.from_payload(data)
        except (ProxyCallError, KeyError, TypeError) as e:
            self._record_failure("Failed to fetch video details", e, video_id=video_id)
            return None
        finally:
            self.is_loading = False

    async def fetch_video_comments(self, video_id: str) -> list[Comment]:
        self.is_loading = True
        try:
            data = await self._invoke(ProxyAction.FETCH_VIDEO_COMMENTS, videoId=video_id)
            self.events.log_api_call("/youtube/commentThreads", "GET", 200, {"video_id": video_id})
            return [comment_from_thread(item) for item in data or []]
        except (ProxyCallError, AttributeError, TypeError, ValueError) as e:
            self._record_failure("Failed to fetch video comments", e, video_id=video_id)
            return []
        finally:
            self.is_loading = False

    async def update_video_details(
        self,
        video_id: str,
        title: str,
        description: str,
    ) -> MutationResult:
        self.is_loading = True
        try:
            data = await self._invoke(
                ProxyAction.UPDATE_VIDEO_DETAILS,
                videoId=video_id,
                title=title,
                description=description,
            )
            self.events.log_api_call("/youtube/videos", "PUT", 200, {"video_id": video_id})
            return MutationResult.from_payload(data)
        except (ProxyCallError, AttributeError, ValueError) as e:
            self._record_failure("Failed to update video details", e, video_id=video_id)
            return MutationResult.failed(str(e))
        finally:
            self.is_loading = False

    async def post_comment(
        self,
        video_id: str,
        text: str,
        parent_comment_id: str | None = None,
    ) -> MutationResult:
        self.is_loading = True
        try:
            data = await self._invoke(
                ProxyAction.POST_COMMENT,
                videoId=video_id,
                commentText=text,
                parentCommentId=parent_comment_id,
            )
            self.events.log_api_call(
                "/youtube/commentThreads",
                "POST",
                201,
                {"video_id": video_id, "parent_comment_id": parent_comment_id},
            )
            return MutationResult.from_payload(data)
        except (ProxyCallError, AttributeError, ValueError) as e:
            self._record_failure("Failed to post comment", e, video_id=video_id)
            return MutationResult.failed(str(e))
        finally:
            self.is_loading = False

    async def delete_comment(self, comment_id: str) -> MutationResult:
        self.is_loading = True
        try:
            data = await self._invoke(ProxyAction.DELETE_COMMENT, commentId=comment_id)
            self.events.log_api_call("/youtube/comments", "DELETE", 200, {"comment_id": comment_id})
            return MutationResult.from_payload(data)
        except (ProxyCallError, AttributeError, ValueError) as e:
            self._record_failure("Failed to delete comment", e, comment_id=comment_id)
            return MutationResult.failed(str(e))
        finally:
            self.is_loading = False

    def _record_failure(self, message: str, error: Exception, **context: Any) -> None:
        logger.warning("platform_call_failed", message=message, error=str(error), **context)
        self.events.log_error(message, {**context, "error": str(error)})

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None
