"""Server-side broker between dashboard clients and the YouTube Data API."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from tube_companion.adapters.youtube.base import YouTubeAdapter
from tube_companion.domain.enums import ProxyAction
from tube_companion.domain.errors import InvalidActionError, InvalidRequestError
from tube_companion.logging import get_logger

logger = get_logger(__name__)


class ProxyRequest(BaseModel):
    """JSON body accepted by the proxy endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    action: str
    video_id: str | None = Field(None, alias="videoId")
    title: str | None = None
    description: str | None = None
    comment_text: str | None = Field(None, alias="commentText")
    parent_comment_id: str | None = Field(None, alias="parentCommentId")
    comment_id: str | None = Field(None, alias="commentId")


class YouTubeProxy:
    """Dispatches proxy actions to a YouTube adapter.

    Stateless per call: nothing is persisted here.
    """

    def __init__(self, adapter: YouTubeAdapter) -> None:
        self.adapter = adapter

    async def handle(self, request: ProxyRequest) -> Any:
        """Run one action and return its JSON-ready payload.

        Raises:
            InvalidActionError: Unknown action name.
            InvalidRequestError: A parameter the action needs is missing.
            NotFoundError, UpstreamError: Propagated from the adapter.
        """
        try:
            action = ProxyAction(request.action)
        except ValueError:
            logger.warning("proxy_invalid_action", action=request.action)
            raise InvalidActionError() from None

        if action == ProxyAction.FETCH_VIDEO_DETAILS:
            details = await self.adapter.fetch_video_details(_require(request.video_id, "videoId"))
            response: Any = details.to_payload()
        elif action == ProxyAction.FETCH_VIDEO_COMMENTS:
            response = await self.adapter.fetch_video_comments(_require(request.video_id, "videoId"))
        elif action == ProxyAction.UPDATE_VIDEO_DETAILS:
            result = await self.adapter.update_video_details(
                _require(request.video_id, "videoId"),
                request.title,
                request.description,
            )
            response = result.to_payload()
        elif action == ProxyAction.POST_COMMENT:
            result = await self.adapter.post_comment(
                _require(request.video_id, "videoId"),
                _require(request.comment_text, "commentText"),
                request.parent_comment_id,
            )
            response = result.to_payload()
        else:
            # Older clients send the comment ID as videoId
            comment_id = request.comment_id or request.video_id
            result = await self.adapter.delete_comment(_require(comment_id, "commentId"))
            response = result.to_payload()

        logger.info(
            "proxy_action_completed",
            action=action.value,
            video_id=request.video_id,
            mutation=action.is_mutation,
        )
        return response


def _require(value: str | None, name: str) -> str:
    if not value:
        raise InvalidRequestError(f"Missing required parameter: {name}")
    return value
