"""Headless dashboard: lists videos, shows metrics, manages notes and comments."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID, uuid4

from tube_companion.domain.enums import DashboardState, NotificationLevel
from tube_companion.domain.errors import CompanionError
from tube_companion.domain.models import Comment, NewVideo, Note, Notification, Video
from tube_companion.logging import get_logger
from tube_companion.services.events import EventLogger
from tube_companion.services.platform import PlatformClient
from tube_companion.services.store import StoreClient
from tube_companion.utils.video_id import extract_video_id, is_valid_video_id

logger = get_logger(__name__)

LOCAL_AUTHOR_NAME = "You"


@dataclass
class VideoEdit:
    """Edit buffer for the video metadata form."""

    title: str
    description: str


def parse_tags(text: str) -> list[str]:
    """Split comma-separated tag input, dropping blanks."""
    return [tag.strip() for tag in text.split(",") if tag.strip()]


def filter_notes(notes: list[Note], query: str) -> list[Note]:
    """Notes whose title, content or a tag contains ``query`` (case-insensitive).

    An empty query returns every note in its original order.
    """
    if not query:
        return list(notes)
    return [note for note in notes if note.matches(query)]


class Dashboard:
    """View model composing the store, the platform client and the event log.

    State machine::

        loading -> empty -> browsing <-> editing_video

    Every failure is turned into an error notification; nothing raised by a
    collaborator escapes a public method.
    """

    def __init__(self, store: StoreClient, platform: PlatformClient, events: EventLogger) -> None:
        self.store = store
        self.platform = platform
        self.events = events
        self.state = DashboardState.LOADING
        self.selected: Video | None = None
        self.comments: list[Comment] = []
        self.search_query = ""
        self.video_edit: VideoEdit | None = None
        self.notifications: list[Notification] = []

    @property
    def videos(self) -> list[Video]:
        return self.store.videos

    @property
    def notes(self) -> list[Note]:
        return self.store.notes

    @property
    def filtered_notes(self) -> list[Note]:
        return filter_notes(self.store.notes, self.search_query)

    @property
    def is_loading(self) -> bool:
        return self.store.is_loading or self.platform.is_loading

    async def load(self) -> None:
        """Fetch the user's videos and select the newest one."""
        self.events.log_user_action("dashboard_visited")
        self.state = DashboardState.LOADING
        try:
            videos = await self.store.fetch_videos()
        except Exception as e:
            self._error("Failed to load your videos.", e)
            return

        if not videos:
            self.selected = None
            self.state = DashboardState.EMPTY
            return

        await self.select_video(videos[0].id)

    async def select_video(self, video_id: UUID) -> None:
        """Select a video and load its notes and comments."""
        video = self._find_video(video_id)
        if video is None:
            self._notify(NotificationLevel.ERROR, "Video not found.")
            return

        self.selected = video
        self.video_edit = None
        self.state = DashboardState.BROWSING
        self.events.log_user_action("video_selected", {"video_id": str(video.id)})

        try:
            await self.store.fetch_notes(video.id)
        except Exception as e:
            self._error("Failed to load notes.", e)
        self.comments = await self.platform.fetch_video_comments(video.youtube_video_id)

    async def add_video(self, url_or_id: str) -> Video | None:
        """Add a video from a pasted URL or ID and select it."""
        if not url_or_id.strip():
            self._notify(NotificationLevel.ERROR, "Please enter a YouTube video URL or ID")
            return None

        youtube_video_id = extract_video_id(url_or_id)
        if youtube_video_id is None:
            self._notify(
                NotificationLevel.ERROR,
                "Invalid YouTube URL format. Please enter a valid YouTube video URL or ID.",
            )
            return None
        if not is_valid_video_id(youtube_video_id):
            # URL-extracted IDs are passed through; the platform decides
            logger.warning("unusual_video_id", youtube_video_id=youtube_video_id)

        details = await self.platform.fetch_video_details(youtube_video_id)
        if details is None:
            self._notify(
                NotificationLevel.ERROR,
                "Failed to add video. Please check the URL and try again.",
            )
            return None

        try:
            video = await self.store.add_video(
                NewVideo(
                    youtube_video_id=details.id,
                    title=details.title,
                    description=details.description,
                    thumbnail_url=details.best_thumbnail_url(),
                    view_count=details.view_count,
                    like_count=details.like_count,
                    comment_count=details.comment_count,
                    published_at=details.published_datetime(),
                )
            )
        except Exception as e:
            self._error("Failed to add video. Please check the URL and try again.", e)
            return None

        self._notify(NotificationLevel.SUCCESS, "Video added successfully!")
        await self.select_video(video.id)
        return video

    async def refresh(self) -> None:
        """Re-fetch platform counters for the selected video and store them."""
        if self.selected is None:
            return

        video = self.selected
        self.events.log_user_action("data_refresh_requested", {"video_id": str(video.id)})
        details = await self.platform.fetch_video_details(video.youtube_video_id)
        if details is None:
            self._notify(NotificationLevel.ERROR, "Failed to refresh data. Please try again.")
            return

        try:
            self.selected = await self.store.update_video(
                video.id,
                view_count=details.view_count,
                like_count=details.like_count,
                comment_count=details.comment_count,
            )
        except Exception as e:
            self._error("Failed to save refreshed data.", e)
            return

        self._notify(NotificationLevel.SUCCESS, "Data refreshed successfully!")

    def sign_out(self) -> None:
        """Sign out and drop all view state."""
        self.events.log_user_action("signed_out")
        self.store.auth.sign_out()
        self.store.clear()
        self.selected = None
        self.comments = []
        self.video_edit = None
        self.search_query = ""
        self.state = DashboardState.LOADING

    def start_editing(self) -> None:
        if self.selected is None:
            return
        self.video_edit = VideoEdit(title=self.selected.title, description=self.selected.description)
        self.state = DashboardState.EDITING_VIDEO

    def cancel_editing(self) -> None:
        self.video_edit = None
        if self.selected is not None:
            self.state = DashboardState.BROWSING

    async def save_video(self, title: str, description: str) -> bool:
        """Push edited metadata to the platform, then to the store."""
        if self.selected is None:
            return False

        video = self.selected
        self.video_edit = VideoEdit(title=title, description=description)
        self.events.log_user_action("video_edit_attempted", {"video_id": str(video.id)})

        result = await self.platform.update_video_details(video.youtube_video_id, title, description)
        if not result.accepted:
            self._notify(NotificationLevel.ERROR, "Failed to update video details. Please try again.")
            self.events.log_user_action("video_edit_failed", {"video_id": str(video.id)})
            return False

        try:
            self.selected = await self.store.update_video(video.id, title=title, description=description)
        except Exception as e:
            self._error("Failed to save video details.", e)
            return False

        self.video_edit = None
        self.state = DashboardState.BROWSING
        if result.simulated:
            self._notify(
                NotificationLevel.INFO,
                "Video details saved here; YouTube was not changed (demo mode).",
            )
        else:
            self._notify(NotificationLevel.SUCCESS, "Video details updated successfully!")
        self.events.log_user_action(
            "video_edit_completed",
            {"video_id": str(video.id), "outcome": result.outcome.value},
        )
        return True

    async def add_note(self, title: str, content: str, tags_text: str = "") -> Note | None:
        """Add a note to the selected video. Blank title or content is ignored."""
        if self.selected is None or not title.strip() or not content.strip():
            return None

        try:
            note = await self.store.add_note(self.selected.id, title, content, parse_tags(tags_text))
        except Exception as e:
            self._error("Failed to add note.", e)
            return None

        self._notify(NotificationLevel.SUCCESS, "Note added successfully!")
        return note

    async def delete_note(self, note_id: UUID) -> None:
        if not any(note.id == note_id for note in self.store.notes):
            return

        try:
            await self.store.delete_note(note_id)
        except Exception as e:
            self._error("Failed to delete note.", e)
            return

        self._notify(NotificationLevel.SUCCESS, "Note deleted successfully!")

    def search(self, query: str) -> list[Note]:
        self.search_query = query
        return self.filtered_notes

    async def post_comment(self, text: str, parent_comment_id: str | None = None) -> Comment | None:
        """Post a comment and show it at the top of the list.

        The platform client reports whether the post was real or simulated;
        either way the comment is only known locally until the next fetch.
        """
        if self.selected is None or not text.strip():
            return None

        video = self.selected
        self.events.log_user_action("comment_post_attempted", {"video_id": str(video.id)})
        result = await self.platform.post_comment(video.youtube_video_id, text, parent_comment_id)
        if not result.accepted:
            self._notify(NotificationLevel.ERROR, "Failed to post comment. Please try again.")
            self.events.log_user_action("comment_post_failed", {"video_id": str(video.id)})
            return None

        comment = Comment(
            id=f"local-{uuid4().hex}",
            author_name=LOCAL_AUTHOR_NAME,
            text=text,
            like_count=0,
            published_at=datetime.now(UTC),
            parent_id=parent_comment_id,
            is_local=True,
        )
        self.comments = [comment, *self.comments]
        if result.simulated:
            self._notify(NotificationLevel.INFO, "Comment added here; YouTube was not changed (demo mode).")
        else:
            self._notify(NotificationLevel.SUCCESS, "Comment posted successfully!")
        self.events.log_user_action(
            "comment_posted",
            {"video_id": str(video.id), "outcome": result.outcome.value},
        )
        return comment

    async def delete_comment(self, comment_id: str) -> bool:
        if not any(comment.id == comment_id for comment in self.comments):
            return False

        result = await self.platform.delete_comment(comment_id)
        if not result.accepted:
            self._notify(NotificationLevel.ERROR, "Failed to delete comment. Please try again.")
            return False

        self.comments = [c for c in self.comments if c.id != comment_id]
        self._notify(NotificationLevel.SUCCESS, "Comment deleted.")
        self.events.log_user_action(
            "comment_deleted",
            {"comment_id": comment_id, "outcome": result.outcome.value},
        )
        return True

    def _find_video(self, video_id: UUID) -> Video | None:
        return next((v for v in self.store.videos if v.id == video_id), None)

    def _notify(self, level: NotificationLevel, message: str) -> None:
        self.notifications.append(Notification(level=level, message=message))

    def _error(self, message: str, error: Exception) -> None:
        detail = error.message if isinstance(error, CompanionError) else str(error)
        logger.warning("dashboard_action_failed", message=message, error=detail)
        self._notify(NotificationLevel.ERROR, message)
