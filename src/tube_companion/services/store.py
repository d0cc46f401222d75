"""Client access to the user's videos and notes."""

from typing import Any
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.orm import Session, sessionmaker

from tube_companion.db.models import NoteModel, VideoModel
from tube_companion.db.session import get_session_context
from tube_companion.domain.errors import NotFoundError
from tube_companion.domain.models import NewVideo, Note, Video
from tube_companion.logging import get_logger
from tube_companion.services.auth import AuthSession
from tube_companion.services.events import EventLogger

logger = get_logger(__name__)

VIDEO_UPDATE_FIELDS = frozenset(
    {
        "title",
        "description",
        "thumbnail_url",
        "view_count",
        "like_count",
        "comment_count",
    }
)


def _video_from_model(model: VideoModel) -> Video:
    return Video(
        id=model.id,
        youtube_video_id=model.youtube_video_id,
        title=model.title,
        description=model.description,
        thumbnail_url=model.thumbnail_url,
        view_count=model.view_count,
        like_count=model.like_count,
        comment_count=model.comment_count,
        published_at=model.published_at,
        created_at=model.created_at,
        user_id=model.user_id,
    )


def _note_from_model(model: NoteModel) -> Note:
    return Note(
        id=model.id,
        video_id=model.video_id,
        title=model.title,
        content=model.content,
        tags=list(model.tags or []),
        created_at=model.created_at,
        user_id=model.user_id,
    )


class StoreClient:
    """CRUD over the signed-in user's videos and notes.

    ``videos`` and ``notes`` hold the local copies shown by the dashboard.
    Successful writes patch these lists in place; they are never kept in
    sync any other way. Failures are recorded as error events and re-raised.

    Methods are coroutines so the dashboard awaits every collaborator the same
    way, but the SQLAlchemy session underneath is synchronous and blocks the
    event loop for the length of each query.
    """

    def __init__(
        self,
        auth: AuthSession,
        events: EventLogger,
        session_factory: sessionmaker[Session] | None = None,
    ) -> None:
        self.auth = auth
        self.events = events
        self._session_factory = session_factory
        self.videos: list[Video] = []
        self.notes: list[Note] = []
        self.is_loading = False

    async def fetch_videos(self) -> list[Video]:
        """Load the user's videos, newest first."""
        user = self.auth.get_user()
        if user is None:
            self.videos = []
            return self.videos

        self.is_loading = True
        try:
            with get_session_context(self._session_factory) as session:
                query = (
                    select(VideoModel)
                    .where(VideoModel.user_id == user.id)
                    .order_by(VideoModel.created_at.desc())
                )
                self.videos = [_video_from_model(v) for v in session.scalars(query)]
            return self.videos
        except Exception as e:
            self.events.log_error("Failed to fetch videos", {"error": str(e)})
            raise
        finally:
            self.is_loading = False

    async def fetch_notes(self, video_id: UUID | None = None) -> list[Note]:
        """Load the user's notes, optionally for a single video, newest first."""
        user = self.auth.get_user()
        if user is None:
            self.notes = []
            return self.notes

        self.is_loading = True
        try:
            with get_session_context(self._session_factory) as session:
                query = select(NoteModel).where(NoteModel.user_id == user.id)
                if video_id is not None:
                    query = query.where(NoteModel.video_id == video_id)
                query = query.order_by(NoteModel.created_at.desc())
                self.notes = [_note_from_model(n) for n in session.scalars(query)]
            return self.notes
        except Exception as e:
            self.events.log_error(
                "Failed to fetch notes",
                {"video_id": str(video_id) if video_id else None, "error": str(e)},
            )
            raise
        finally:
            self.is_loading = False

    async def add_video(self, data: NewVideo) -> Video:
        """Insert a video for the current user and prepend it locally."""
        try:
            user = self.auth.require_user()
            with get_session_context(self._session_factory) as session:
                model = VideoModel(
                    user_id=user.id,
                    youtube_video_id=data.youtube_video_id,
                    title=data.title,
                    description=data.description,
                    thumbnail_url=data.thumbnail_url,
                    view_count=data.view_count,
                    like_count=data.like_count,
                    comment_count=data.comment_count,
                    published_at=data.published_at,
                )
                session.add(model)
                session.flush()
                video = _video_from_model(model)
        except Exception as e:
            self.events.log_error("Failed to add video", {"error": str(e)})
            raise

        self.videos = [video, *self.videos]
        self.events.log_user_action(
            "video_added",
            {"video_id": str(video.id), "youtube_video_id": video.youtube_video_id},
        )
        logger.info("video_added", video_id=str(video.id), youtube_video_id=video.youtube_video_id)
        return video

    async def update_video(self, video_id: UUID, **updates: Any) -> Video:
        """Apply ``updates`` to one of the user's videos.

        Only title, description, thumbnail and counter fields can change.

        Raises:
            NotFoundError: If the user owns no video with this ID.
        """
        try:
            unknown = set(updates) - VIDEO_UPDATE_FIELDS
            if unknown:
                raise ValueError(f"Cannot update video fields: {', '.join(sorted(unknown))}")

            user = self.auth.require_user()
            with get_session_context(self._session_factory) as session:
                model = session.scalar(
                    select(VideoModel).where(
                        VideoModel.id == video_id,
                        VideoModel.user_id == user.id,
                    )
                )
                if model is None:
                    raise NotFoundError("Video not found")

                for field_name, value in updates.items():
                    setattr(model, field_name, value)
                session.flush()
                video = _video_from_model(model)
        except Exception as e:
            self.events.log_error(
                "Failed to update video", {"video_id": str(video_id), "error": str(e)}
            )
            raise

        self.videos = [video if v.id == video_id else v for v in self.videos]
        self.events.log_user_action("video_updated", {"video_id": str(video_id)})
        return video

    async def add_note(
        self,
        video_id: UUID,
        title: str,
        content: str,
        tags: list[str] | None = None,
    ) -> Note:
        """Insert a note for the current user and prepend it locally."""
        try:
            user = self.auth.require_user()
            with get_session_context(self._session_factory) as session:
                model = NoteModel(
                    user_id=user.id,
                    video_id=video_id,
                    title=title,
                    content=content,
                    tags=list(tags or []),
                )
                session.add(model)
                session.flush()
                note = _note_from_model(model)
        except Exception as e:
            self.events.log_error("Failed to add note", {"error": str(e)})
            raise

        self.notes = [note, *self.notes]
        self.events.log_user_action(
            "note_created", {"note_id": str(note.id), "video_id": str(video_id)}
        )
        return note

    async def delete_note(self, note_id: UUID) -> None:
        """Delete one note. Deleting an unknown ID changes nothing."""
        try:
            user = self.auth.require_user()
            with get_session_context(self._session_factory) as session:
                session.execute(
                    delete(NoteModel).where(
                        NoteModel.id == note_id,
                        NoteModel.user_id == user.id,
                    )
                )
        except Exception as e:
            self.events.log_error("Failed to delete note", {"note_id": str(note_id), "error": str(e)})
            raise

        self.notes = [n for n in self.notes if n.id != note_id]
        self.events.log_user_action("note_deleted", {"note_id": str(note_id)})

    def clear(self) -> None:
        """Drop all local copies."""
        self.videos = []
        self.notes = []
