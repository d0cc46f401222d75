"""Domain models - pure Python classes independent of database."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any
from uuid import UUID

from tube_companion.domain.enums import MutationOutcome, NotificationLevel

THUMBNAIL_PREFERENCE = ("maxres", "high", "medium", "default")


@dataclass
class User:
    """The signed-in user owning videos and notes."""

    id: UUID
    email: str | None = None


@dataclass
class Video:
    """A tracked YouTube video."""

    id: UUID
    youtube_video_id: str
    title: str
    description: str
    thumbnail_url: str | None = None
    view_count: int = 0
    like_count: int = 0
    comment_count: int = 0
    published_at: datetime | None = None
    created_at: datetime | None = None
    user_id: UUID | None = None


@dataclass
class NewVideo:
    """Values for a video about to be inserted."""

    youtube_video_id: str
    title: str
    description: str
    thumbnail_url: str | None = None
    view_count: int = 0
    like_count: int = 0
    comment_count: int = 0
    published_at: datetime | None = None


@dataclass
class Note:
    """A freeform note attached to a video."""

    id: UUID
    video_id: UUID
    title: str
    content: str
    tags: list[str] = field(default_factory=list)
    created_at: datetime | None = None
    user_id: UUID | None = None

    def matches(self, query: str) -> bool:
        """Case-insensitive substring match on title, content or any tag."""
        needle = query.lower()
        return (
            needle in self.title.lower()
            or needle in self.content.lower()
            or any(needle in tag.lower() for tag in self.tags)
        )


@dataclass
class Comment:
    """A comment mirrored from the platform. Never persisted."""

    id: str
    author_name: str
    text: str
    like_count: int = 0
    published_at: datetime | None = None
    parent_id: str | None = None
    is_local: bool = False  # Authored here, not read back from the platform


@dataclass
class EventLogEntry:
    """A single analytics event."""

    event_type: str
    event_data: dict[str, Any] = field(default_factory=dict)
    user_agent: str | None = None
    created_at: datetime | None = None
    user_id: UUID | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "event_type": self.event_type,
            "event_data": self.event_data,
            "user_agent": self.user_agent,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "user_id": str(self.user_id) if self.user_id else None,
        }


@dataclass
class VideoDetails:
    """Normalized video metadata returned by the proxy."""

    id: str
    title: str
    description: str
    thumbnails: dict[str, Any] = field(default_factory=dict)
    statistics: dict[str, Any] = field(default_factory=dict)
    published_at: str | None = None

    @property
    def view_count(self) -> int:
        return _count(self.statistics.get("viewCount"))

    @property
    def like_count(self) -> int:
        return _count(self.statistics.get("likeCount"))

    @property
    def comment_count(self) -> int:
        return _count(self.statistics.get("commentCount"))

    def best_thumbnail_url(self) -> str | None:
        """URL of the highest-resolution thumbnail available."""
        for resolution in THUMBNAIL_PREFERENCE:
            thumbnail = self.thumbnails.get(resolution)
            if thumbnail and thumbnail.get("url"):
                return str(thumbnail["url"])
        return None

    def published_datetime(self) -> datetime | None:
        return parse_timestamp(self.published_at)

    def to_payload(self) -> dict[str, Any]:
        """Wire shape returned by the proxy."""
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "thumbnails": self.thumbnails,
            "statistics": self.statistics,
            "publishedAt": self.published_at,
        }

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "VideoDetails":
        return cls(
            id=payload["id"],
            title=payload.get("title") or "",
            description=payload.get("description") or "",
            thumbnails=payload.get("thumbnails") or {},
            statistics=payload.get("statistics") or {},
            published_at=payload.get("publishedAt"),
        )


@dataclass
class MutationResult:
    """Outcome of a write action against the platform."""

    outcome: MutationOutcome
    message: str = ""

    @property
    def accepted(self) -> bool:
        return self.outcome in (MutationOutcome.CONFIRMED, MutationOutcome.SIMULATED)

    @property
    def simulated(self) -> bool:
        return self.outcome == MutationOutcome.SIMULATED

    def to_payload(self) -> dict[str, Any]:
        return {
            "success": self.accepted,
            "outcome": self.outcome.value,
            "message": self.message,
        }

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "MutationResult":
        outcome = payload.get("outcome")
        if outcome is None:
            # Bare {"success": true} cannot prove a real write happened
            outcome = MutationOutcome.SIMULATED if payload.get("success") else MutationOutcome.FAILED
        return cls(outcome=MutationOutcome(outcome), message=payload.get("message") or "")

    @classmethod
    def failed(cls, message: str) -> "MutationResult":
        return cls(outcome=MutationOutcome.FAILED, message=message)


@dataclass
class Notification:
    """A user-visible message raised by the dashboard."""

    level: NotificationLevel
    message: str


def _count(value: Any) -> int:
    """Parse a platform counter (numeric string) defaulting to zero."""
    if value is None:
        return 0
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


def parse_timestamp(value: str | None) -> datetime | None:
    """Parse an RFC 3339 platform timestamp."""
    if not value:
        return None
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
