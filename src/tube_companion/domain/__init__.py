"""Domain models and enums."""

from tube_companion.domain.enums import (
    DashboardState,
    EventType,
    MutationOutcome,
    NotificationLevel,
    ProxyAction,
)
from tube_companion.domain.errors import (
    AuthenticationRequired,
    CompanionError,
    ConfigurationError,
    InvalidActionError,
    InvalidRequestError,
    NotFoundError,
    UpstreamError,
)
from tube_companion.domain.models import (
    Comment,
    EventLogEntry,
    MutationResult,
    NewVideo,
    Note,
    Notification,
    User,
    Video,
    VideoDetails,
)

__all__ = [
    # Enums
    "DashboardState",
    "EventType",
    "MutationOutcome",
    "NotificationLevel",
    "ProxyAction",
    # Errors
    "AuthenticationRequired",
    "CompanionError",
    "ConfigurationError",
    "InvalidActionError",
    "InvalidRequestError",
    "NotFoundError",
    "UpstreamError",
    # Models
    "Comment",
    "EventLogEntry",
    "MutationResult",
    "NewVideo",
    "Note",
    "Notification",
    "User",
    "Video",
    "VideoDetails",
]
