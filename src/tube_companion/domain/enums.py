"""Domain enumerations."""

from enum import StrEnum


class ProxyAction(StrEnum):
    """Actions accepted by the YouTube proxy."""

    FETCH_VIDEO_DETAILS = "fetchVideoDetails"
    FETCH_VIDEO_COMMENTS = "fetchVideoComments"
    UPDATE_VIDEO_DETAILS = "updateVideoDetails"
    POST_COMMENT = "postComment"
    DELETE_COMMENT = "deleteComment"

    @property
    def is_mutation(self) -> bool:
        return self in (
            ProxyAction.UPDATE_VIDEO_DETAILS,
            ProxyAction.POST_COMMENT,
            ProxyAction.DELETE_COMMENT,
        )


class MutationOutcome(StrEnum):
    """How a write action against the platform was handled."""

    CONFIRMED = "confirmed"  # Applied by the platform
    SIMULATED = "simulated"  # Acknowledged by a stub, platform unchanged
    FAILED = "failed"


class DashboardState(StrEnum):
    """States of the dashboard view model."""

    LOADING = "loading"
    EMPTY = "empty"
    BROWSING = "browsing"
    EDITING_VIDEO = "editing_video"


class NotificationLevel(StrEnum):
    """Severity of a user-visible notification."""

    SUCCESS = "success"
    INFO = "info"
    ERROR = "error"


class EventType(StrEnum):
    """Event types written to the event log."""

    API_CALL = "api_call"
    ERROR = "error"

    @staticmethod
    def user_action(action: str) -> str:
        """Event type for a user action, e.g. ``user_note_created``."""
        return f"user_{action}"
