"""Best-effort event logging."""

import platform
from datetime import UTC, datetime
from typing import Any

from tube_companion import __version__
from tube_companion.adapters.events.base import EventSink
from tube_companion.adapters.events.local import LocalBufferEventSink
from tube_companion.domain.enums import EventType
from tube_companion.domain.models import EventLogEntry
from tube_companion.logging import get_logger
from tube_companion.services.auth import AuthSession

logger = get_logger(__name__)


def default_user_agent() -> str:
    return f"tube-companion/{__version__} ({platform.system()} {platform.release()})"


class EventLogger:
    """Enriches events and writes them to a primary sink.

    Events the primary sink rejects go to the fallback sink. Nothing raised by
    either sink reaches the caller.
    """

    def __init__(
        self,
        primary: EventSink,
        fallback: EventSink | None = None,
        auth: AuthSession | None = None,
        user_agent: str | None = None,
    ) -> None:
        self.primary = primary
        self.fallback = fallback if fallback is not None else LocalBufferEventSink()
        self.auth = auth
        self.user_agent = user_agent or default_user_agent()

    def log_event(self, event_type: str, data: dict[str, Any] | None = None) -> EventLogEntry:
        """Record an event. Returns the enriched entry."""
        user = self.auth.get_user() if self.auth is not None else None
        entry = EventLogEntry(
            event_type=event_type,
            event_data=data or {},
            user_agent=self.user_agent,
            created_at=datetime.now(UTC),
            user_id=user.id if user else None,
        )

        try:
            self.primary.write(entry)
            return entry
        except Exception as e:
            logger.warning(
                "event_primary_sink_failed",
                sink=self.primary.name,
                event_type=event_type,
                error=str(e),
            )

        try:
            self.fallback.write(entry)
        except Exception as e:
            logger.error(
                "event_fallback_sink_failed",
                sink=self.fallback.name,
                event_type=event_type,
                error=str(e),
            )
        return entry

    def log_user_action(self, action: str, data: dict[str, Any] | None = None) -> EventLogEntry:
        return self.log_event(EventType.user_action(action), data)

    def log_api_call(
        self,
        endpoint: str,
        method: str,
        status: int,
        data: dict[str, Any] | None = None,
    ) -> EventLogEntry:
        return self.log_event(
            EventType.API_CALL,
            {"endpoint": endpoint, "method": method, "status": status, **(data or {})},
        )

    def log_error(self, error: str, context: dict[str, Any] | None = None) -> EventLogEntry:
        return self.log_event(EventType.ERROR, {"error": error, "context": context or {}})
