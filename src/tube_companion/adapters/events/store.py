"""Event sink backed by the event_logs table."""

from sqlalchemy.orm import Session, sessionmaker

from tube_companion.adapters.events.base import EventSink
from tube_companion.db.models import EventLogModel
from tube_companion.db.session import get_session_context
from tube_companion.domain.models import EventLogEntry


class DatabaseEventSink(EventSink):
    """Writes each event as one row of ``event_logs``."""

    def __init__(self, session_factory: sessionmaker[Session] | None = None) -> None:
        self._session_factory = session_factory

    @property
    def name(self) -> str:
        return "database"

    def write(self, entry: EventLogEntry) -> None:
        with get_session_context(self._session_factory) as session:
            row = EventLogModel(
                user_id=entry.user_id,
                event_type=entry.event_type,
                event_data=entry.event_data,
                user_agent=entry.user_agent,
            )
            if entry.created_at is not None:
                row.created_at = entry.created_at
            session.add(row)
