"""Database layer."""

from tube_companion.db.models import Base, EventLogModel, NoteModel, VideoModel
from tube_companion.db.session import (
    build_engine,
    get_session,
    get_session_context,
    init_db,
)

__all__ = [
    "Base",
    "build_engine",
    "get_session",
    "get_session_context",
    "init_db",
    # Models
    "EventLogModel",
    "NoteModel",
    "VideoModel",
]
