"""Event log sinks."""

from tube_companion.adapters.events.base import EventSink
from tube_companion.adapters.events.local import LocalBufferEventSink
from tube_companion.adapters.events.store import DatabaseEventSink

__all__ = [
    "EventSink",
    "DatabaseEventSink",
    "LocalBufferEventSink",
]
