"""Base interface for event log sinks."""

from abc import ABC, abstractmethod

from tube_companion.domain.models import EventLogEntry


class EventSink(ABC):
    """Abstract base class for event log destinations.

    Implementations:
    - DatabaseEventSink: Appends to the event_logs table
    - LocalBufferEventSink: Keeps events in memory, optionally mirrored to a file
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Short name used in log output."""
        ...

    @abstractmethod
    def write(self, entry: EventLogEntry) -> None:
        """Persist one event. May raise; callers decide how to fall back."""
        ...
