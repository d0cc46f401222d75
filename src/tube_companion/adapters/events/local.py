"""In-process fallback sink for events the store could not accept."""

import json
from collections import deque
from pathlib import Path

from tube_companion.adapters.events.base import EventSink
from tube_companion.domain.models import EventLogEntry


class LocalBufferEventSink(EventSink):
    """Keeps the most recent events in memory.

    When ``path`` is set every event is also appended to it as one JSON line,
    so events survive a restart and can be replayed later.
    """

    def __init__(self, max_size: int = 1000, path: Path | None = None) -> None:
        self._buffer: deque[EventLogEntry] = deque(maxlen=max_size)
        self.path = path

    @property
    def name(self) -> str:
        return "local"

    @property
    def events(self) -> list[EventLogEntry]:
        return list(self._buffer)

    def write(self, entry: EventLogEntry) -> None:
        self._buffer.append(entry)
        if self.path is not None:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("a", encoding="utf-8") as fh:
                fh.write(json.dumps(entry.to_dict(), default=str) + "\n")

    def drain(self) -> list[EventLogEntry]:
        """Remove and return all buffered events."""
        drained = list(self._buffer)
        self._buffer.clear()
        return drained

    def __len__(self) -> int:
        return len(self._buffer)
