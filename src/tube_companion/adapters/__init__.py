"""Adapters for external services."""

from tube_companion.adapters.events.base import EventSink
from tube_companion.adapters.youtube.base import YouTubeAdapter

__all__ = [
    "EventSink",
    "YouTubeAdapter",
]
