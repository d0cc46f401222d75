"""Application services."""

from tube_companion.services.auth import AuthSession
from tube_companion.services.dashboard import Dashboard, filter_notes, parse_tags
from tube_companion.services.events import EventLogger
from tube_companion.services.platform import PlatformClient
from tube_companion.services.proxy import ProxyRequest, YouTubeProxy
from tube_companion.services.store import StoreClient

__all__ = [
    "AuthSession",
    "Dashboard",
    "EventLogger",
    "PlatformClient",
    "ProxyRequest",
    "StoreClient",
    "YouTubeProxy",
    "filter_notes",
    "parse_tags",
]
