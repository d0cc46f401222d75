"""API route modules."""

from tube_companion.api.routes import health, proxy

__all__ = ["health", "proxy"]
