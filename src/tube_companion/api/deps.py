"""FastAPI dependencies."""

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from tube_companion.adapters.youtube import YouTubeAdapter, get_youtube_adapter
from tube_companion.db.session import get_session
from tube_companion.services.proxy import YouTubeProxy

# Database session dependency
SessionDep = Annotated[Session, Depends(get_session)]


async def get_adapter() -> AsyncGenerator[YouTubeAdapter, None]:
    """Per-request YouTube adapter, closed once the response is sent."""
    adapter = get_youtube_adapter()
    try:
        yield adapter
    finally:
        await adapter.close()


AdapterDep = Annotated[YouTubeAdapter, Depends(get_adapter)]


def get_proxy(adapter: AdapterDep) -> YouTubeProxy:
    """Get the proxy service for this request."""
    return YouTubeProxy(adapter)


ProxyDep = Annotated[YouTubeProxy, Depends(get_proxy)]
