"""YouTube proxy endpoint."""

from typing import Annotated, Any

import structlog
from fastapi import APIRouter, Header

from tube_companion.api.deps import ProxyDep
from tube_companion.domain.errors import CompanionError
from tube_companion.logging import get_logger
from tube_companion.services.proxy import ProxyRequest

router = APIRouter(prefix="/functions/v1", tags=["Proxy"])
logger = get_logger(__name__)


@router.post(
    "/youtube-api",
    response_model=None,
    summary="YouTube proxy",
    description=(
        "Run one YouTube action with the server-held API key. Write actions are "
        "acknowledged with outcome 'simulated'; failures return 400 {error}."
    ),
)
async def youtube_api(
    request: ProxyRequest,
    proxy: ProxyDep,
    authorization: Annotated[str | None, Header()] = None,
) -> Any:
    """Dispatch a proxy action."""
    # The bearer token identifies the caller only; it grants no YouTube write scope
    structlog.contextvars.bind_contextvars(
        proxy_action=request.action,
        caller_authenticated=bool(authorization and authorization.startswith("Bearer ")),
    )
    try:
        return await proxy.handle(request)
    except CompanionError:
        raise
    except Exception as e:
        # Any failure reaches the caller as 400 {error}
        logger.exception("proxy_action_crashed", error=str(e))
        raise CompanionError(str(e) or type(e).__name__) from e
    finally:
        structlog.contextvars.unbind_contextvars("proxy_action", "caller_authenticated")
