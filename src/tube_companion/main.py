"""FastAPI application entry point."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from tube_companion import __version__
from tube_companion.api.routes import health, proxy
from tube_companion.config import settings
from tube_companion.domain.errors import CompanionError
from tube_companion.logging import get_logger, setup_logging

# Setup logging
setup_logging()
logger = get_logger(__name__)

CORS_ALLOW_HEADERS = ["authorization", "x-client-info", "apikey", "content-type"]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    logger.info(
        "application_starting",
        version=__version__,
        youtube_provider=settings.youtube_provider,
    )

    if settings.youtube_provider == "youtube" and not settings.youtube_api_key:
        logger.warning("youtube_api_key_missing")

    # Startup: create tables and verify database connection
    try:
        from tube_companion.db.session import init_db

        init_db()
        logger.info("database_connected")
    except Exception as e:
        logger.error("database_connection_failed", error=str(e))
        # Don't raise - let health checks report the issue

    yield

    # Shutdown
    logger.info("application_shutting_down")


# Create FastAPI app
app = FastAPI(
    title="Tube Companion",
    description="YouTube proxy and companion dashboard backend",
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)

# Add CORS middleware; preflight OPTIONS requests are answered here
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=CORS_ALLOW_HEADERS,
)


@app.exception_handler(CompanionError)
async def companion_error_handler(request: Request, exc: CompanionError) -> JSONResponse:
    """Every application failure becomes 400 {error}."""
    logger.error(
        "request_failed",
        path=request.url.path,
        error_type=type(exc).__name__,
        error=exc.message,
    )
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed bodies get the same 400 {error} shape."""
    errors = exc.errors()
    message = "; ".join(
        f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg', '')}"
        for err in errors
    ) or "Invalid request"
    logger.warning("request_invalid", path=request.url.path, error=message)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": message})


# Register routers
app.include_router(health.router)
app.include_router(proxy.router)


@app.get("/", include_in_schema=False)
async def root() -> dict[str, str]:
    """Root endpoint with service info."""
    return {
        "name": "Tube Companion",
        "version": __version__,
        "docs": "/docs",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "tube_companion.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )
