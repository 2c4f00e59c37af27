"""
FastAPI application serving a plain-text greeting and a health check.
"""
import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from . import __version__
from .config import Settings, get_settings
from .logging_config import get_logger, log_api_access
from .models import HealthResponse

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = app.state.settings
    logger.info(f"{settings.service_name} started, greeting {settings.greeting_name!r}")
    yield
    logger.info(f"{settings.service_name} stopped")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application around ``settings`` (process settings by default)."""
    settings = settings or get_settings()

    app = FastAPI(title="Hello Service", version=__version__, lifespan=lifespan)
    app.state.settings = settings

    @app.get("/", response_class=PlainTextResponse)
    async def root(request: Request):
        """Plain-text greeting."""
        return f"Hello, {request.app.state.settings.greeting_name}!"

    @app.get("/health", response_model=HealthResponse)
    async def health_check(request: Request) -> HealthResponse:
        """Health check endpoint for service monitoring."""
        return HealthResponse(status="healthy", service=request.app.state.settings.service_name)

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start_time = time.time()
        try:
            response = await call_next(request)
        except Exception as e:
            process_time = time.time() - start_time
            log_api_access(request.method, request.url.path, 500, process_time, error=str(e))
            logger.error(f"{request.method} {request.url.path} failed: {e} ({process_time:.3f}s)")
            raise
        log_api_access(request.method, request.url.path, response.status_code, time.time() - start_time)
        return response

    return app


app = create_app()
