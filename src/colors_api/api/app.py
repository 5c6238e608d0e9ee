"""FastAPI application factory."""

import uuid
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from colors_api.api.routes import colors_router, general_router
from colors_api.config import get_settings
from colors_api.container import get_container, reset_container
from colors_api.exceptions import ColorsApiError
from colors_api.logging_config import (
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
)

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Configure logging and the service container on startup."""
    settings = get_settings()
    configure_logging(settings)

    logger.info(
        "application_starting",
        app_name=settings.app_name,
        version=settings.app_version,
        environment=settings.environment.value,
    )
    get_container().session_store
    logger.info("application_started")

    yield

    logger.info("application_stopping")
    reset_container()
    logger.info("application_stopped")


async def log_request_middleware(request: Request, call_next):
    """Bind a short request id to every log event of the request."""
    request_id = str(uuid.uuid4())[:8]
    bind_context(request_id=request_id, path=request.url.path, method=request.method)

    try:
        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id
        logger.debug("request_completed", status_code=response.status_code)
        return response
    finally:
        clear_context()


async def exception_handler(request: Request, exc: ColorsApiError) -> JSONResponse:
    """Translate domain exceptions into JSON error responses."""
    logger.warning(
        "domain_exception",
        error_code=exc.error_code,
        message=exc.message,
        context=exc.context,
    )
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Generate design-system color palettes from two seed colors "
        "and export them as CSS, SCSS, JSON, Figma tokens, Tailwind config or CSV",
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.frontend_url],
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["Content-Disposition"],
    )
    app.middleware("http")(log_request_middleware)

    app.add_exception_handler(ColorsApiError, exception_handler)

    app.include_router(general_router)
    app.include_router(colors_router)

    return app


# Create app instance for uvicorn
app = create_app()
