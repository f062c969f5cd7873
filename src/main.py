"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncGenerator

from fastapi import APIRouter, FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from src.api.middleware.error_handler import (
    error_handler_middleware,
    http_exception_handler,
    request_validation_exception_handler,
)
from src.api.middleware.latency_logging import latency_logging_middleware
from src.api.middleware.request_size import request_size_limit_middleware
from src.api.middleware.security_headers import security_headers_middleware
from src.api.routes import health, orders, pages
from src.core.config import get_settings
from src.core.supabase import init_supabase_client, shutdown_supabase_client

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    Opens the order store connection on startup and releases it on
    shutdown. A store that cannot be reached at startup aborts the launch.

    Args:
        app: FastAPI application instance.

    Yields:
        None: Control back to the application.
    """
    settings = get_settings()
    logger.info("Starting %s in %s mode", settings.app_name, settings.app_env)

    try:
        init_supabase_client(verify=settings.verify_database_on_startup)
    except Exception:
        logger.critical("Could not connect to the order store, refusing to start", exc_info=True)
        raise

    yield

    shutdown_supabase_client()
    logger.info("Shutting down %s", settings.app_name)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        FastAPI: Configured application instance.
    """
    settings = get_settings()

    app = FastAPI(
        title="Order API",
        description="Order submission, listing and status tracking backend",
        version="0.1.0",
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        openapi_url="/openapi.json" if settings.debug else None,
        lifespan=lifespan,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials="*" not in settings.cors_origins_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Add error handler middleware (catches errors raised by routes)
    app.add_middleware(BaseHTTPMiddleware, dispatch=error_handler_middleware)

    # Add latency logging middleware (tracks request timing)
    app.add_middleware(BaseHTTPMiddleware, dispatch=latency_logging_middleware)

    # Add request size limit middleware (rejects oversized requests early)
    app.add_middleware(BaseHTTPMiddleware, dispatch=request_size_limit_middleware)

    # Security headers on every response
    app.add_middleware(BaseHTTPMiddleware, dispatch=security_headers_middleware)

    # Framework-raised errors use the same response shape as API errors
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)

    # Health and HTML pages at root level (no prefix)
    app.include_router(health.router)
    app.include_router(pages.router)

    api_router = APIRouter(prefix="/api")
    api_router.include_router(orders.router)
    app.include_router(api_router)

    # Uploaded item images
    uploads_dir = Path(settings.uploads_dir)
    if uploads_dir.is_dir():
        app.mount(settings.uploads_url_prefix, StaticFiles(directory=uploads_dir), name="uploads")
    else:
        logger.info("Uploads directory %s not found, image serving disabled", uploads_dir)

    return app


# Create application instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "src.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
