"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers
- Error handlers (single failure classifier)
- CORS policy middleware
- Logging configuration

No business logic belongs here.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.core.config import settings
from app.interfaces.qa.dependencies import get_db_engine, get_http_client
from app.interfaces.qa.router import router as qa_router
from app.shared.errors.handlers import register_error_handlers
from app.shared.logging import configure_logging
from app.shared.security.cors import CorsPolicy, CorsPolicyMiddleware

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: release pooled connections on shutdown."""
    logger.info("Q&A service build %s", settings.version)

    yield

    if get_http_client.cache_info().currsize:
        get_http_client().close()
    if get_db_engine.cache_info().currsize:
        get_db_engine().dispose()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers, and the CORS policy.
    This is the composition root of the application.

    Returns:
        A fully configured FastAPI application instance.
    """
    configure_logging(level=settings.log_level)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )

    # --- CORS ---
    app.add_middleware(
        CorsPolicyMiddleware,
        policy=CorsPolicy(
            allowed_methods=settings.cors_allowed_methods,
            allowed_headers=settings.cors_allowed_headers,
        ),
    )

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(qa_router)

    return app


app = create_app()
