"""
Main FastAPI application entry point for the Blog API.

This is the core application file that:
- Builds the FastAPI app with lifespan management
- Configures CORS
- Sets up logging and Logfire observability
- Maps domain and validation errors to JSON responses
- Provides health check endpoints
"""

import logging
from contextlib import asynccontextmanager
from typing import Dict, Optional

import logfire
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.routes import posts_router
from config import Settings, settings
from database import init_db, close_db, check_db_connection, get_db_info
from utils.errors import BlogAPIError, format_api_error, format_log_error, format_validation_error
from utils.logging import configure_logging, initialize_logfire

logger = logging.getLogger(__name__)

APP_VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.
    Handles startup and shutdown events.
    """
    app_settings: Settings = app.state.settings

    configure_logging(app_settings)
    initialize_logfire(app_settings, app, service_version=APP_VERSION)

    logfire.info(
        "Starting Blog API Server",
        environment=app_settings.environment,
        debug=app_settings.debug,
    )

    # Initialize MongoDB connection
    await init_db(
        app_settings.mongodb_url,
        app_settings.mongodb_database,
        timeout_ms=app_settings.mongodb_timeout_ms,
    )

    # Check database connection on startup
    db_connected = await check_db_connection()
    db_info = get_db_info()
    if db_connected:
        logfire.info(
            "MongoDB connection successful",
            url=db_info['url'],
            database=db_info['database'],
        )
    else:
        logfire.error(
            "MongoDB connection failed",
            url=db_info['url'],
            database=db_info['database'],
        )

    logfire.info("Blog API Server startup complete")

    yield

    # Shutdown
    logfire.info("Shutting down Blog API Server")
    await close_db()


async def blog_api_error_handler(request: Request, exc: BlogAPIError) -> JSONResponse:
    """Map domain errors to their status code with a JSON detail."""
    level = logging.WARNING if exc.status_code < 500 else logging.ERROR
    logger.log(
        level,
        f"Request failed: {request.method} {request.url.path}",
        extra={"error": format_log_error(exc)},
    )
    return JSONResponse(status_code=exc.status_code, content=format_api_error(exc))


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report request validation failures as 400 Bad Request."""
    errors = exc.errors()
    message = format_validation_error(errors)
    logger.warning(f"Validation error on {request.url.path}: {message}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": message, "errors": jsonable_encoder(errors)},
    )


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        app_settings: Settings to bind the app to; defaults to the
            process-wide settings. The integration suite passes
            ``settings.for_testing()``.
    """
    app_settings = app_settings or settings

    app = FastAPI(
        title="Blog API",
        description="CRUD API for blog posts backed by MongoDB",
        version=APP_VERSION,
        lifespan=lifespan,
        debug=app_settings.debug,
        # Interactive docs are not served in production
        docs_url=None if app_settings.is_production else "/docs",
        redoc_url=None if app_settings.is_production else "/redoc",
        openapi_url=None if app_settings.is_production else "/openapi.json",
    )
    app.state.settings = app_settings

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(BlogAPIError, blog_api_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    # ========================================================================
    # Health Check Endpoints
    # ========================================================================

    @app.get("/health", tags=["Health"])
    async def health_check() -> Dict[str, str]:
        """
        Health check endpoint for load balancers and monitoring.

        Returns:
            dict: Health status of the application and database
        """
        db_connected = await check_db_connection()

        return {
            "status": "healthy" if db_connected else "degraded",
            "service": "blog-api",
            "version": APP_VERSION,
            "database": "connected" if db_connected else "disconnected",
            "environment": app_settings.environment,
        }

    @app.get("/", tags=["Root"])
    async def root() -> Dict[str, str]:
        """
        Root endpoint - API information.

        Returns:
            dict: Basic API information
        """
        info = {
            "name": "Blog API",
            "version": APP_VERSION,
            "description": "CRUD API for blog posts",
            "health": "/health",
            "posts": "/posts",
        }
        if app.docs_url:
            info["docs"] = app.docs_url
        return info

    # ========================================================================
    # API Routers
    # ========================================================================

    app.include_router(posts_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development,
        log_level=settings.log_level.lower(),
    )
