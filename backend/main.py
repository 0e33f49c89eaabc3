"""
Main FastAPI application entry point for StudyHub.

This is the core application file that:
- Initializes FastAPI with lifespan management
- Configures CORS for frontend integration
- Sets up logging and Logfire observability
- Translates HttpException and request validation errors into JSON error bodies
- Provides health check endpoints
"""

import logging
from contextlib import asynccontextmanager
from typing import Dict

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import logfire

from api.routes import admin_router, documents_router
from config import settings
from database import init_db, close_db, check_db_connection, get_db_info
from observability import (
    SERVICE_VERSION,
    configure_logging,
    initialize_logfire,
)
from utils.errors import HttpException, format_api_error, format_validation_errors

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.
    Handles startup and shutdown events.
    """
    logfire.info(
        "Starting StudyHub API Server",
        environment=settings.environment,
        debug=settings.debug,
    )

    # Initialize MongoDB connection
    await init_db()

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

    logfire.info("StudyHub API Server startup complete")

    yield

    # Shutdown
    logfire.info("Shutting down StudyHub API Server")
    await close_db()


def create_app() -> FastAPI:
    """Build the FastAPI application with routers and error handling."""
    configure_logging(settings)

    app = FastAPI(
        title="StudyHub API",
        description="Backend API for StudyHub - shared study documents",
        version=SERVICE_VERSION,
        lifespan=lifespan,
        debug=settings.debug,
    )

    # Logfire first so request spans cover the middleware below
    initialize_logfire(settings, app)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(HttpException)
    async def http_exception_handler(request: Request, exc: HttpException):
        return JSONResponse(status_code=exc.status_code, content=format_api_error(exc))

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        error = HttpException.bad_request(format_validation_errors(exc.errors()))
        return JSONResponse(status_code=error.status_code, content=format_api_error(error))

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
            "service": "studyhub-api",
            "version": SERVICE_VERSION,
            "database": "connected" if db_connected else "disconnected",
            "environment": settings.environment,
        }

    @app.get("/", tags=["Root"])
    async def root() -> Dict[str, str]:
        """
        Root endpoint - API information.

        Returns:
            dict: Basic API information
        """
        return {
            "name": "StudyHub API",
            "version": SERVICE_VERSION,
            "description": "Backend API for shared study documents",
            "docs": "/docs",
            "health": "/health",
        }

    # ========================================================================
    # API Routers
    # ========================================================================

    app.include_router(documents_router)
    app.include_router(admin_router)

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
