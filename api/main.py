"""
FastAPI application for the FlickFinder API.

Public read-only API over movies, people, cast relations and ratings.
The store handle is created (or injected) by ``create_app`` and disposed
when the application shuts down.
"""

import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from api.exceptions import (
    APIError,
    api_error_handler,
    core_error_handler,
    generic_exception_handler,
)
from api.logging_config import logger, generate_request_id, set_request_id
from api.routers import movies, people
from api.schemas.common import HealthResponse
from flickfinder.config import Config
from flickfinder.database import DatabaseManager
from flickfinder.exceptions import FlickFinderError

SKIP_LOG_PATHS = {"/health", "/", "/api/docs", "/api/redoc", "/api/openapi.json"}


def create_app(
    config: Optional[Config] = None,
    db: Optional[DatabaseManager] = None,
) -> FastAPI:
    """
    Build the application.

    Args:
        config: Settings; loaded from the environment when omitted
        db: Store handle; created from ``config`` at startup when omitted
            and disposed at shutdown. A handle passed in is left open.

    Returns:
        Configured FastAPI application
    """
    config = config or Config.from_env()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owns_db = app.state.db is None
        if owns_db:
            app.state.db = DatabaseManager(config)
            logger.info(f"Store handle created for {app.state.db.engine.url.render_as_string()}")
        try:
            yield
        finally:
            if owns_db:
                app.state.db.dispose()
                app.state.db = None

    app = FastAPI(
        title="FlickFinder API",
        description="Read-only REST API for browsing movies, people and ratings",
        version="1.0.0",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json",
        lifespan=lifespan,
    )
    app.state.config = config
    app.state.db = db

    app.add_exception_handler(APIError, api_error_handler)
    app.add_exception_handler(FlickFinderError, core_error_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.allowed_origins or ["*"],
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def logging_middleware(request: Request, call_next):
        """Log all HTTP requests with timing and response status."""
        request_id = generate_request_id()
        set_request_id(request_id)

        if request.url.path in SKIP_LOG_PATHS:
            return await call_next(request)

        start_time = time.time()
        client_ip = request.client.host if request.client else "unknown"
        logger.info(f"Request started: {request.method} {request.url.path} from {client_ip}")

        try:
            response = await call_next(request)
        except Exception as e:
            duration_ms = (time.time() - start_time) * 1000
            logger.error(
                f"Request failed: {request.method} {request.url.path} "
                f"duration={duration_ms:.2f}ms error={str(e)}"
            )
            raise

        duration_ms = (time.time() - start_time) * 1000
        log_msg = (
            f"Request completed: {request.method} {request.url.path} "
            f"status={response.status_code} duration={duration_ms:.2f}ms"
        )
        if response.status_code >= 500:
            logger.error(log_msg)
        elif response.status_code >= 400:
            logger.warning(log_msg)
        else:
            logger.info(log_msg)

        response.headers["X-Request-ID"] = request_id
        return response

    app.include_router(movies.router, tags=["Movies"])
    app.include_router(people.router, tags=["People"])

    @app.get("/", include_in_schema=False)
    async def root():
        """Root endpoint points at the docs."""
        return {
            "message": "FlickFinder API",
            "docs": "/api/docs",
            "redoc": "/api/redoc",
        }

    @app.get("/health", response_model=HealthResponse, include_in_schema=False)
    async def health():
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
