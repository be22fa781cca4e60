# =============================================================================
# Payload API - Main Application
# =============================================================================
"""
Payload API

Accepts text payloads over HTTP, validates them and stores each accepted
submission as one row in a relational database.

Key Features:
- Versioned: /api/v1 (flat responses) and /api/v2 (structured responses)
  served side by side; unversioned /api/payload maps to v1
- Validated: blank content is rejected before any write
- Observable: structured request and handler logging

Deployment:
    uvicorn payload_api.main:app
"""

import time

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .api import SUPPORTED_VERSIONS, router
from .config import get_settings
from .logging_config import configure_logging
from .services import get_database


SUPPORTED_VERSIONS_HEADER = "api-supported-versions"


# =============================================================================
# Application Factory
# =============================================================================

def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.
    
    OpenAPI documents are only served in development.
    
    Returns:
        FastAPI: Configured application instance
    """
    settings = get_settings()
    
    # Configure logging first
    configure_logging(settings)
    
    docs_enabled = settings.is_development
    
    app = FastAPI(
        title="Payload API",
        description="""
## Overview

Versioned ingestion endpoint that stores text payloads.

## Versions

- **v1**: `POST /api/v1/payload` (also `/api/payload`), flat response
- **v2**: `POST /api/v2/payload`, adds `source` and `priority`, structured
  `data`/`meta` responses and coded errors
        """,
        version=__version__,
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None,
    )
    
    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Restrict in production
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    
    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """Log each request and report supported API versions."""
        started = time.perf_counter()
        response = await call_next(request)
        
        if request.url.path.startswith("/api/"):
            response.headers[SUPPORTED_VERSIONS_HEADER] = ", ".join(SUPPORTED_VERSIONS)
        
        structlog.get_logger(__name__).info(
            "http_request",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            duration_ms=round((time.perf_counter() - started) * 1000, 2),
            user_agent=request.headers.get("user-agent"),
        )
        return response
    
    # Include API routes
    app.include_router(router)
    
    @app.on_event("startup")
    async def startup_event() -> None:
        """
        Application startup handler.
        
        Creates the payloads table if it does not exist yet.
        """
        await get_database().create_all()
        structlog.get_logger(__name__).info(
            "startup_complete",
            message="Payload API ready to accept requests",
        )
    
    @app.on_event("shutdown")
    async def shutdown_event() -> None:
        """
        Application shutdown handler.
        
        Releases pooled database connections.
        """
        logger = structlog.get_logger(__name__)
        logger.info("shutdown_initiated", message="Payload API shutting down")
        await get_database().dispose()
    
    # Log startup
    logger = structlog.get_logger(__name__)
    logger.info(
        "application_startup",
        service=settings.service_name,
        environment=settings.environment,
        version=__version__,
        docs_enabled=docs_enabled,
        supported_versions=list(SUPPORTED_VERSIONS),
    )
    
    return app


# =============================================================================
# Application Instance
# =============================================================================

app = create_app()
