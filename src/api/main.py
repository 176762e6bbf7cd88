"""
FastAPI Application Factory

Assembles the relay API:
- Routes (color, bulb status)
- CORS for the browser color picker
- Exception handlers
- Health check

The factory takes everything it needs as arguments so tests can build an
app without touching config files or the network.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from typing import Optional

from api.routes import color
from api.middleware.error_handler import register_exception_handlers
from utils.logger import get_logger
from models.enums import LogCategory

log = get_logger().for_category(LogCategory.SYSTEM)

SERVICE_NAME = "rgbw-bulb-relay"


def create_app(
    title: str = "RGBW Bulb Relay",
    description: str = "REST API that forwards RGBW colors to a Shelly Gen1 bulb",
    version: str = "1.0.0",
    docs_enabled: bool = True,
    cors_origins: Optional[list[str]] = None
) -> FastAPI:
    """
    Create and configure FastAPI application.

    Args:
        title: API title (shown in docs)
        description: API description
        version: API version
        docs_enabled: Enable /docs and /redoc
        cors_origins: CORS allowed origins (default: all)

    Returns:
        Configured FastAPI application ready to run
    """
    app = FastAPI(
        title=title,
        description=description,
        version=version,
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None
    )

    log.info(f"Creating FastAPI app: {title} v{version}")

    # =========================================================================
    # CORS Configuration
    # =========================================================================

    if cors_origins is None:
        cors_origins = ["*"]

    # Browsers reject credentials with a wildcard origin
    allow_credentials = "*" not in cors_origins

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=allow_credentials,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    log.debug(f"CORS enabled for origins: {cors_origins}")

    # =========================================================================
    # Exception Handlers
    # =========================================================================

    register_exception_handlers(app)

    # =========================================================================
    # Routes
    # =========================================================================

    app.include_router(color.router, prefix="/api")

    log.debug("Routes registered: color (/api/color), bulb (/api/bulb)")

    # =========================================================================
    # Health Check Endpoint
    # =========================================================================

    @app.get(
        "/api/health",
        tags=["System"],
        summary="Health check",
        description="Check if API is running and responding"
    )
    async def health_check():
        """Simple health check endpoint for monitoring"""
        return {
            "status": "healthy",
            "service": SERVICE_NAME,
            "version": version
        }

    @app.get("/", include_in_schema=False)
    async def root():
        return JSONResponse(
            {
                "message": "RGBW Bulb Relay API",
                "docs": "/docs" if docs_enabled else None,
                "health": "/api/health"
            }
        )

    log.info(f"FastAPI app created successfully: {title}")

    return app
