"""
TimeBucks Application Entry Point

Serves the conversion API with uvicorn.
"""

import logging
import sys

import uvicorn
from fastapi import FastAPI

from timebucks import __version__
from timebucks.api import router
from timebucks.computation.registry import get_default_registry
from timebucks.config import get_settings

logger = logging.getLogger(__name__)


def configure_logging(level: str | None = None) -> None:
    """Configure root logging to stdout."""
    logging.basicConfig(
        level=(level or get_settings().log_level).upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)]
    )


def create_app() -> FastAPI:
    """Create FastAPI application."""
    app = FastAPI(
        title="TimeBucks",
        description="Temporal currency values and index-based time conversion",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/api/v1/openapi.json"
    )

    app.include_router(router)

    @app.get("/")
    async def root():
        """Root endpoint with API information."""
        return {
            "name": "TimeBucks",
            "version": __version__,
            "docs": "/docs",
            "api": {
                "parse": "/api/v1/parse?notation={notation}",
                "validate": "/api/v1/validate?notation={notation}",
                "transform": "/api/v1/transform",
                "methods": "/api/v1/methods",
                "health": "/api/v1/health"
            }
        }

    methods = ", ".join(info.name for info in get_default_registry().describe())
    logger.info(f"TimeBucks v.{__version__} ready (methods: {methods})")
    return app


# Create application instance
app = create_app()


def main():
    """Main entry point for running the server."""
    configure_logging()
    settings = get_settings()

    logger.info(f"Starting TimeBucks server on {settings.api_host}:{settings.api_port}")

    uvicorn.run(
        "timebucks.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=False,
        log_level=settings.log_level.lower()
    )


if __name__ == "__main__":
    main()
