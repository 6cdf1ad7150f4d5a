"""Main FastAPI application for the city weather lookup service."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from city_weather.api.endpoints import router as weather_router
from city_weather.config import (
    HOST, PORT, DEBUG, GEOCODING_API_URL, FORECAST_API_URL
)
from city_weather.logging_config import configure_logging

configure_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    logger.info(f"Geocoding endpoint: {GEOCODING_API_URL}")
    logger.info(f"Forecast endpoint: {FORECAST_API_URL}")
    logger.info("Starting City Weather Lookup Service")
    try:
        yield
    finally:
        logger.info("Shutting down City Weather Lookup Service")


def create_app() -> FastAPI:
    """Create and configure FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    app = FastAPI(
        title="City Weather Lookup Service",
        description="Current weather and 5-day outlook for a city name using Open-Meteo APIs",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan
    )

    # The browser widget calls the API from its own origin
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(weather_router)

    @app.get("/", tags=["root"])
    async def api_info() -> dict:
        """API information endpoint.

        Returns:
            Basic service information
        """
        return {
            "message": "City Weather Lookup Service",
            "docs": "/docs",
            "redoc": "/redoc",
            "weather": "/weather?city=<name>",
            "health": "/weather/health"
        }

    return app


# Create app instance for uvicorn
app = create_app()


def main() -> None:
    """Main entry point for the application."""
    logger.info(f"Starting server on {HOST}:{PORT}")
    uvicorn.run(
        "city_weather.main:app" if DEBUG else app,
        host=HOST,
        port=PORT,
        reload=DEBUG,
        log_level="info" if not DEBUG else "debug"
    )


if __name__ == "__main__":
    main()
