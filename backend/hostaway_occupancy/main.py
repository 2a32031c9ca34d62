"""Hostaway Occupancy Sync — FastAPI application entry point."""

import logging

from fastapi import FastAPI

from hostaway_occupancy.api.v1.occupancy import router as occupancy_router
from hostaway_occupancy.config import settings

# Configure root logger so all hostaway_occupancy.* loggers output to stderr.
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Monthly occupancy rates for Hostaway listings.",
    docs_url="/docs",
    redoc_url="/redoc",
)

# Routers
app.include_router(occupancy_router)


@app.get("/health", tags=["health"])
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy", "service": settings.app_name}


@app.get("/", tags=["root"])
async def root() -> dict[str, str]:
    """Root endpoint."""
    return {
        "service": settings.app_name,
        "version": settings.app_version,
        "docs": "/docs",
    }
