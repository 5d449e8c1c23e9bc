"""Main entry point for the Stakeguard application."""

from __future__ import annotations

import logging

from fastapi import FastAPI

from stakeguard.api.v1 import (
    posts_router,
    reports_router,
    reputation_router,
    system_router,
)
from stakeguard.core.settings import settings

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# Initialize FastAPI app
app = FastAPI(
    title="Stakeguard API",
    description="Stake-weighted content moderation engine",
    version=settings.app_version,
)

# Include API routers
app.include_router(posts_router, prefix="/api/v1")
app.include_router(reports_router, prefix="/api/v1")
app.include_router(reputation_router, prefix="/api/v1")
app.include_router(system_router, prefix="/api/v1")


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint to verify the service is running."""
    return {"status": "ok"}


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint with basic information about the API."""
    return {
        "name": "Stakeguard API",
        "version": settings.app_version,
        "description": "Stake-weighted content moderation engine",
        "docs": "/docs",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("stakeguard.main:app", host="0.0.0.0", port=8000, reload=settings.debug)
