"""Health check and service info endpoints."""

from fastapi import APIRouter

from common.config import config

router = APIRouter(tags=["health"])


@router.get("/")
async def root():
    """Root endpoint with basic info."""
    return {
        "service": "ABF Pickup API",
        "version": "0.1.0",
        "status": "running",
        "endpoints": {
            "health": "/health",
            "docs": "/docs",
            "request_pickup": "/api/pickup",
        },
    }


@router.get("/health")
async def health_check():
    # Never expose the key itself, only whether one is configured
    return {
        "status": "healthy",
        "service": "abf-pickup",
        "mode": config.abf_mode,
        "api_key_set": bool(config.abf_api_key.get_secret_value()),
    }
