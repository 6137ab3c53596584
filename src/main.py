#!/usr/bin/env python3
"""
FastAPI server for scheduling ABF Freight pickups.
"""

# Load environment variables first
import os

from dotenv import load_dotenv
from fastapi import FastAPI

from routes import health, pickup

load_dotenv()

# Initialize
app = FastAPI(
    title="ABF Pickup API",
    description="Schedules truck pickups with ABF Freight",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

# Include routers
app.include_router(health.router)
app.include_router(pickup.router)


if __name__ == "__main__":
    import uvicorn

    port = int(os.environ.get("PORT", 8080))

    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=port,
        reload=False,
        log_level="info",
    )
