"""
TIMETRACK Metrics API - Main Application

Serves the dashboard's aggregation engine over HTTP. The dataset is pushed
by the sync/import collaborator; every metric is recomputed from the
current snapshot.
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from timetrack.boxes import boxes_router
from timetrack.config import settings
from timetrack.datasets import dataset_router
from timetrack.export import export_router
from timetrack.metrics import metrics_router

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Hierarchical task metrics for the team timesheet dashboard",
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type"],
)


@app.get("/health", tags=["Health"])
async def health_check() -> dict:
    """
    Health check endpoint.

    Returns the service status and version information.
    """
    return {
        "status": "healthy",
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
    }


@app.get("/", tags=["Root"])
async def root() -> dict:
    """Root endpoint with service information."""
    return {
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "docs": "/docs" if settings.DEBUG else "disabled",
    }


app.include_router(dataset_router)
app.include_router(metrics_router)
app.include_router(boxes_router)
app.include_router(export_router)
