"""
TIMETRACK Metrics API - Configuration Module

This module handles application configuration via environment variables.
"""

import os


class Settings:
    """Application settings loaded from environment variables."""

    # Application
    APP_NAME: str = "TIMETRACK Metrics API"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"

    # Server
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "8000"))

    # CORS - Allowed origins for the dashboard client
    # Multiple origins can be comma-separated
    CORS_ORIGINS: list[str] = [
        origin.strip()
        for origin in os.getenv("CORS_ORIGINS", "http://localhost:5173,http://localhost:3000").split(",")
        if origin.strip()
    ]

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Deadline watchlists (days after today, inclusive)
    CRITICAL_WINDOW_DAYS: int = int(os.getenv("CRITICAL_WINDOW_DAYS", "3"))
    UPCOMING_WINDOW_DAYS: int = int(os.getenv("UPCOMING_WINDOW_DAYS", "7"))

    # Weekly velocity chart
    VELOCITY_WEEKS: int = int(os.getenv("VELOCITY_WEEKS", "8"))

    # Custom boxes: a task captured by a box leaves its project listing
    EXCLUSIVE_BOXES: bool = os.getenv("EXCLUSIVE_BOXES", "true").lower() == "true"

    # Metrics result cache (entries)
    METRICS_CACHE_SIZE: int = int(os.getenv("METRICS_CACHE_SIZE", "32"))

    # Timesheet export
    EXPORT_MAX_DAYS: int = int(os.getenv("EXPORT_MAX_DAYS", "92"))


settings = Settings()
