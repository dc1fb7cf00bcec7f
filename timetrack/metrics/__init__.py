"""
TIMETRACK - Metrics Module

Rollups, watchlists, velocity, priority distribution and data quality.
"""

from timetrack.metrics.router import router as metrics_router

__all__ = ["metrics_router"]
