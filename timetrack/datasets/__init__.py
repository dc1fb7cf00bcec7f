"""
TIMETRACK - Dataset Module

Input contract and snapshot storage.
"""

from timetrack.datasets.router import router as dataset_router

__all__ = ["dataset_router"]
