"""
TIMETRACK - Custom Boxes Module

User-defined task boxes and the member board.
"""

from timetrack.boxes.router import router as boxes_router

__all__ = ["boxes_router"]
