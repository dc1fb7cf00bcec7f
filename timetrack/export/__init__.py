"""
TIMETRACK - Export Module

Timesheet rows and the pt-BR CSV format.
"""

from timetrack.export.router import router as export_router

__all__ = ["export_router"]
