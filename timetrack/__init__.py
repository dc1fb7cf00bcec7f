"""
TIMETRACK - Team timesheet dashboard metrics.
"""

__version__ = "0.1.0"
