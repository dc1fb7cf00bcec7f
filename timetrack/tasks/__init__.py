"""
TIMETRACK - Tasks Module

Input model, classifiers and tree flattening.
"""

from timetrack.tasks.classifiers import categorize_status, get_priority_bucket
from timetrack.tasks.tree import flatten_task, walk_groups

__all__ = ["categorize_status", "get_priority_bucket", "flatten_task", "walk_groups"]
