"""
TIMETRACK - Task Models

Immutable input model of the member -> project -> task -> subtask tree.
Instances are built by the ingestion schemas and never mutated by the engine.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List, Optional


@dataclass
class Task:
    """A task or subtask. Hours are non-negative decimals."""

    id: str
    name: str
    status: Optional[str] = None
    priority: Optional[str] = None
    assignee: Optional[str] = None
    start_date: Optional[date] = None
    due_date: Optional[date] = None
    time_estimate: float = 0.0
    time_logged: float = 0.0
    additional_time: Optional[float] = None
    remaining: Optional[float] = None
    tags: List[str] = field(default_factory=list)
    description: Optional[str] = None
    subtasks: List["Task"] = field(default_factory=list)
    is_subtask: bool = False
    time_entries: Dict[date, float] = field(default_factory=dict)

    def tag_names(self) -> List[str]:
        """Lower-cased tag names for case-insensitive matching."""
        return [tag.lower() for tag in self.tags]


@dataclass
class Project:
    """A named list of top-level tasks."""

    name: str
    tasks: List[Task] = field(default_factory=list)


@dataclass
class Group:
    """Aggregation root for one team member's projects."""

    assignee: str
    projects: List[Project] = field(default_factory=list)
