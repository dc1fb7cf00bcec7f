"""
TIMETRACK - Metrics Schemas

Pydantic models for the rollups, watchlists and scores shown on the dashboard.
"""

from datetime import date
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from timetrack.tasks.enums import PriorityBucket, QualityTier, StatusCategory


class MemberRollup(BaseModel):
    """Counters and hours for one team member. Shared tasks count fractionally."""

    member: str
    total: float = 0
    completed: float = 0
    in_progress: float = 0
    blocked: float = 0
    pending: float = 0
    overdue: float = 0
    planned: float = Field(default=0, description="Sum of time estimates (hours)")
    logged: float = Field(default=0, description="Sum of logged time (hours)")
    completion_rate: int = Field(default=0, description="Completed tasks as a percentage of total")
    utilization: int = Field(
        default=0,
        description="Logged hours as a percentage of planned, capped at 100 so overruns read as full; see project burn for the uncapped ratio",
    )


class ProjectRollup(BaseModel):
    """Counters and hours for one project, merged across members."""

    name: str
    assignees: List[str] = Field(default_factory=list)
    total: int = 0
    completed: int = 0
    in_progress: int = 0
    blocked: int = 0
    pending: int = 0
    overdue: int = 0
    planned: float = 0
    logged: float = 0
    additional: float = Field(default=0, description="Sum of hours logged beyond the estimate")
    remaining: float = Field(default=0, description="Sum of remaining hours")
    completion_rate: int = 0
    burn: Optional[int] = Field(default=None, description="Logged as a percentage of planned; null without estimates")


class FocusArea(BaseModel):
    status: StatusCategory
    count: int
    percentage: int


class Overview(BaseModel):
    """Dataset-wide totals."""

    total_tasks: int
    status_totals: Dict[StatusCategory, int]
    completion_rate: int
    total_planned: float
    total_logged: float
    project_count: int
    focus_areas: List[FocusArea]


class WatchlistTask(BaseModel):
    """A task placed on one of the deadline watchlists."""

    id: str
    name: str
    member: str
    project: str
    status: Optional[str] = None
    priority: PriorityBucket
    due_date: date
    days_until_due: int = Field(description="Negative when overdue")


class DeadlineWatchlists(BaseModel):
    """Disjoint overdue / critical / upcoming lists, each sorted by due date."""

    overdue: List[WatchlistTask] = Field(default_factory=list)
    critical: List[WatchlistTask] = Field(default_factory=list)
    upcoming: List[WatchlistTask] = Field(default_factory=list)


class VelocityWeek(BaseModel):
    """Completed / in-progress counts and logged hours for tasks due in one week."""

    week_key: date = Field(description="Sunday starting the week")
    label: str = Field(description="Week start as dd/mm")
    completed: int = 0
    in_progress: int = 0
    hours: float = 0


class PriorityCell(BaseModel):
    count: float = 0
    hours: float = 0
    label: str


class PriorityDistributionRow(BaseModel):
    """Hours and task counts per priority bucket for one member."""

    member: str
    buckets: Dict[PriorityBucket, PriorityCell]
    total_hours: float
    total_count: float


class QualityBreakdown(BaseModel):
    """Number of in-scope tasks missing each field."""

    assignee: int = 0
    priority: int = 0
    due_date: int = 0
    estimate: int = 0
    start_date: int = 0
    description: int = 0


class QualityScore(BaseModel):
    """Penalty-weighted completeness score for one member."""

    member: str
    score: int = Field(ge=0, le=100)
    tier: QualityTier
    total_tasks: int = Field(description="Non-completed tasks in scope")
    penalty_points: int
    issues_count: int = Field(description="Tasks with at least one missing field")
    breakdown: QualityBreakdown


class ControlTask(BaseModel):
    """An open task missing at least one field."""

    id: str
    name: str
    member: str
    project: str
    status: Optional[str] = None


class TaskControl(BaseModel):
    """Open tasks (subtasks included) grouped by the field they are missing."""

    without_assignee: List[ControlTask] = Field(default_factory=list)
    without_estimate: List[ControlTask] = Field(default_factory=list)
    without_due_date: List[ControlTask] = Field(default_factory=list)
    without_start_date: List[ControlTask] = Field(default_factory=list)
    without_priority: List[ControlTask] = Field(default_factory=list)
    without_description: List[ControlTask] = Field(default_factory=list)
    total_incomplete: int = Field(default=0, description="Distinct task ids across all lists")


class DashboardMetrics(BaseModel):
    """Everything the management dashboard renders from one traversal."""

    today: date
    dataset_version: int
    overview: Overview
    team: List[MemberRollup]
    projects: List[ProjectRollup]
    deadlines: DeadlineWatchlists
    velocity: List[VelocityWeek]
    task_control: TaskControl
