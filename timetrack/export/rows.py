"""
TIMETRACK - Timesheet Rows

Builds the per-date realized-hours rows exported from the timesheet view.
Realized hours come from each task's time entries; planned hours are the
time estimates. Every flattened task contributes once.
"""

from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Dict, List, Optional, Sequence

from timetrack.tasks.enums import RowType
from timetrack.tasks.models import Group, Task
from timetrack.tasks.tree import flatten_task, group_tasks, project_key


@dataclass
class TimesheetRow:
    label: str
    row_type: RowType
    days: Dict[date, float] = field(default_factory=dict)
    total_realized: float = 0.0
    total_planned: float = 0.0

    @property
    def has_hours(self) -> bool:
        return self.total_realized > 0 or self.total_planned > 0


def date_range(start: date, end: date) -> List[date]:
    """Every calendar day from start to end, inclusive."""
    return [start + timedelta(days=offset) for offset in range((end - start).days + 1)]


def _sum_tasks(label: str, row_type: RowType, tasks: Sequence[Task], dates: Sequence[date]) -> TimesheetRow:
    days: Dict[date, float] = {}
    for task in tasks:
        for day in dates:
            hours = task.time_entries.get(day, 0.0)
            if hours:
                days[day] = days.get(day, 0.0) + hours
    return TimesheetRow(
        label=label,
        row_type=row_type,
        days=days,
        total_realized=sum(days.values()),
        total_planned=sum(task.time_estimate for task in tasks),
    )


def member_rows(groups: Sequence[Group], dates: Sequence[date]) -> List[TimesheetRow]:
    """Team view: one row per member."""
    return [_sum_tasks(group.assignee, RowType.MEMBER, group_tasks(group), dates) for group in groups]


def project_rows(group: Group, dates: Sequence[date]) -> List[TimesheetRow]:
    """Member view: each project row followed by its task rows. Empty rows are dropped."""
    rows: List[TimesheetRow] = []
    for project in group.projects:
        tasks = [task for top_level in project.tasks for task in flatten_task(top_level)]
        task_rows = [
            row
            for row in (_sum_tasks(task.name, RowType.TASK, [task], dates) for task in tasks)
            if row.has_hours
        ]
        project_row = _sum_tasks(project_key(project), RowType.PROJECT, tasks, dates)
        if not project_row.has_hours:
            continue
        rows.append(project_row)
        rows.extend(task_rows)
    return rows


def build_timesheet_rows(
    groups: Sequence[Group],
    dates: Sequence[date],
    member: Optional[Group] = None,
) -> List[TimesheetRow]:
    if member is not None:
        return project_rows(member, dates)
    return member_rows(groups, dates)
