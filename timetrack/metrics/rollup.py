"""
TIMETRACK - Rollup Aggregator

Per-member and per-project status counters and hour sums.

Hours are summed for every task occurrence in the traversal; a task id that
appears under two paths is counted twice here, while the deadline watchlists
(and therefore the overdue counters) see it once.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from timetrack.metrics.ratios import percentage
from timetrack.metrics.schemas import FocusArea, MemberRollup, Overview, ProjectRollup
from timetrack.tasks.classifiers import is_unassigned, split_assignees
from timetrack.tasks.constants import UNASSIGNED
from timetrack.tasks.enums import DeadlineWindow, StatusCategory
from timetrack.tasks.tree import TaskEntry

_FOCUS_ORDER = (StatusCategory.BLOCKED, StatusCategory.PENDING, StatusCategory.IN_PROGRESS)


@dataclass
class _Counters:
    total: float = 0
    overdue: float = 0
    planned: float = 0
    logged: float = 0
    by_status: Dict[StatusCategory, float] = field(
        default_factory=lambda: {category: 0 for category in StatusCategory}
    )

    def add(self, category: StatusCategory, share: float, planned: float, logged: float) -> None:
        self.total += share
        self.by_status[category] += share
        self.planned += planned
        self.logged += logged


@dataclass
class _ProjectCounters(_Counters):
    additional: float = 0
    remaining: float = 0
    # dict keeps first-seen order
    assignees: Dict[str, None] = field(default_factory=dict)


class RollupAggregator:
    """Accumulates rollups for one traversal."""

    def __init__(self):
        self._members: Dict[str, _Counters] = {}
        self._projects: Dict[str, _ProjectCounters] = {}
        self._status_totals: Dict[StatusCategory, int] = {category: 0 for category in StatusCategory}
        self._total_planned = 0.0
        self._total_logged = 0.0

    def register_project(self, name: str, owner: Optional[str] = None) -> None:
        """Make a project visible even before (or without) any task."""
        counters = self._projects.setdefault(name, _ProjectCounters())
        if owner and not is_unassigned(owner):
            counters.assignees.setdefault(owner.strip(), None)

    def add(self, entry: TaskEntry, window: Optional[DeadlineWindow] = None) -> None:
        """
        Count one flattened task.

        `window` is the deadline classifier's verdict for this occurrence;
        only OVERDUE bumps the overdue counters.
        """
        task = entry.task
        category = entry.category
        is_overdue = window is DeadlineWindow.OVERDUE

        # Each named member gets a fractional share of the task and the full hours
        names = split_assignees(task.assignee)
        share = 1 / len(names)
        for name in names:
            member = self._members.setdefault(name, _Counters())
            member.add(category, share, task.time_estimate, task.time_logged)
            if is_overdue:
                member.overdue += share

        self.register_project(entry.project, entry.member)
        project = self._projects[entry.project]
        project.add(category, 1, task.time_estimate, task.time_logged)
        project.additional += task.additional_time or 0
        project.remaining += task.remaining or 0
        if is_overdue:
            project.overdue += 1

        self._status_totals[category] += 1
        self._total_planned += task.time_estimate
        self._total_logged += task.time_logged

    def member_rollups(self) -> List[MemberRollup]:
        """Team table, unassigned bucket excluded, largest task count first."""
        rows = [
            MemberRollup(
                member=name,
                total=c.total,
                completed=c.by_status[StatusCategory.COMPLETED],
                in_progress=c.by_status[StatusCategory.IN_PROGRESS],
                blocked=c.by_status[StatusCategory.BLOCKED],
                pending=c.by_status[StatusCategory.PENDING],
                overdue=c.overdue,
                planned=c.planned,
                logged=c.logged,
                completion_rate=percentage(c.by_status[StatusCategory.COMPLETED], c.total),
                utilization=min(100, percentage(c.logged, c.planned)),
            )
            for name, c in self._members.items()
            if name != UNASSIGNED
        ]
        rows.sort(key=lambda row: row.total, reverse=True)
        return rows

    def project_rollups(self) -> List[ProjectRollup]:
        rows = [
            ProjectRollup(
                name=name,
                assignees=list(c.assignees),
                total=int(c.total),
                completed=int(c.by_status[StatusCategory.COMPLETED]),
                in_progress=int(c.by_status[StatusCategory.IN_PROGRESS]),
                blocked=int(c.by_status[StatusCategory.BLOCKED]),
                pending=int(c.by_status[StatusCategory.PENDING]),
                overdue=int(c.overdue),
                planned=c.planned,
                logged=c.logged,
                additional=c.additional,
                remaining=c.remaining,
                completion_rate=percentage(c.by_status[StatusCategory.COMPLETED], c.total),
                burn=percentage(c.logged, c.planned) if c.planned > 0 else None,
            )
            for name, c in self._projects.items()
        ]
        rows.sort(key=lambda row: row.total, reverse=True)
        return rows

    def overview(self) -> Overview:
        total = sum(self._status_totals.values())
        return Overview(
            total_tasks=total,
            status_totals=dict(self._status_totals),
            completion_rate=percentage(self._status_totals[StatusCategory.COMPLETED], total),
            total_planned=self._total_planned,
            total_logged=self._total_logged,
            project_count=len(self._projects),
            focus_areas=[
                FocusArea(
                    status=category,
                    count=self._status_totals[category],
                    percentage=percentage(self._status_totals[category], total),
                )
                for category in _FOCUS_ORDER
                if self._status_totals[category] > 0
            ],
        )
