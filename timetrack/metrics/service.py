"""
TIMETRACK - Metrics Service

Orchestrates the metrics components over a dataset snapshot.
All computations are:
- Read-only (the dataset is never mutated)
- Deterministic (same dataset and day -> same output)
- Self-contained (no state survives between calls)
"""

import logging
from datetime import date
from typing import List, Optional, Sequence, Set

from timetrack.metrics.control import TaskControlCollector
from timetrack.metrics.deadlines import DeadlineClassifier
from timetrack.metrics.distribution import DistributionFilters, priority_distribution
from timetrack.metrics.quality import rank_members, score_member
from timetrack.metrics.rollup import RollupAggregator
from timetrack.metrics.schemas import (
    DashboardMetrics,
    PriorityDistributionRow,
    QualityScore,
    VelocityWeek,
)
from timetrack.metrics.velocity import VelocityBucketer, weekly_velocity
from timetrack.tasks.models import Group
from timetrack.tasks.tree import project_key, walk_groups

logger = logging.getLogger(__name__)


class MetricsService:
    """Service for computing dashboard metrics."""

    def __init__(
        self,
        critical_days: int = 3,
        upcoming_days: int = 7,
        velocity_weeks: int = 8,
    ):
        self.critical_days = critical_days
        self.upcoming_days = upcoming_days
        self.velocity_weeks = velocity_weeks

    def generate_dashboard(
        self,
        groups: Sequence[Group],
        today: date,
        dataset_version: int = 0,
    ) -> DashboardMetrics:
        """
        Compute rollups, watchlists, velocity and task control in a single traversal.

        One visited-id set lives for exactly this call: the deadline
        classifier consumes ids first-come-first-served and the rollup
        overdue counters follow its verdicts.

        Args:
            groups: Member groups of the dataset
            today: Reference day (injected, not date.today())
            dataset_version: Echoed back for cache diagnostics
        """
        seen_ids: Set[str] = set()
        deadlines = DeadlineClassifier(today, self.critical_days, self.upcoming_days)
        rollup = RollupAggregator()
        velocity = VelocityBucketer()
        control = TaskControlCollector()

        for group in groups:
            for project in group.projects:
                rollup.register_project(project_key(project), group.assignee)

        task_count = 0
        for entry in walk_groups(groups):
            window = deadlines.observe(entry, seen_ids)
            rollup.add(entry, window)
            velocity.add(entry)
            control.add(entry)
            task_count += 1

        logger.debug(f"Dashboard metrics computed over {task_count} tasks ({len(seen_ids)} with deadlines)")

        return DashboardMetrics(
            today=today,
            dataset_version=dataset_version,
            overview=rollup.overview(),
            team=rollup.member_rollups(),
            projects=rollup.project_rollups(),
            deadlines=deadlines.watchlists(),
            velocity=velocity.weeks(self.velocity_weeks),
            task_control=control.summary(),
        )

    def priority_distribution(
        self,
        groups: Sequence[Group],
        filters: DistributionFilters = DistributionFilters(),
    ) -> List[PriorityDistributionRow]:
        return priority_distribution(walk_groups(groups), filters)

    def velocity(self, groups: Sequence[Group], member: Optional[str] = None) -> List[VelocityWeek]:
        """Velocity for the whole dataset or one member's group."""
        if member is not None:
            groups = [group for group in groups if group.assignee == member]
        return weekly_velocity(walk_groups(groups), self.velocity_weeks)

    def quality_ranking(
        self,
        groups: Sequence[Group],
        track_optional_fields: bool = False,
        include_subtasks: bool = False,
    ) -> List[QualityScore]:
        return rank_members(groups, track_optional_fields, include_subtasks)

    def member_quality(
        self,
        group: Group,
        track_optional_fields: bool = False,
        include_subtasks: bool = False,
    ) -> QualityScore:
        return score_member(group, track_optional_fields, include_subtasks)
