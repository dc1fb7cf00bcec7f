"""
TIMETRACK - Priority Distribution

Per-member matrix of task count and estimated hours by priority bucket.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, List

from timetrack.metrics.schemas import PriorityCell, PriorityDistributionRow
from timetrack.tasks.classifiers import get_priority_bucket, priority_label, split_assignees
from timetrack.tasks.constants import UNASSIGNED
from timetrack.tasks.enums import PriorityBucket, StatusCategory
from timetrack.tasks.tree import TaskEntry


@dataclass(frozen=True)
class DistributionFilters:
    """Which tasks the distribution chart counts."""

    include_parent_tasks: bool = True
    include_subtasks: bool = True
    include_completed: bool = True

    def admits(self, entry: TaskEntry) -> bool:
        passes_hierarchy = self.include_subtasks if entry.task.is_subtask else self.include_parent_tasks
        passes_status = self.include_completed or entry.category is not StatusCategory.COMPLETED
        return passes_hierarchy and passes_status


class PriorityDistributionBuilder:
    def __init__(self, filters: DistributionFilters = DistributionFilters()):
        self.filters = filters
        self._members: Dict[str, Dict[PriorityBucket, List[float]]] = {}

    def add(self, entry: TaskEntry) -> None:
        if not self.filters.admits(entry):
            return

        task = entry.task
        bucket = get_priority_bucket(task.priority)
        names = split_assignees(task.assignee)
        for name in names:
            cells = self._members.setdefault(name, {b: [0.0, 0.0] for b in PriorityBucket})
            # Count is shared between assignees, hours are not
            cells[bucket][0] += 1 / len(names)
            cells[bucket][1] += task.time_estimate

    def rows(self) -> List[PriorityDistributionRow]:
        rows = []
        for member, cells in self._members.items():
            if member == UNASSIGNED:
                continue
            rows.append(
                PriorityDistributionRow(
                    member=member,
                    buckets={
                        bucket: PriorityCell(count=count, hours=hours, label=priority_label(bucket))
                        for bucket, (count, hours) in cells.items()
                    },
                    total_hours=sum(hours for _, hours in cells.values()),
                    total_count=sum(count for count, _ in cells.values()),
                )
            )
        rows.sort(key=lambda row: row.total_hours, reverse=True)
        return rows


def priority_distribution(
    entries: Iterable[TaskEntry],
    filters: DistributionFilters = DistributionFilters(),
) -> List[PriorityDistributionRow]:
    builder = PriorityDistributionBuilder(filters)
    for entry in entries:
        builder.add(entry)
    return builder.rows()
