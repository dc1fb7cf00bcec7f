"""
TIMETRACK - Weekly Velocity

Completed and in-progress counts plus logged hours, bucketed by the
Sunday-starting week of each task's due date.
"""

from datetime import date, timedelta
from typing import Dict, Iterable, List

from timetrack.metrics.schemas import VelocityWeek
from timetrack.tasks.enums import StatusCategory
from timetrack.tasks.tree import TaskEntry


def week_start(day: date) -> date:
    """Sunday on or before the given day."""
    # date.weekday(): Monday = 0, Sunday = 6
    return day - timedelta(days=(day.weekday() + 1) % 7)


class VelocityBucketer:
    def __init__(self):
        self._weeks: Dict[date, VelocityWeek] = {}

    def add(self, entry: TaskEntry) -> None:
        task = entry.task
        if task.due_date is None:
            return

        key = week_start(task.due_date)
        week = self._weeks.get(key)
        if week is None:
            week = self._weeks[key] = VelocityWeek(week_key=key, label=key.strftime("%d/%m"))

        if entry.category is StatusCategory.COMPLETED:
            week.completed += 1
        elif entry.category is StatusCategory.IN_PROGRESS:
            week.in_progress += 1
        week.hours += task.time_logged

    def weeks(self, limit: int = 8) -> List[VelocityWeek]:
        """The last `limit` weeks present in the data, oldest first."""
        ordered = [self._weeks[key] for key in sorted(self._weeks)]
        return ordered[-limit:] if limit > 0 else []


def weekly_velocity(entries: Iterable[TaskEntry], limit: int = 8) -> List[VelocityWeek]:
    bucketer = VelocityBucketer()
    for entry in entries:
        bucketer.add(entry)
    return bucketer.weeks(limit)
