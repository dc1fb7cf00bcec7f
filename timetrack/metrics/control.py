"""
TIMETRACK - Task Control

Lists the open tasks, subtasks included, that are missing planning fields,
so the team can fill them in. Unlike the quality score this runs over the
whole flattened dataset and lists every occurrence.
"""

from typing import Dict, Iterable, List, Set

from timetrack.metrics.schemas import ControlTask, TaskControl
from timetrack.tasks.classifiers import is_unassigned
from timetrack.tasks.enums import StatusCategory
from timetrack.tasks.models import Task
from timetrack.tasks.tree import TaskEntry

CONTROL_FIELDS = ("assignee", "estimate", "due_date", "start_date", "priority", "description")


def _blank(value) -> bool:
    return value is None or not str(value).strip()


def missing_fields(task: Task) -> List[str]:
    """Control fields a task lacks. Priority is checked as raw text, not by bucket."""
    missing = []
    if is_unassigned(task.assignee):
        missing.append("assignee")
    if not task.time_estimate:
        missing.append("estimate")
    if task.due_date is None:
        missing.append("due_date")
    if task.start_date is None:
        missing.append("start_date")
    if _blank(task.priority):
        missing.append("priority")
    if _blank(task.description):
        missing.append("description")
    return missing


class TaskControlCollector:
    def __init__(self):
        self._lists: Dict[str, List[ControlTask]] = {name: [] for name in CONTROL_FIELDS}
        self._ids: Set[str] = set()

    def add(self, entry: TaskEntry) -> None:
        if entry.category is StatusCategory.COMPLETED:
            return

        task = entry.task
        missing = missing_fields(task)
        if not missing:
            return

        item = ControlTask(
            id=task.id,
            name=task.name,
            member=entry.member,
            project=entry.project,
            status=task.status,
        )
        for name in missing:
            self._lists[name].append(item)
        self._ids.add(task.id)

    def summary(self) -> TaskControl:
        return TaskControl(
            without_assignee=self._lists["assignee"],
            without_estimate=self._lists["estimate"],
            without_due_date=self._lists["due_date"],
            without_start_date=self._lists["start_date"],
            without_priority=self._lists["priority"],
            without_description=self._lists["description"],
            total_incomplete=len(self._ids),
        )


def task_control(entries: Iterable[TaskEntry]) -> TaskControl:
    collector = TaskControlCollector()
    for entry in entries:
        collector.add(entry)
    return collector.summary()
