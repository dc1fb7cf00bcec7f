"""
TIMETRACK - Tree Flattener

Turns the nested dataset into a flat, classified stream of tasks.
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, List

from timetrack.tasks.classifiers import categorize_status
from timetrack.tasks.constants import NO_PROJECT
from timetrack.tasks.enums import StatusCategory
from timetrack.tasks.models import Group, Project, Task


def flatten_task(task: Task) -> List[Task]:
    """
    Return the task followed by a depth-first, pre-order expansion of its subtasks.

    The source tree is not modified and nothing is deduplicated.
    """
    flat: List[Task] = []
    stack = [task]
    while stack:
        current = stack.pop()
        flat.append(current)
        # Reversed so the first subtask is popped first
        stack.extend(reversed(current.subtasks))
    return flat


@dataclass(frozen=True)
class TaskEntry:
    """A flattened task together with where it was found and its status category."""

    member: str
    project: str
    task: Task
    category: StatusCategory


def project_key(project: Project) -> str:
    """Name a project is aggregated under."""
    return (project.name or "").strip() or NO_PROJECT


def walk_groups(groups: Iterable[Group]) -> Iterator[TaskEntry]:
    """
    Yield every task of every group in traversal order.

    Order: groups, then projects, then top-level tasks, each expanded with
    flatten_task. A task id present under two paths is yielded twice.
    """
    for group in groups:
        member = (group.assignee or "").strip()
        for project in group.projects:
            project_name = project_key(project)
            for top_level in project.tasks:
                for task in flatten_task(top_level):
                    yield TaskEntry(
                        member=member,
                        project=project_name,
                        task=task,
                        category=categorize_status(task.status),
                    )


def group_tasks(group: Group) -> List[Task]:
    """All tasks of one group, flattened, in traversal order."""
    return [task for project in group.projects for top_level in project.tasks for task in flatten_task(top_level)]
