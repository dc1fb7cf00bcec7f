"""
TIMETRACK - Custom Box Filter Engine

Selects tasks into user-defined boxes and builds a member's board.

A task qualifies for a box when
  (no filter tags OR it has at least one of them, case-insensitive) AND
  (no filter statuses OR its status contains at least one of them).
With exclusive boxes, every task id captured by any box is removed from all
project listings; otherwise a task may show in both places.
"""

import logging
from typing import Dict, Iterable, List, Optional, Sequence, Set

from timetrack.boxes.models import BoardFilters, CustomBox
from timetrack.boxes.schemas import BoardItem, BoardTask, MemberBoard
from timetrack.tasks.classifiers import categorize_status, get_priority_bucket
from timetrack.tasks.enums import StatusCategory
from timetrack.tasks.models import Group, Task
from timetrack.tasks.tree import flatten_task, group_tasks, project_key

logger = logging.getLogger(__name__)


def matches_tags(task: Task, tags: Iterable[str]) -> bool:
    wanted = [tag.lower() for tag in tags]
    if not wanted:
        return True
    task_tags = task.tag_names()
    return any(tag in task_tags for tag in wanted)


def matches_statuses(task: Task, statuses: Iterable[str]) -> bool:
    wanted = [status.lower() for status in statuses]
    if not wanted:
        return True
    task_status = (task.status or "").lower()
    return any(status in task_status for status in wanted)


def box_matches(box: CustomBox, task: Task) -> bool:
    return matches_tags(task, box.filter_tags) and matches_statuses(task, box.filter_statuses)


def select_box_tasks(box: CustomBox, tasks: Sequence[Task]) -> List[Task]:
    """Tasks from the member's flattened set that the box captures, in order."""
    return [task for task in tasks if box_matches(box, task)]


def captured_task_ids(selections: Iterable[Sequence[Task]]) -> Set[str]:
    """Union of task ids captured by any box."""
    return {task.id for tasks in selections for task in tasks}


def _to_board_task(task: Task) -> BoardTask:
    return BoardTask(
        id=task.id,
        name=task.name,
        status=task.status,
        category=categorize_status(task.status),
        priority=get_priority_bucket(task.priority),
        due_date=task.due_date,
        tags=list(task.tags),
        is_subtask=task.is_subtask,
    )


def _order_items(items: List[BoardItem], saved_order: Sequence[str]) -> List[BoardItem]:
    """Saved order first (unknown ids ignored), then remaining boxes, then remaining projects."""
    by_id = {item.item_id: item for item in items}
    ordered: List[BoardItem] = []
    used: Set[str] = set()
    for item_id in saved_order:
        item = by_id.get(item_id)
        if item is not None and item_id not in used:
            ordered.append(item)
            used.add(item_id)
    for kind in ("custombox", "project"):
        ordered.extend(item for item in items if item.kind == kind and item.item_id not in used)
    return ordered


class BoardService:
    """Builds the combined box + project board for one member."""

    def build_board(
        self,
        group: Group,
        boxes: Sequence[CustomBox],
        exclusive_boxes: bool = True,
        filters: BoardFilters = BoardFilters(),
        saved_order: Optional[Sequence[str]] = None,
    ) -> MemberBoard:
        all_tasks = group_tasks(group)
        ordered_boxes = sorted(boxes, key=lambda box: box.order)
        selections: Dict[str, List[Task]] = {box.id: select_box_tasks(box, all_tasks) for box in ordered_boxes}
        captured = captured_task_ids(selections.values()) if exclusive_boxes else set()

        def visible(task: Task) -> bool:
            return filters.show_completed or categorize_status(task.status) is not StatusCategory.COMPLETED

        items: List[BoardItem] = []
        for box in ordered_boxes:
            tasks = [_to_board_task(task) for task in selections[box.id] if visible(task)]
            items.append(
                BoardItem(
                    item_id=box.board_id,
                    kind="custombox",
                    name=box.name,
                    color=box.color,
                    tasks=tasks,
                    visible=bool(tasks),
                )
            )

        for project in group.projects:
            listing = [
                task
                for top_level in project.tasks
                for task in flatten_task(top_level)
                if task.id not in captured
                and visible(task)
                and matches_tags(task, filters.tags)
                and matches_statuses(task, filters.statuses)
            ]
            name = project_key(project)
            items.append(
                BoardItem(
                    item_id=f"project:{name}",
                    kind="project",
                    name=name,
                    tasks=[_to_board_task(task) for task in listing],
                    visible=bool(listing),
                )
            )

        logger.debug(
            f"Board for {group.assignee}: {len(ordered_boxes)} boxes captured {len(captured)} tasks "
            f"(exclusive={exclusive_boxes})"
        )
        return MemberBoard(
            member=group.assignee,
            exclusive_boxes=exclusive_boxes,
            items=_order_items(items, saved_order or []),
        )
