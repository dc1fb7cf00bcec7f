"""
TIMETRACK - Deadline Classifier

Places open tasks with a due date on the overdue / critical / upcoming
watchlists. A task id is considered at most once per traversal: the caller
threads one visited-id set through the whole pass, and the rollup overdue
counters reuse the outcome of observe() so both draw from the same set.
"""

from datetime import date, timedelta
from typing import Dict, Iterable, List, Optional, Set

from timetrack.metrics.schemas import DeadlineWatchlists, WatchlistTask
from timetrack.tasks.classifiers import get_priority_bucket
from timetrack.tasks.enums import DeadlineWindow, StatusCategory
from timetrack.tasks.models import Group
from timetrack.tasks.tree import TaskEntry, walk_groups


class DeadlineClassifier:
    """Collects watchlists for one traversal relative to a fixed day."""

    def __init__(self, today: date, critical_days: int = 3, upcoming_days: int = 7):
        self.today = today
        self.critical_until = today + timedelta(days=critical_days)
        self.upcoming_until = today + timedelta(days=upcoming_days)
        self._lists: Dict[DeadlineWindow, List[WatchlistTask]] = {window: [] for window in DeadlineWindow}

    def classify(self, due: date) -> Optional[DeadlineWindow]:
        """Date-only classification; None when beyond the upcoming window."""
        if due < self.today:
            return DeadlineWindow.OVERDUE
        if due <= self.critical_until:
            return DeadlineWindow.CRITICAL
        if due <= self.upcoming_until:
            return DeadlineWindow.UPCOMING
        return None

    def observe(self, entry: TaskEntry, seen_ids: Set[str]) -> Optional[DeadlineWindow]:
        """
        Consider one task of the traversal.

        Completed tasks and tasks without a due date are skipped without
        consuming their id. Otherwise the id is marked visited (even when the
        due date is too far away to list) and the window is returned.
        """
        task = entry.task
        if entry.category is StatusCategory.COMPLETED or task.due_date is None:
            return None
        if task.id in seen_ids:
            return None
        seen_ids.add(task.id)

        window = self.classify(task.due_date)
        if window is not None:
            self._lists[window].append(
                WatchlistTask(
                    id=task.id,
                    name=task.name,
                    member=entry.member,
                    project=entry.project,
                    status=task.status,
                    priority=get_priority_bucket(task.priority),
                    due_date=task.due_date,
                    days_until_due=(task.due_date - self.today).days,
                )
            )
        return window

    def watchlists(self) -> DeadlineWatchlists:
        # Stable sort keeps traversal order among tasks due the same day
        def by_due(tasks: List[WatchlistTask]) -> List[WatchlistTask]:
            return sorted(tasks, key=lambda t: t.due_date)

        return DeadlineWatchlists(
            overdue=by_due(self._lists[DeadlineWindow.OVERDUE]),
            critical=by_due(self._lists[DeadlineWindow.CRITICAL]),
            upcoming=by_due(self._lists[DeadlineWindow.UPCOMING]),
        )


def classify_deadlines(
    groups: Iterable[Group],
    today: date,
    critical_days: int = 3,
    upcoming_days: int = 7,
) -> DeadlineWatchlists:
    """Watchlists for a dataset on their own, with a fresh visited set."""
    classifier = DeadlineClassifier(today, critical_days, upcoming_days)
    seen_ids: Set[str] = set()
    for entry in walk_groups(groups):
        classifier.observe(entry, seen_ids)
    return classifier.watchlists()
