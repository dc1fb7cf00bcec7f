"""
TIMETRACK - Task Control Tests
"""

from datetime import date

import pytest

from timetrack.metrics.control import missing_fields, task_control
from timetrack.metrics.service import MetricsService
from timetrack.tasks.models import Group, Project, Task
from timetrack.tasks.tree import walk_groups


def filled_task(task_id, **overrides):
    """A task with every control field filled in."""
    fields = dict(
        id=task_id,
        name=f"Task {task_id}",
        assignee="Ana",
        priority="1",
        due_date=date(2025, 1, 20),
        start_date=date(2025, 1, 10),
        time_estimate=2,
        description="Details",
    )
    fields.update(overrides)
    return Task(**fields)


@pytest.fixture
def groups():
    bare_sub = Task(id="s", name="Bare subtask", is_subtask=True)
    return [
        Group(
            assignee="Ana",
            projects=[
                Project(
                    name="Portal",
                    tasks=[
                        filled_task("p", subtasks=[bare_sub]),
                        Task(id="done", name="Closed", status="Concluído"),
                        filled_task("b", assignee="Sem responsável", priority="P9"),
                    ],
                )
            ],
        ),
        Group(assignee="Bruno", projects=[Project(name="Ops", tasks=[bare_sub])]),
    ]


class TestMissingFields:
    """Tests for the per-task control check."""

    def test_filled_task(self):
        """A task with every field filled has nothing missing."""
        assert missing_fields(filled_task("1")) == []

    def test_bare_task(self):
        """A bare task misses all six fields."""
        assert missing_fields(Task(id="1", name="bare")) == [
            "assignee", "estimate", "due_date", "start_date", "priority", "description",
        ]

    def test_unrecognized_priority_text_counts_as_present(self):
        """Only blank priority text is missing; unknown codes are a quality issue, not a gap."""
        assert missing_fields(filled_task("1", priority="P9")) == []
        assert missing_fields(filled_task("1", priority="  ")) == ["priority"]


class TestTaskControl:
    """Tests for the task control lists."""

    def test_lists_include_subtasks_and_skip_completed(self, groups):
        """Open subtasks are listed; completed tasks never are."""
        control = task_control(walk_groups(groups))

        assert [t.id for t in control.without_assignee] == ["s", "b", "s"]
        assert [t.id for t in control.without_description] == ["s", "s"]
        assert "done" not in [t.id for t in control.without_estimate]
        assert "p" not in [t.id for t in control.without_start_date]

    def test_every_occurrence_is_listed_with_its_location(self, groups):
        """A task found under two members appears once per path."""
        control = task_control(walk_groups(groups))
        locations = [(t.member, t.project) for t in control.without_estimate]
        assert locations == [("Ana", "Portal"), ("Bruno", "Ops")]

    def test_total_counts_distinct_ids(self, groups):
        """The total counts each task id once across all lists."""
        assert task_control(walk_groups(groups)).total_incomplete == 2

    def test_empty_dataset(self):
        """No tasks gives empty lists and a zero total."""
        control = task_control(walk_groups([]))
        assert control.total_incomplete == 0
        assert control.without_assignee == []

    def test_dashboard_includes_task_control(self, groups, today):
        """The dashboard's single pass fills the task control section."""
        dashboard = MetricsService().generate_dashboard(groups, today)
        assert dashboard.task_control == task_control(walk_groups(groups))
        assert dashboard.task_control.total_incomplete == 2
