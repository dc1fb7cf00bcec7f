"""
TIMETRACK - Priority Distribution Tests
"""

from timetrack.metrics.distribution import DistributionFilters, priority_distribution
from timetrack.tasks.enums import PriorityBucket
from timetrack.tasks.models import Group, Project, Task
from timetrack.tasks.tree import walk_groups


def build_groups():
    sub = Task(id="s", name="sub", assignee="Ana", priority="alta", time_estimate=1, is_subtask=True)
    return [
        Group(
            assignee="Ana",
            projects=[
                Project(
                    name="Portal",
                    tasks=[
                        Task(id="1", name="a", assignee="Ana", priority="urgente", time_estimate=5, subtasks=[sub]),
                        Task(id="2", name="b", assignee="Ana", priority="2", status="done", time_estimate=2),
                        Task(id="3", name="c", assignee="Bruno", priority="low", time_estimate=10),
                        Task(id="4", name="d", priority="1", time_estimate=7),
                    ],
                )
            ],
        )
    ]


class TestPriorityDistribution:
    """Tests for the per-member priority matrix."""

    def test_buckets_are_zero_filled(self):
        """Every member row has all five buckets with labels."""
        rows = priority_distribution(walk_groups(build_groups()))
        for row in rows:
            assert set(row.buckets) == set(PriorityBucket)

        ana = next(row for row in rows if row.member == "Ana")
        assert ana.buckets[PriorityBucket.SEM_PRIORIDADE].count == 0
        assert ana.buckets[PriorityBucket.URGENTE].label == "Urgente (P0)"

    def test_counts_and_hours(self):
        """Counts and estimated hours accumulate per bucket."""
        rows = {row.member: row for row in priority_distribution(walk_groups(build_groups()))}
        ana = rows["Ana"]

        assert ana.buckets[PriorityBucket.URGENTE].count == 1
        assert ana.buckets[PriorityBucket.URGENTE].hours == 5
        assert ana.buckets[PriorityBucket.ALTA].hours == 1
        assert ana.buckets[PriorityBucket.NORMAL].hours == 2
        assert ana.total_count == 3
        assert ana.total_hours == 8
        assert rows["Bruno"].buckets[PriorityBucket.BAIXA].hours == 10

    def test_sorted_by_total_hours_and_unassigned_omitted(self):
        """Rows are sorted by hours and skip unassigned tasks."""
        rows = priority_distribution(walk_groups(build_groups()))
        assert [row.member for row in rows] == ["Bruno", "Ana"]

    def test_shared_task_count_is_split(self):
        """Shared tasks split the count but not the hours."""
        task = Task(id="1", name="a", assignee="Ana / Bruno", priority="high", time_estimate=6)
        rows = priority_distribution(walk_groups([Group(assignee="Ana", projects=[Project(name="P", tasks=[task])])]))
        for row in rows:
            assert row.buckets[PriorityBucket.ALTA].count == 0.5
            assert row.buckets[PriorityBucket.ALTA].hours == 6

    def test_exclude_subtasks(self):
        """Subtasks can be left out."""
        filters = DistributionFilters(include_subtasks=False)
        rows = {row.member: row for row in priority_distribution(walk_groups(build_groups()), filters)}
        assert rows["Ana"].buckets[PriorityBucket.ALTA].count == 0
        assert rows["Ana"].total_hours == 7

    def test_exclude_parent_tasks(self):
        """Top-level tasks can be left out."""
        filters = DistributionFilters(include_parent_tasks=False)
        rows = priority_distribution(walk_groups(build_groups()), filters)
        assert [row.member for row in rows] == ["Ana"]
        assert rows[0].total_count == 1
        assert rows[0].total_hours == 1

    def test_exclude_completed(self):
        """Completed tasks can be left out."""
        filters = DistributionFilters(include_completed=False)
        rows = {row.member: row for row in priority_distribution(walk_groups(build_groups()), filters)}
        assert rows["Ana"].buckets[PriorityBucket.NORMAL].count == 0
        assert rows["Ana"].total_hours == 6
