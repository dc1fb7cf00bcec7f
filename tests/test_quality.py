"""
TIMETRACK - Data Quality Scorer Tests
"""

from datetime import date

import pytest

from timetrack.metrics.quality import quality_tier, rank_members, score_member, score_tasks, task_issues
from timetrack.tasks.enums import QualityTier
from timetrack.tasks.models import Group, Project, Task


def complete_task(task_id, **overrides):
    """A task with every penalized field filled in."""
    fields = dict(
        id=task_id,
        name=f"Task {task_id}",
        assignee="Ana",
        priority="2",
        due_date=date(2025, 1, 20),
        start_date=date(2025, 1, 10),
        time_estimate=3,
        description="Details",
    )
    fields.update(overrides)
    return Task(**fields)


class TestTaskIssues:
    """Tests for per-task missing-field detection."""

    def test_complete_task_has_no_issues(self):
        """A fully filled task has no issues."""
        assert task_issues(complete_task("1"), track_optional_fields=True) == []

    def test_empty_task(self):
        """A bare task misses the mandatory fields, and the optional ones when tracked."""
        task = Task(id="1", name="bare")
        assert task_issues(task) == ["assignee", "priority", "due_date", "estimate"]
        assert task_issues(task, track_optional_fields=True) == [
            "assignee", "priority", "due_date", "estimate", "start_date", "description",
        ]

    def test_unrecognized_priority_is_penalized(self):
        """A priority outside every bucket counts as missing."""
        assert task_issues(complete_task("1", priority="P9")) == ["priority"]


class TestScoreTasks:
    """Tests for the penalty-weighted score."""

    def test_two_open_tasks(self, today):
        """Penalty 0 + 30 over two tasks scores 70."""
        task_a = Task(id="a", name="A", assignee="X", due_date=today, priority="2", time_estimate=2)
        task_b = Task(id="b", name="B", time_estimate=2)
        score = score_tasks("X", [task_a, task_b])

        assert score.penalty_points == 30
        assert score.total_tasks == 2
        assert score.score == 70
        assert score.tier == QualityTier.PROFISSIONAL
        assert score.issues_count == 1
        assert score.breakdown.assignee == 1
        assert score.breakdown.due_date == 1
        assert score.breakdown.priority == 1
        assert score.breakdown.estimate == 0

    def test_completed_tasks_are_out_of_scope(self):
        """Completed tasks do not affect the score."""
        done = Task(id="d", name="Done", status="Concluído")
        score = score_tasks("Ana", [done, complete_task("1")])
        assert score.total_tasks == 1
        assert score.score == 100

    def test_no_open_tasks_scores_100(self):
        """Without open tasks the score is 100."""
        score = score_tasks("Ana", [])
        assert score.score == 100
        assert score.tier == QualityTier.ELITE

    def test_score_stays_in_range(self):
        """Even fully bare tasks keep the score within 0..100."""
        bare = [Task(id=str(i), name="bare") for i in range(20)]
        score = score_tasks("Ana", bare, track_optional_fields=True)
        assert 0 <= score.score <= 100
        assert score.score == 24

    def test_optional_fields_only_when_tracked(self):
        """Start date and description only cost points when tracked."""
        task = complete_task("1", start_date=None, description="  ")
        assert score_tasks("Ana", [task]).score == 100
        assert score_tasks("Ana", [task], track_optional_fields=True).score == 94


class TestQualityTier:
    """Tests for the tier thresholds."""

    @pytest.mark.parametrize(
        "score,tier",
        [
            (100, QualityTier.ELITE),
            (90, QualityTier.ELITE),
            (89, QualityTier.PROFISSIONAL),
            (70, QualityTier.PROFISSIONAL),
            (69, QualityTier.ATENCAO),
            (60, QualityTier.ATENCAO),
            (59, QualityTier.CRITICO),
            (0, QualityTier.CRITICO),
        ],
    )
    def test_thresholds(self, score, tier):
        """Scores map to Elite, Profissional, Atenção or Crítico."""
        assert quality_tier(score) == tier


class TestScoreMember:
    """Tests for scoring member groups."""

    def test_top_level_tasks_by_default(self):
        """Only top-level tasks count unless subtasks are included."""
        bare_sub = Task(id="s", name="sub", is_subtask=True)
        parent = complete_task("p", subtasks=[bare_sub])
        group = Group(assignee="Ana", projects=[Project(name="P", tasks=[parent])])

        assert score_member(group).total_tasks == 1
        assert score_member(group).score == 100
        assert score_member(group, include_subtasks=True).total_tasks == 2
        assert score_member(group, include_subtasks=True).score < 100

    def test_ranking_best_first(self):
        """Ranking lists the best score first."""
        groups = [
            Group(assignee="Bruno", projects=[Project(name="P", tasks=[Task(id="b", name="bare")])]),
            Group(assignee="Ana", projects=[Project(name="P", tasks=[complete_task("a")])]),
        ]
        ranking = rank_members(groups)
        assert [score.member for score in ranking] == ["Ana", "Bruno"]
        assert ranking[1].score == 30
        assert ranking[1].tier == QualityTier.CRITICO
