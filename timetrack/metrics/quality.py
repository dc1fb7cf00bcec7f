"""
TIMETRACK - Data Quality Scorer

Penalty-weighted completeness score over a member's open tasks.

score = max(0, round(100 - penalty / tasks * 2)), or 100 with no open tasks.
The start date and description weights only apply when the caller tracks
those fields (track_optional_fields=True).
"""

from typing import Dict, Iterable, List

from timetrack.metrics.ratios import round_half_up
from timetrack.metrics.schemas import QualityBreakdown, QualityScore
from timetrack.tasks.classifiers import categorize_status, get_priority_bucket, is_unassigned
from timetrack.tasks.constants import PENALTY_WEIGHTS
from timetrack.tasks.enums import PriorityBucket, QualityTier, StatusCategory
from timetrack.tasks.models import Group, Task
from timetrack.tasks.tree import flatten_task

PENALTY_MULTIPLIER = 2


def task_issues(task: Task, track_optional_fields: bool = False) -> List[str]:
    """Names of the penalized fields missing on a task."""
    issues = []
    if is_unassigned(task.assignee):
        issues.append("assignee")
    if get_priority_bucket(task.priority) is PriorityBucket.SEM_PRIORIDADE:
        issues.append("priority")
    if task.due_date is None:
        issues.append("due_date")
    if not task.time_estimate:
        issues.append("estimate")
    if track_optional_fields:
        if task.start_date is None:
            issues.append("start_date")
        if not task.description or not task.description.strip():
            issues.append("description")
    return issues


def quality_tier(score: int) -> QualityTier:
    if score < 60:
        return QualityTier.CRITICO
    if score < 70:
        return QualityTier.ATENCAO
    if score < 90:
        return QualityTier.PROFISSIONAL
    return QualityTier.ELITE


def score_tasks(member: str, tasks: Iterable[Task], track_optional_fields: bool = False) -> QualityScore:
    """Score an arbitrary task collection; completed tasks are out of scope."""
    breakdown: Dict[str, int] = {name: 0 for name in PENALTY_WEIGHTS}
    total_tasks = 0
    penalty = 0
    issues_count = 0

    for task in tasks:
        if categorize_status(task.status) is StatusCategory.COMPLETED:
            continue
        total_tasks += 1
        issues = task_issues(task, track_optional_fields)
        for name in issues:
            breakdown[name] += 1
            penalty += PENALTY_WEIGHTS[name]
        if issues:
            issues_count += 1

    if total_tasks == 0:
        score = 100
    else:
        score = max(0, round_half_up(100 - penalty / total_tasks * PENALTY_MULTIPLIER))

    return QualityScore(
        member=member,
        score=score,
        tier=quality_tier(score),
        total_tasks=total_tasks,
        penalty_points=penalty,
        issues_count=issues_count,
        breakdown=QualityBreakdown(**breakdown),
    )


def score_member(
    group: Group,
    track_optional_fields: bool = False,
    include_subtasks: bool = False,
) -> QualityScore:
    """Score one member's group. By default only each project's top-level tasks count."""
    tasks: List[Task] = []
    for project in group.projects:
        for task in project.tasks:
            tasks.extend(flatten_task(task) if include_subtasks else [task])
    return score_tasks(group.assignee, tasks, track_optional_fields)


def rank_members(
    groups: Iterable[Group],
    track_optional_fields: bool = False,
    include_subtasks: bool = False,
) -> List[QualityScore]:
    """Scores for every group, best first."""
    scores = [score_member(group, track_optional_fields, include_subtasks) for group in groups]
    scores.sort(key=lambda s: s.score, reverse=True)
    return scores
