"""
TIMETRACK - Status and Priority Classifiers

Total functions from free-text (Portuguese or English) fields to closed enums.
Classification never fails: unmatched input falls back to a default value.
"""

from typing import List, Optional, Union

from timetrack.tasks.constants import (
    ASSIGNEE_SEPARATOR,
    BLOCKED_KEYWORDS,
    COMPLETED_KEYWORDS,
    IN_PROGRESS_KEYWORDS,
    PRIORITY_ALIASES,
    PRIORITY_LABELS,
    UNASSIGNED,
)
from timetrack.tasks.enums import PriorityBucket, StatusCategory


def categorize_status(status: Optional[str] = None) -> StatusCategory:
    """
    Map a free-text status to a StatusCategory.

    Keyword sets are tested in a fixed order and the first match wins:
    completed, blocked, in progress. Anything else (or no status) is pending.
    """
    if not status:
        return StatusCategory.PENDING

    normalized = status.lower().strip()
    if any(keyword in normalized for keyword in COMPLETED_KEYWORDS):
        return StatusCategory.COMPLETED
    if any(keyword in normalized for keyword in BLOCKED_KEYWORDS):
        return StatusCategory.BLOCKED
    if any(keyword in normalized for keyword in IN_PROGRESS_KEYWORDS):
        return StatusCategory.IN_PROGRESS
    return StatusCategory.PENDING


def get_priority_bucket(priority: Optional[Union[str, int]] = None) -> PriorityBucket:
    """Map a free-text or numeric-code priority to a PriorityBucket."""
    if priority is None:
        return PriorityBucket.SEM_PRIORIDADE

    normalized = str(priority).lower().strip()
    if not normalized:
        return PriorityBucket.SEM_PRIORIDADE
    return PriorityBucket(PRIORITY_ALIASES.get(normalized, PriorityBucket.SEM_PRIORIDADE.value))


def priority_label(bucket: PriorityBucket) -> str:
    """Display label for a priority bucket."""
    return PRIORITY_LABELS[bucket.value]


def is_unassigned(assignee: Optional[str]) -> bool:
    if not assignee or not assignee.strip():
        return True
    return assignee.strip().lower() == UNASSIGNED.lower()


def split_assignees(assignee: Optional[str]) -> List[str]:
    """
    Split a shared assignee field ("Ana / Bruno") into member names.

    Always returns at least one name; tasks without a usable assignee
    belong to the unassigned bucket.
    """
    if is_unassigned(assignee):
        return [UNASSIGNED]

    names = [
        name.strip()
        for name in assignee.split(ASSIGNEE_SEPARATOR)
        if not is_unassigned(name)
    ]
    return names or [UNASSIGNED]
