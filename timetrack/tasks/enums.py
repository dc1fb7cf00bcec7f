"""
TIMETRACK - Task Enums

Closed classification enums derived from free-text task fields.
"""

from enum import Enum


class StatusCategory(str, Enum):
    """Normalized task status."""
    COMPLETED = "completed"
    IN_PROGRESS = "inProgress"
    BLOCKED = "blocked"
    PENDING = "pending"


class PriorityBucket(str, Enum):
    """Normalized task priority."""
    URGENTE = "urgente"
    ALTA = "alta"
    NORMAL = "normal"
    BAIXA = "baixa"
    SEM_PRIORIDADE = "sem_prioridade"


class DeadlineWindow(str, Enum):
    """
    Watchlist a task falls into relative to today.

    - OVERDUE: due date before today
    - CRITICAL: due today up to the critical window (3 days)
    - UPCOMING: after the critical window up to the upcoming window (7 days)
    """
    OVERDUE = "overdue"
    CRITICAL = "critical"
    UPCOMING = "upcoming"


class QualityTier(str, Enum):
    """Data quality tiers shown in the member ranking."""
    ELITE = "Elite"
    PROFISSIONAL = "Profissional"
    ATENCAO = "Atenção"
    CRITICO = "Crítico"


class RowType(str, Enum):
    """Row kinds in the timesheet export."""
    MEMBER = "member"
    PROJECT = "project"
    TASK = "task"
