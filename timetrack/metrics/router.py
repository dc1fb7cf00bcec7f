"""
TIMETRACK - Metrics Router

Read-only dashboard endpoints computed from the current dataset snapshot.
"""

from datetime import date
from typing import Annotated, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from timetrack.config import settings
from timetrack.datasets.repository import DatasetRepositoryInterface
from timetrack.datasets.router import get_dataset_repository
from timetrack.metrics.cache import MetricsCache
from timetrack.metrics.distribution import DistributionFilters
from timetrack.metrics.schemas import (
    DashboardMetrics,
    PriorityDistributionRow,
    QualityScore,
    VelocityWeek,
)
from timetrack.metrics.service import MetricsService


router = APIRouter(prefix="/metrics", tags=["Metrics"])

metrics_cache = MetricsCache(max_entries=settings.METRICS_CACHE_SIZE)


async def get_metrics_service() -> MetricsService:
    """Dependency to get metrics service instance."""
    return MetricsService(
        critical_days=settings.CRITICAL_WINDOW_DAYS,
        upcoming_days=settings.UPCOMING_WINDOW_DAYS,
        velocity_weeks=settings.VELOCITY_WEEKS,
    )


async def get_metrics_cache() -> MetricsCache:
    return metrics_cache


async def get_today() -> date:
    """Dependency returning the server's local calendar day."""
    return date.today()


DatasetRepository = Annotated[DatasetRepositoryInterface, Depends(get_dataset_repository)]
Service = Annotated[MetricsService, Depends(get_metrics_service)]
Cache = Annotated[MetricsCache, Depends(get_metrics_cache)]


@router.get("/dashboard", response_model=DashboardMetrics, summary="Team, project and deadline rollups")
async def get_dashboard(
    repository: DatasetRepository,
    service: Service,
    cache: Cache,
    current_day: Annotated[date, Depends(get_today)],
    today: Optional[date] = Query(default=None, description="Reference day; defaults to the server's today"),
) -> DashboardMetrics:
    snapshot = await repository.get_snapshot()
    reference = today or current_day
    key = ("dashboard", snapshot.version, reference, service.critical_days, service.upcoming_days, service.velocity_weeks)
    return cache.get_or_compute(
        key,
        lambda: service.generate_dashboard(snapshot.groups, reference, snapshot.version),
    )


@router.get("/priorities", response_model=List[PriorityDistributionRow], summary="Priority distribution per member")
async def get_priority_distribution(
    repository: DatasetRepository,
    service: Service,
    cache: Cache,
    include_parent_tasks: bool = Query(default=True),
    include_subtasks: bool = Query(default=True),
    include_completed: bool = Query(default=True),
) -> List[PriorityDistributionRow]:
    snapshot = await repository.get_snapshot()
    filters = DistributionFilters(
        include_parent_tasks=include_parent_tasks,
        include_subtasks=include_subtasks,
        include_completed=include_completed,
    )
    return cache.get_or_compute(
        ("priorities", snapshot.version, filters),
        lambda: service.priority_distribution(snapshot.groups, filters),
    )


@router.get("/velocity", response_model=List[VelocityWeek], summary="Weekly velocity")
async def get_velocity(
    repository: DatasetRepository,
    service: Service,
    member: Optional[str] = Query(default=None, description="Restrict to one member's group"),
) -> List[VelocityWeek]:
    snapshot = await repository.get_snapshot()
    if member is not None and snapshot.find_group(member) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Member not found")
    return service.velocity(snapshot.groups, member)


@router.get("/quality", response_model=List[QualityScore], summary="Data quality ranking")
async def get_quality_ranking(
    repository: DatasetRepository,
    service: Service,
    track_optional_fields: bool = Query(default=False),
    include_subtasks: bool = Query(default=False),
) -> List[QualityScore]:
    snapshot = await repository.get_snapshot()
    return service.quality_ranking(snapshot.groups, track_optional_fields, include_subtasks)


@router.get("/quality/{member}", response_model=QualityScore, summary="Data quality score for one member")
async def get_member_quality(
    member: str,
    repository: DatasetRepository,
    service: Service,
    track_optional_fields: bool = Query(default=False),
    include_subtasks: bool = Query(default=False),
) -> QualityScore:
    snapshot = await repository.get_snapshot()
    group = snapshot.find_group(member)
    if group is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Member not found")
    return service.member_quality(group, track_optional_fields, include_subtasks)
