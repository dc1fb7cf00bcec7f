"""
TIMETRACK - Dataset Router

Endpoints for loading and inspecting the dataset snapshot.
"""

from typing import Annotated, List

from fastapi import APIRouter, Depends

from timetrack.datasets.repository import DatasetRepositoryInterface, DatasetSnapshot, InMemoryDatasetRepository
from timetrack.datasets.schemas import DatasetSummary, GroupPayload
from timetrack.tasks.tree import flatten_task


router = APIRouter(prefix="/dataset", tags=["Dataset"])

# Process-wide snapshot store
dataset_repository = InMemoryDatasetRepository()


async def get_dataset_repository() -> DatasetRepositoryInterface:
    """Dependency to get the dataset repository instance."""
    return dataset_repository


def summarize(snapshot: DatasetSnapshot) -> DatasetSummary:
    projects = [project for group in snapshot.groups for project in group.projects]
    task_count = sum(len(flatten_task(task)) for project in projects for task in project.tasks)
    return DatasetSummary(
        version=snapshot.version,
        group_count=len(snapshot.groups),
        project_count=len(projects),
        task_count=task_count,
        loaded_at=snapshot.loaded_at,
    )


@router.put("", response_model=DatasetSummary, summary="Load a dataset snapshot")
async def load_dataset(
    groups: List[GroupPayload],
    repository: Annotated[DatasetRepositoryInterface, Depends(get_dataset_repository)],
) -> DatasetSummary:
    """
    Replace the current dataset with the given member groups.

    Every load bumps the snapshot version.
    """
    snapshot = await repository.replace([group.to_model() for group in groups])
    return summarize(snapshot)


@router.get("", response_model=DatasetSummary, summary="Describe the current dataset")
async def get_dataset(
    repository: Annotated[DatasetRepositoryInterface, Depends(get_dataset_repository)],
) -> DatasetSummary:
    return summarize(await repository.get_snapshot())
