"""
TIMETRACK - Custom Box Router

Box management and the combined member board.
"""

import logging
from typing import Annotated, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from timetrack.boxes.models import BoardFilters, BoxSettings, CustomBox
from timetrack.boxes.repository import BoxRepositoryInterface, InMemoryBoxRepository
from timetrack.boxes.schemas import (
    BoardOrderRequest,
    BoxSettingsModel,
    CustomBoxCreateRequest,
    CustomBoxResponse,
    MemberBoard,
)
from timetrack.boxes.service import BoardService
from timetrack.config import settings
from timetrack.datasets.repository import DatasetRepositoryInterface
from timetrack.datasets.router import get_dataset_repository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/boxes", tags=["Custom Boxes"])

box_repository = InMemoryBoxRepository(BoxSettings(exclusive_boxes=settings.EXCLUSIVE_BOXES))


async def get_box_repository() -> BoxRepositoryInterface:
    """Dependency to get box repository instance."""
    return box_repository


async def get_board_service() -> BoardService:
    return BoardService()


BoxRepository = Annotated[BoxRepositoryInterface, Depends(get_box_repository)]


def _box_to_response(box: CustomBox) -> CustomBoxResponse:
    return CustomBoxResponse(
        id=box.id,
        name=box.name,
        color=box.color,
        filter_tags=box.filter_tags,
        filter_statuses=box.filter_statuses,
        order=box.order,
    )


@router.get("/settings", response_model=BoxSettingsModel, summary="Get board settings")
async def get_settings(repository: BoxRepository) -> BoxSettingsModel:
    current = await repository.get_settings()
    return BoxSettingsModel(exclusive_boxes=current.exclusive_boxes)


@router.put("/settings", response_model=BoxSettingsModel, summary="Update board settings")
async def update_settings(request: BoxSettingsModel, repository: BoxRepository) -> BoxSettingsModel:
    updated = await repository.update_settings(BoxSettings(exclusive_boxes=request.exclusive_boxes))
    logger.info(f"Exclusive boxes set to {updated.exclusive_boxes}")
    return BoxSettingsModel(exclusive_boxes=updated.exclusive_boxes)


@router.get("/members/{member}", response_model=List[CustomBoxResponse], summary="List a member's boxes")
async def list_boxes(member: str, repository: BoxRepository) -> List[CustomBoxResponse]:
    return [_box_to_response(box) for box in await repository.list_by_member(member)]


@router.post(
    "/members/{member}",
    response_model=CustomBoxResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a box",
)
async def create_box(member: str, request: CustomBoxCreateRequest, repository: BoxRepository) -> CustomBoxResponse:
    """New boxes are appended after the member's existing ones."""
    existing = await repository.list_by_member(member)
    box = CustomBox.create(
        name=request.name.strip(),
        color=request.color,
        filter_tags=[tag.strip() for tag in request.filter_tags if tag.strip()],
        filter_statuses=[s.strip() for s in request.filter_statuses if s.strip()],
        order=len(existing),
    )
    await repository.create(member, box)
    logger.info(f"Created box '{box.name}' for {member} ({len(box.filter_tags)} tags, {len(box.filter_statuses)} statuses)")
    return _box_to_response(box)


@router.delete("/members/{member}/{box_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete a box")
async def delete_box(member: str, box_id: str, repository: BoxRepository) -> None:
    deleted = await repository.delete(member, box_id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Box not found")
    logger.info(f"Deleted box {box_id} for {member}")


@router.put("/members/{member}/order", response_model=BoardOrderRequest, summary="Save the board order")
async def save_order(member: str, request: BoardOrderRequest, repository: BoxRepository) -> BoardOrderRequest:
    return BoardOrderRequest(order=await repository.set_order(member, request.order))


@router.get("/members/{member}/board", response_model=MemberBoard, summary="Boxes and projects for one member")
async def get_board(
    member: str,
    repository: BoxRepository,
    datasets: Annotated[DatasetRepositoryInterface, Depends(get_dataset_repository)],
    service: Annotated[BoardService, Depends(get_board_service)],
    show_completed: bool = Query(default=True),
    tags: Optional[List[str]] = Query(default=None, description="Local tag filter for project listings"),
    statuses: Optional[List[str]] = Query(default=None, description="Local status filter for project listings"),
) -> MemberBoard:
    snapshot = await datasets.get_snapshot()
    group = snapshot.find_group(member)
    if group is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Member not found")

    board_settings = await repository.get_settings()
    return service.build_board(
        group,
        await repository.list_by_member(member),
        exclusive_boxes=board_settings.exclusive_boxes,
        filters=BoardFilters(
            show_completed=show_completed,
            tags=tuple(tags or ()),
            statuses=tuple(statuses or ()),
        ),
        saved_order=await repository.get_order(member),
    )
