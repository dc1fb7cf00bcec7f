"""
TIMETRACK - Custom Box Schemas

Pydantic models for box management and the member board.
"""

from datetime import date
from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from timetrack.tasks.enums import PriorityBucket, StatusCategory


class CustomBoxCreateRequest(BaseModel):
    """Request model for creating a box."""

    name: str = Field(min_length=1, max_length=200, description="Box title")
    color: str = Field(default="#64748b", description="Display color")
    filter_tags: List[str] = Field(default_factory=list, description="Any of these tags (case-insensitive)")
    filter_statuses: List[str] = Field(default_factory=list, description="Any of these status substrings")


class CustomBoxResponse(BaseModel):
    id: str
    name: str
    color: str
    filter_tags: List[str]
    filter_statuses: List[str]
    order: int


class BoxSettingsModel(BaseModel):
    exclusive_boxes: bool = Field(description="Remove box-captured tasks from project listings")


class BoardOrderRequest(BaseModel):
    """Saved combined order of board items ('custombox:<id>' / 'project:<name>')."""

    order: List[str]


class BoardTask(BaseModel):
    id: str
    name: str
    status: Optional[str] = None
    category: StatusCategory
    priority: PriorityBucket
    due_date: Optional[date] = None
    tags: List[str] = Field(default_factory=list)
    is_subtask: bool = False


class BoardItem(BaseModel):
    """A box or a project listing on the board."""

    item_id: str
    kind: Literal["custombox", "project"]
    name: str
    color: Optional[str] = None
    tasks: List[BoardTask]
    visible: bool = Field(description="False when no task survives the view filters")


class MemberBoard(BaseModel):
    member: str
    exclusive_boxes: bool
    items: List[BoardItem]
