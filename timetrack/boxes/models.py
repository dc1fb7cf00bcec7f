"""
TIMETRACK - Custom Box Models

User-defined, tag/status-filtered task groupings shown next to projects on
a member's board.
"""

from dataclasses import dataclass, field
from typing import List
import uuid


@dataclass
class CustomBox:
    """A box selects tasks by tags and/or status substrings."""

    id: str
    name: str
    color: str
    filter_tags: List[str] = field(default_factory=list)
    filter_statuses: List[str] = field(default_factory=list)
    order: int = 0

    @classmethod
    def create(
        cls,
        name: str,
        color: str,
        filter_tags: List[str],
        filter_statuses: List[str],
        order: int = 0,
    ) -> "CustomBox":
        """Create a new box with generated ID."""
        return cls(
            id=str(uuid.uuid4()),
            name=name,
            color=color,
            filter_tags=list(filter_tags),
            filter_statuses=list(filter_statuses),
            order=order,
        )

    @property
    def board_id(self) -> str:
        return f"custombox:{self.id}"


@dataclass
class BoxSettings:
    """Board settings shared by every member."""

    # True: a task captured by any box is removed from its project listing
    exclusive_boxes: bool = True


@dataclass(frozen=True)
class BoardFilters:
    """View filters applied to the board listings."""

    show_completed: bool = True
    tags: tuple = ()
    statuses: tuple = ()
