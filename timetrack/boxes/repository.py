"""
TIMETRACK - Custom Box Repository

Stores box definitions per member, the saved board order and the shared
board settings. The dashboard's key-value persistence lives outside this
service; the in-memory implementation is what runs here and in tests.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from timetrack.boxes.models import BoxSettings, CustomBox


class BoxRepositoryInterface(ABC):
    """Abstract interface for box configuration storage."""

    @abstractmethod
    async def list_by_member(self, member: str) -> List[CustomBox]:
        pass

    @abstractmethod
    async def create(self, member: str, box: CustomBox) -> CustomBox:
        pass

    @abstractmethod
    async def delete(self, member: str, box_id: str) -> bool:
        pass

    @abstractmethod
    async def get_settings(self) -> BoxSettings:
        pass

    @abstractmethod
    async def update_settings(self, settings: BoxSettings) -> BoxSettings:
        pass

    @abstractmethod
    async def get_order(self, member: str) -> List[str]:
        pass

    @abstractmethod
    async def set_order(self, member: str, order: List[str]) -> List[str]:
        pass


class InMemoryBoxRepository(BoxRepositoryInterface):
    def __init__(self, settings: Optional[BoxSettings] = None):
        self._default_settings = settings or BoxSettings()
        self._boxes: Dict[str, List[CustomBox]] = {}
        self._orders: Dict[str, List[str]] = {}
        self._settings = BoxSettings(exclusive_boxes=self._default_settings.exclusive_boxes)

    def clear(self) -> None:
        self._boxes.clear()
        self._orders.clear()
        self._settings = BoxSettings(exclusive_boxes=self._default_settings.exclusive_boxes)

    async def list_by_member(self, member: str) -> List[CustomBox]:
        return sorted(self._boxes.get(member, []), key=lambda box: box.order)

    async def create(self, member: str, box: CustomBox) -> CustomBox:
        self._boxes.setdefault(member, []).append(box)
        return box

    async def delete(self, member: str, box_id: str) -> bool:
        boxes = self._boxes.get(member, [])
        remaining = [box for box in boxes if box.id != box_id]
        if len(remaining) == len(boxes):
            return False
        self._boxes[member] = remaining
        return True

    async def get_settings(self) -> BoxSettings:
        return self._settings

    async def update_settings(self, settings: BoxSettings) -> BoxSettings:
        self._settings = settings
        return settings

    async def get_order(self, member: str) -> List[str]:
        return list(self._orders.get(member, []))

    async def set_order(self, member: str, order: List[str]) -> List[str]:
        self._orders[member] = list(order)
        return list(order)
