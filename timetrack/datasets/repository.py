"""
TIMETRACK - Dataset Repository

Holds the current dataset snapshot in memory. Each load replaces the
snapshot and bumps its version, which keys the metrics cache.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Optional

from timetrack.tasks.models import Group

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DatasetSnapshot:
    """An immutable, versioned view of the whole dataset."""

    version: int
    groups: List[Group] = field(default_factory=list)
    loaded_at: Optional[datetime] = None

    def find_group(self, member: str) -> Optional[Group]:
        for group in self.groups:
            if group.assignee == member:
                return group
        return None


class DatasetRepositoryInterface(ABC):
    """Abstract interface for dataset storage."""

    @abstractmethod
    async def get_snapshot(self) -> DatasetSnapshot:
        pass

    @abstractmethod
    async def replace(self, groups: List[Group]) -> DatasetSnapshot:
        pass


class InMemoryDatasetRepository(DatasetRepositoryInterface):
    """In-memory implementation used at runtime and in tests."""

    def __init__(self):
        self._snapshot = DatasetSnapshot(version=0)

    def clear(self) -> None:
        self._snapshot = DatasetSnapshot(version=0)

    async def get_snapshot(self) -> DatasetSnapshot:
        return self._snapshot

    async def replace(self, groups: List[Group]) -> DatasetSnapshot:
        self._snapshot = DatasetSnapshot(
            version=self._snapshot.version + 1,
            groups=list(groups),
            loaded_at=datetime.now(timezone.utc),
        )
        logger.info(f"Loaded dataset version {self._snapshot.version} with {len(groups)} groups")
        return self._snapshot
