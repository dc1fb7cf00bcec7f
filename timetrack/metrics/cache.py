"""
TIMETRACK - Metrics Cache

Caller-side memoization of metrics results. Keys embed the dataset version,
so loading a new snapshot makes older entries unreachable; they age out as
new entries are stored.
"""

import logging
from collections import OrderedDict
from typing import Any, Callable, Hashable, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class MetricsCache:
    """Bounded least-recently-used cache."""

    def __init__(self, max_entries: int = 32):
        self.max_entries = max_entries
        self._entries: "OrderedDict[Hashable, Any]" = OrderedDict()

    def __len__(self) -> int:
        return len(self._entries)

    def clear(self) -> None:
        self._entries.clear()

    def get_or_compute(self, key: Hashable, compute: Callable[[], T]) -> T:
        if key in self._entries:
            self._entries.move_to_end(key)
            logger.debug(f"Metrics cache hit for {key}")
            return self._entries[key]

        value = compute()
        if self.max_entries <= 0:
            return value
        self._entries[key] = value
        while len(self._entries) > self.max_entries:
            self._entries.popitem(last=False)
        return value
