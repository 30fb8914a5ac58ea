"""Keyed min-priority queues for best-first search.

Both queues keep at most one live entry per key. Inserting a key that is
already queued only replaces the stored entry when the new priority is
strictly better, so the stored priority is always the minimum seen.
Ties are broken by insertion sequence, which keeps runs deterministic.
"""

import bisect
import heapq
import itertools
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, List, NamedTuple, Optional

logger = logging.getLogger(__name__)


class QueueEntry(NamedTuple):
    """Entry returned by pop_minimum."""
    key: Hashable
    item: Any
    priority: float


@dataclass(order=True)
class _HeapEntry:
    priority: float
    sequence: int
    key: Hashable = field(compare=False)
    item: Any = field(compare=False)
    removed: bool = field(default=False, compare=False)


class BasePriorityQueue:
    """Shared bookkeeping for keyed priority queues."""

    def __init__(self):
        self._counter = itertools.count()
        self._pops = 0

    def insert_or_update(self, key: Hashable, item: Any, priority: float) -> bool:
        """Insert ``item`` under ``key`` or improve its priority.

        Returns True when the queue changed. Equal-or-worse priorities for a
        queued key are ignored.
        """
        raise NotImplementedError

    def pop_minimum(self) -> Optional[QueueEntry]:
        """Remove and return the lowest-priority entry, or None when empty."""
        raise NotImplementedError

    def priority_of(self, key: Hashable) -> Optional[float]:
        raise NotImplementedError

    def __len__(self) -> int:
        raise NotImplementedError

    def __contains__(self, key: Hashable) -> bool:
        return self.priority_of(key) is not None

    def is_empty(self) -> bool:
        return len(self) == 0

    def explored_count(self) -> int:
        """Number of pop_minimum calls made so far."""
        return self._pops


class HeapPriorityQueue(BasePriorityQueue):
    """Binary heap with lazy invalidation of replaced entries.

    Replacing a key marks the old heap entry as removed and pushes a new one,
    so both operations stay O(log n).
    """

    def __init__(self):
        super().__init__()
        self._heap: List[_HeapEntry] = []
        self._entry_finder: Dict[Hashable, _HeapEntry] = {}

    def insert_or_update(self, key: Hashable, item: Any, priority: float) -> bool:
        existing = self._entry_finder.get(key)
        if existing is not None:
            if existing.priority <= priority:
                return False
            existing.removed = True

        entry = _HeapEntry(priority, next(self._counter), key, item)
        self._entry_finder[key] = entry
        heapq.heappush(self._heap, entry)
        return True

    def pop_minimum(self) -> Optional[QueueEntry]:
        self._pops += 1
        while self._heap:
            entry = heapq.heappop(self._heap)
            if not entry.removed:
                del self._entry_finder[entry.key]
                return QueueEntry(entry.key, entry.item, entry.priority)
        return None

    def priority_of(self, key: Hashable) -> Optional[float]:
        entry = self._entry_finder.get(key)
        return entry.priority if entry is not None else None

    def __len__(self) -> int:
        return len(self._entry_finder)


class SortedListPriorityQueue(BasePriorityQueue):
    """Sorted-list queue kept in descending order so the minimum pops from the end.

    Insertion is a bisect plus a list insert, replacement is a linear
    removal. Fine for small grids, too slow for tiled ones.
    """

    def __init__(self):
        super().__init__()
        # (-priority, -sequence) ascending == (priority, sequence) descending
        self._entries: List[tuple] = []
        self._sort_keys: Dict[Hashable, tuple] = {}

    def insert_or_update(self, key: Hashable, item: Any, priority: float) -> bool:
        old_sort_key = self._sort_keys.get(key)
        if old_sort_key is not None:
            if -old_sort_key[0] <= priority:
                return False
            index = bisect.bisect_left(self._entries, old_sort_key, key=lambda e: e[:2])
            del self._entries[index]

        sort_key = (-priority, -next(self._counter))
        bisect.insort(self._entries, (*sort_key, key, item), key=lambda e: e[:2])
        self._sort_keys[key] = sort_key
        return True

    def pop_minimum(self) -> Optional[QueueEntry]:
        self._pops += 1
        if not self._entries:
            return None
        neg_priority, _, key, item = self._entries.pop()
        del self._sort_keys[key]
        return QueueEntry(key, item, -neg_priority)

    def priority_of(self, key: Hashable) -> Optional[float]:
        sort_key = self._sort_keys.get(key)
        return -sort_key[0] if sort_key is not None else None

    def __len__(self) -> int:
        return len(self._entries)


QUEUE_TYPES = {
    'heap': HeapPriorityQueue,
    'sorted': SortedListPriorityQueue,
}


def create_priority_queue(kind: str = 'heap') -> BasePriorityQueue:
    """Factory function to create a priority queue by name.

    Args:
        kind: 'heap' (default) or 'sorted'

    Returns:
        Empty priority queue
    """
    try:
        return QUEUE_TYPES[kind]()
    except KeyError:
        raise ValueError(f"Unknown priority queue kind: {kind!r} "
                         f"(expected one of {sorted(QUEUE_TYPES)})") from None
