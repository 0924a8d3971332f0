from __future__ import annotations
import heapq
import itertools
from typing import Any, List, Tuple

class PriorityQueue:
    """Min-heap; equal priorities pop in insertion order."""
    def __init__(self) -> None:
        self._h: List[Tuple[float, int, Any]] = []
        self._counter = itertools.count()

    def push(self, priority: float, item: Any) -> None:
        heapq.heappush(self._h, (priority, next(self._counter), item))

    def pop(self) -> Any:
        return heapq.heappop(self._h)[2]

    def pop_with_priority(self) -> Tuple[float, Any]:
        priority, _, item = heapq.heappop(self._h)
        return priority, item

    def __len__(self) -> int:
        return len(self._h)

    def __bool__(self) -> bool:
        return bool(self._h)
