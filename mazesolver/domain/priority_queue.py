"""Indexed priority queue (frontier) for A* with decrease-key support."""

from typing import Dict, List, Optional, Tuple

from .errors import (
    DuplicateEntryError, EmptyFrontierError, NotFoundError, RecordMismatchError,
)
from .types import CostRecord, Position


def _priority(record: CostRecord) -> Tuple[int, int, Position]:
    """
    Sort key for frontier entries.

    Comparison order:
    1. f cost (lower is better)
    2. h cost (lower is better - favor positions closer to the goal)
    3. position, lexicographic (row, col) for determinism

    Positions are unique in the queue, so this is a total order.
    """
    return (record.f, record.h, record.position)


class PriorityQueue:
    """
    Binary min-heap of cost records paired with a position -> index map.

    The map gives O(1) lookup by position and lets update_priority() restore
    heap order in O(log n) instead of scanning for the entry.
    """

    def __init__(self):
        self._heap: List[CostRecord] = []
        self._index: Dict[Position, int] = {}

    def __len__(self) -> int:
        return len(self._heap)

    def __contains__(self, position) -> bool:
        return position in self._index

    def is_empty(self) -> bool:
        """Check if the queue is empty."""
        return not self._heap

    def size(self) -> int:
        """Get the number of items in the queue."""
        return len(self._heap)

    def contains(self, position: Position) -> bool:
        """Check if a position has an entry in the queue."""
        return position in self._index

    def get(self, position: Position) -> Optional[CostRecord]:
        """Return the record for ``position`` or None if absent."""
        index = self._index.get(position)
        if index is None:
            return None
        return self._heap[index]

    def insert(self, position: Position, record: CostRecord):
        """Add a new entry. Existing entries must go through update_priority()."""
        if position in self._index:
            raise DuplicateEntryError(f"{position} is already in the frontier")
        if record.position != position:
            raise RecordMismatchError(
                f"Record for {record.position} cannot be inserted under {position}"
            )
        self._heap.append(record)
        self._index[position] = len(self._heap) - 1
        self._sift_up(len(self._heap) - 1)

    def extract_min(self) -> CostRecord:
        """Remove and return the entry with the lowest priority."""
        if not self._heap:
            raise EmptyFrontierError("Cannot extract from an empty frontier")

        top = self._heap[0]
        last = self._heap.pop()
        del self._index[top.position]

        if self._heap:
            self._heap[0] = last
            self._index[last.position] = 0
            self._sift_down(0)
        return top

    def update_priority(self, position: Position, record: CostRecord):
        """
        Copy the cost fields of ``record`` onto the existing entry for
        ``position`` and restore heap order. The stored record object is
        kept, so references handed out by get() stay valid.
        """
        index = self._index.get(position)
        if index is None:
            raise NotFoundError(f"{position} is not in the frontier")

        entry = self._heap[index]
        if entry is not record:
            entry.g = record.g
            entry.h = record.h
            entry.parent = record.parent

        index = self._sift_up(index)
        self._sift_down(index)

    def positions(self) -> List[Position]:
        """All positions currently queued, in heap order. Useful for visualization."""
        return [record.position for record in self._heap]

    def _swap(self, i: int, j: int):
        heap = self._heap
        heap[i], heap[j] = heap[j], heap[i]
        self._index[heap[i].position] = i
        self._index[heap[j].position] = j

    def _sift_up(self, index: int) -> int:
        """Move the entry at ``index`` toward the root; return its final index."""
        while index > 0:
            parent = (index - 1) // 2
            if _priority(self._heap[index]) < _priority(self._heap[parent]):
                self._swap(index, parent)
                index = parent
            else:
                break
        return index

    def _sift_down(self, index: int) -> int:
        """Move the entry at ``index`` toward the leaves; return its final index."""
        size = len(self._heap)
        while True:
            smallest = index
            for child in (2 * index + 1, 2 * index + 2):
                if child < size and _priority(self._heap[child]) < _priority(self._heap[smallest]):
                    smallest = child
            if smallest == index:
                return index
            self._swap(index, smallest)
            index = smallest
