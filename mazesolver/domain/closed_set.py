"""Closed set of positions finalized during one search."""

from typing import Dict, FrozenSet, Optional

from .errors import DuplicateEntryError
from .types import CostRecord, Position


class ClosedSet:
    """
    Finalized records keyed by position.

    Positions are only ever added. A position that is already closed is
    never expanded again for the lifetime of the search.
    """

    def __init__(self):
        self._records: Dict[Position, CostRecord] = {}

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, position) -> bool:
        return position in self._records

    def add(self, record: CostRecord):
        """Finalize ``record`` and close its position."""
        if record.position in self._records:
            raise DuplicateEntryError(f"{record.position} is already closed")
        record.finalize()
        self._records[record.position] = record

    def contains(self, position: Position) -> bool:
        return position in self._records

    def get(self, position: Position) -> Optional[CostRecord]:
        return self._records.get(position)

    def positions(self) -> FrozenSet[Position]:
        return frozenset(self._records)
