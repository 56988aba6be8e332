from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, List, Optional


SENTINEL = -1


@dataclass(frozen=True)
class VehicleRecord:
    id: int
    year: Optional[int]
    make: Optional[str]
    model: Optional[str]
    msrp: Optional[Decimal]

    @property
    def year_key(self) -> int:
        return SENTINEL if self.year is None else self.year


class RecordIdSequence:
    """Hands out record ids in construction order, starting at ``start``."""

    def __init__(self, start: int = 0) -> None:
        self._next = start

    def next_id(self) -> int:
        value = self._next
        self._next += 1
        return value


YearGroups = Dict[int, List[VehicleRecord]]
