from __future__ import annotations

import logging
import re
from decimal import Decimal
from typing import List, Optional

from vehicle_report.config import FIELD_SEPARATOR
from vehicle_report.data_models import RecordIdSequence, VehicleRecord

logger = logging.getLogger(__name__)

_YEAR_PATTERN = re.compile(r"[+-]?[0-9]+")
_MSRP_PATTERN = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_INT32_MIN, _INT32_MAX = -(2**31), 2**31 - 1


def _field(attrs: List[str], index: int) -> Optional[str]:
    return attrs[index] if index < len(attrs) else None


def _parse_year(raw: str) -> int:
    if not _YEAR_PATTERN.fullmatch(raw):
        raise ValueError(f"malformed year {raw!r}")
    value = int(raw)
    if not _INT32_MIN <= value <= _INT32_MAX:
        raise ValueError(f"year out of range {raw!r}")
    return value


def _parse_msrp(raw: str) -> Decimal:
    # ASCII digits only, optional fraction and exponent; no whitespace, underscores or NaN
    if not _MSRP_PATTERN.fullmatch(raw):
        raise ValueError(f"malformed msrp {raw!r}")
    return Decimal(raw)


class RecordParser:
    """Turns ``year,make,model,msrp`` rows into ``VehicleRecord`` objects.

    Rows never fail: a bad year or msrp leaves *both* numeric fields unset,
    which mirrors how the legacy report treated them as a single unit.
    """

    def __init__(self, ids: RecordIdSequence | None = None) -> None:
        self.ids = ids or RecordIdSequence()

    def parse_line(self, line: str) -> VehicleRecord:
        attrs = line.split(FIELD_SEPARATOR)
        make = _field(attrs, 1)
        model = _field(attrs, 2)
        raw_year = _field(attrs, 0)
        raw_msrp = _field(attrs, 3)

        year: Optional[int] = None
        msrp: Optional[Decimal] = None
        if raw_year and raw_msrp:
            try:
                year, msrp = _parse_year(raw_year), _parse_msrp(raw_msrp)
            except ValueError as exc:
                logger.warning("Unparseable numeric field in row %r: %s", line, exc, extra={"row": line})
                year, msrp = None, None

        return VehicleRecord(id=self.ids.next_id(), year=year, make=make, model=model, msrp=msrp)
