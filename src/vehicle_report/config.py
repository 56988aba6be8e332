from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from pathlib import Path
from typing import Literal


YearOrder = Literal["first_seen", "ascending"]

DEFAULT_DATA_FILE = "vehicles.csv"
DEFAULT_TAX_RATE = Decimal("1.07")
FIELD_SEPARATOR = ","
REPORT_TITLE = "--- Vehicle Report ---"
GRAND_TOTAL_TITLE = "--- Grand Total ---"
INVALID_TEXT = "invalid"


@dataclass(frozen=True)
class ReportConfig:
    output_dir: Path = Path(".")
    year_order: YearOrder = "first_seen"
    # Missing MSRPs add -1 (and -1 * tax rate) to the grand totals.
    legacy_sentinel_totals: bool = True
