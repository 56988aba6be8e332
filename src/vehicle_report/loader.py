from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from vehicle_report.data_models import SENTINEL, VehicleRecord
from vehicle_report.parser import RecordParser

logger = logging.getLogger(__name__)


def load_vehicles(data_file: str | Path, parser: RecordParser | None = None) -> List[VehicleRecord]:
    """Read every row after the header; an unreadable file yields no vehicles."""
    parser = parser or RecordParser()
    vehicles: List[VehicleRecord] = []
    try:
        with Path(data_file).open(encoding="utf-8") as fh:
            next(fh, None)  # header
            for line in fh:
                vehicles.append(parser.parse_line(line.rstrip("\n")))
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("Could not read vehicle data from %s: %s", data_file, exc, extra={"data_file": str(data_file)})
        return []

    for v in vehicles:
        logger.debug("%s | %s | %s | %s", v.year_key, v.make, v.model, SENTINEL if v.msrp is None else v.msrp)
    return vehicles
