from __future__ import annotations

from typing import Sequence

import pandas as pd

from vehicle_report.config import YearOrder
from vehicle_report.data_models import VehicleRecord, YearGroups


def build_frame(vehicles: Sequence[VehicleRecord]) -> pd.DataFrame:
    return pd.DataFrame(
        {
            "position": range(len(vehicles)),
            "id": [v.id for v in vehicles],
            "year": [v.year_key for v in vehicles],
            "make": [v.make or "" for v in vehicles],
        }
    )


def aggregate_by_year(vehicles: Sequence[VehicleRecord], year_order: YearOrder = "first_seen") -> YearGroups:
    """
    Groups vehicles by model year (missing years share the -1 key) and orders
    each group by make, then id. Groups come back in first-seen order unless
    ``year_order`` is "ascending".
    """
    if not vehicles:
        return {}
    frame = build_frame(vehicles)
    groups: YearGroups = {}
    for year, group in frame.groupby("year", sort=year_order == "ascending"):
        ordered = group.sort_values(["make", "id"])
        groups[int(year)] = [vehicles[pos] for pos in ordered["position"]]
    return groups
