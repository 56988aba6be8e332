import dataclasses
from decimal import Decimal

import pytest

from vehicle_report.data_models import SENTINEL, RecordIdSequence, VehicleRecord


def test_vehicle_record_shape():
    rec = VehicleRecord(id=0, year=2017, make="Honda", model="Accord", msrp=Decimal("23500.00"))
    assert rec.year_key == 2017
    with pytest.raises(dataclasses.FrozenInstanceError):
        rec.year = 2018


def test_missing_year_groups_under_sentinel():
    rec = VehicleRecord(id=1, year=None, make="", model="", msrp=None)
    assert rec.year_key == SENTINEL


def test_record_id_sequence_counts_up():
    ids = RecordIdSequence()
    assert [ids.next_id() for _ in range(3)] == [0, 1, 2]
