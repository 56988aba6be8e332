from decimal import Decimal

from vehicle_report.aggregation import aggregate_by_year
from vehicle_report.data_models import SENTINEL, VehicleRecord


def _vehicle(id: int, year, make, model: str = "X", msrp: str | None = "1000") -> VehicleRecord:
    return VehicleRecord(
        id=id,
        year=year,
        make=make,
        model=model,
        msrp=None if msrp is None else Decimal(msrp),
    )


def _sample() -> list[VehicleRecord]:
    return [
        _vehicle(0, 2021, "Toyota"),
        _vehicle(1, 2019, "Honda"),
        _vehicle(2, None, "Kia", msrp=None),
        _vehicle(3, 2021, "BMW"),
        _vehicle(4, 2021, "Toyota"),
        _vehicle(5, 2021, "bmw"),
        _vehicle(6, None, "Audi", msrp=None),
    ]


def test_groups_keep_first_seen_year_order():
    groups = aggregate_by_year(_sample())
    assert list(groups) == [2021, 2019, SENTINEL]


def test_ascending_year_order_puts_invalid_first():
    groups = aggregate_by_year(_sample(), year_order="ascending")
    assert list(groups) == [SENTINEL, 2019, 2021]


def test_group_sorted_by_make_then_id():
    groups = aggregate_by_year(_sample())
    assert [(v.make, v.id) for v in groups[2021]] == [("BMW", 3), ("Toyota", 0), ("Toyota", 4), ("bmw", 5)]
    assert [v.make for v in groups[SENTINEL]] == ["Audi", "Kia"]


def test_every_record_lands_in_exactly_one_group():
    vehicles = _sample()
    groups = aggregate_by_year(vehicles)
    seen = [v.id for group in groups.values() for v in group]
    assert sorted(seen) == [v.id for v in vehicles]
    for key, group in groups.items():
        assert all(v.year_key == key for v in group)
        keys = [(v.make, v.id) for v in group]
        assert keys == sorted(keys)


def test_duplicate_rows_are_kept():
    vehicles = [_vehicle(0, 2020, "Ford"), _vehicle(1, 2020, "Ford")]
    assert len(aggregate_by_year(vehicles)[2020]) == 2


def test_absent_make_sorts_first():
    vehicles = [_vehicle(0, 2020, "Ford"), _vehicle(1, 2020, None)]
    assert [v.id for v in aggregate_by_year(vehicles)[2020]] == [1, 0]


def test_empty_input_has_no_groups():
    assert aggregate_by_year([]) == {}
