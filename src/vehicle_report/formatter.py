from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
import decimal
from contextlib import contextmanager
from decimal import ROUND_HALF_EVEN, Decimal
from pathlib import Path
from typing import Iterator, List, Optional

from vehicle_report.config import GRAND_TOTAL_TITLE, INVALID_TEXT, REPORT_TITLE, ReportConfig
from vehicle_report.data_models import SENTINEL, VehicleRecord, YearGroups

logger = logging.getLogger(__name__)

_CENTS = Decimal("0.01")


@contextmanager
def exact_arithmetic() -> Iterator[None]:
    """Sums, products and rounding to cents never lose digits, whatever the size of the msrp."""
    with decimal.localcontext() as ctx:
        ctx.prec = decimal.MAX_PREC
        ctx.Emax = decimal.MAX_EMAX
        ctx.Emin = decimal.MIN_EMIN
        yield


@dataclass
class ReportTotals:
    msrp: Decimal = Decimal(0)
    list_price: Decimal = Decimal(0)

    def add(self, msrp: Decimal, tax_rate: Decimal) -> None:
        self.msrp += msrp
        self.list_price += msrp * tax_rate


def format_currency(value: Decimal) -> str:
    with exact_arithmetic():
        return "$" + str(value.quantize(_CENTS, rounding=ROUND_HALF_EVEN))


def report_filename(report_date: date) -> str:
    return f"vehicles{report_date:%m%d%y}.txt"


def _detail_line(vehicle: VehicleRecord, tax_rate: Decimal) -> str:
    make = INVALID_TEXT if vehicle.make is None else vehicle.make
    model = INVALID_TEXT if vehicle.model is None else vehicle.model
    if vehicle.msrp is None:
        msrp_text = f"MSRP: {INVALID_TEXT}"
        list_text = f"List Price: {INVALID_TEXT}"
    else:
        msrp_text = "MSRP: " + format_currency(vehicle.msrp)
        list_text = "List Price: " + format_currency(vehicle.msrp * tax_rate)
    return f"\t{make + ' ' + model:<20} {msrp_text:<15} {list_text:<15}"


def render_report(
    groups: YearGroups,
    tax_rate: Decimal,
    report_date: date,
    legacy_sentinel_totals: bool = True,
) -> tuple[str, ReportTotals]:
    totals = ReportTotals()
    date_text = "  Date: " + report_date.strftime("%m/%d/%Y")
    lines: List[str] = [f"{REPORT_TITLE:<20} {date_text:<15}"]

    with exact_arithmetic():
        for year, vehicles in groups.items():
            lines.append(INVALID_TEXT if year == SENTINEL else str(year))
            for vehicle in vehicles:
                if vehicle.msrp is not None:
                    totals.add(vehicle.msrp, tax_rate)
                elif legacy_sentinel_totals:
                    totals.add(Decimal(SENTINEL), tax_rate)
                lines.append(_detail_line(vehicle, tax_rate))

    lines.append(GRAND_TOTAL_TITLE)
    msrp_total = "\tMSRP: " + format_currency(totals.msrp)
    list_total = "\tList Price: " + format_currency(totals.list_price)
    lines.append(f"{msrp_total:<20}")
    lines.append(f"{list_total:<20}")
    return "\n".join(lines), totals


def write_report(
    groups: YearGroups,
    tax_rate: Decimal,
    config: ReportConfig,
    report_date: Optional[date] = None,
) -> Optional[Path]:
    """Write the report once per day; an existing file is never overwritten."""
    report_date = report_date or date.today()
    path = Path(config.output_dir) / report_filename(report_date)
    context = {"report_path": str(path)}
    try:
        text, totals = render_report(groups, tax_rate, report_date, config.legacy_sentinel_totals)
    except ArithmeticError as exc:
        logger.error("Could not compute report figures: %s", exc, extra=context)
        return None

    try:
        with path.open("x", encoding="utf-8") as fh:
            fh.write(text)
    except FileExistsError:
        print("File already exists.")
        logger.info("Report %s already exists, skipping", path, extra=context)
        return None
    except OSError as exc:
        logger.error("Failed to write report %s: %s", path, exc, extra=context)
        return None

    logger.info("Report written to %s (MSRP total %s)", path, format_currency(totals.msrp), extra=context)
    return path
