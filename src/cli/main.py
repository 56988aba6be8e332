from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Callable, Optional, Tuple

from cli.logging_config import configure_logging
from cli.settings import ReportSettings
from vehicle_report.aggregation import aggregate_by_year
from vehicle_report.config import ReportConfig
from vehicle_report.formatter import write_report
from vehicle_report.loader import load_vehicles

logger = logging.getLogger(__name__)


def _ask(prompt: str, input_fn: Callable[[str], str]) -> str:
    try:
        return input_fn(prompt)
    except EOFError:
        return ""


def prompt_inputs(settings: ReportSettings, input_fn: Callable[[str], str] = input) -> Tuple[str, Decimal]:
    data_file = _ask("Enter Data File: ", input_fn) or settings.data_file

    tax_rate = settings.tax_rate
    answer = _ask("Enter Tax Rate: ", input_fn)
    if answer:
        try:
            parsed = Decimal(answer)
        except InvalidOperation:
            parsed = None
        if parsed is not None and parsed.is_finite():
            tax_rate = parsed
        else:
            logger.warning("Invalid tax rate %r, using %s", answer, settings.tax_rate)
    return data_file, tax_rate


def run(
    data_file: str,
    tax_rate: Decimal,
    config: ReportConfig,
    today: Optional[date] = None,
) -> Optional[Path]:
    vehicles = load_vehicles(data_file)
    logger.info("Loaded %d vehicles from %s", len(vehicles), data_file, extra={"data_file": data_file})
    groups = aggregate_by_year(vehicles, config.year_order)
    return write_report(groups, tax_rate, config, report_date=today)


def main() -> None:
    settings = ReportSettings()
    configure_logging(level=settings.log_level, fmt=settings.log_format)
    data_file, tax_rate = prompt_inputs(settings)
    run(data_file, tax_rate, settings.report_config())


if __name__ == "__main__":
    main()
