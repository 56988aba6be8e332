from __future__ import annotations

from decimal import Decimal
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from vehicle_report.config import DEFAULT_DATA_FILE, DEFAULT_TAX_RATE, ReportConfig, YearOrder


class ReportSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Prompt defaults
    data_file: str = Field(default=DEFAULT_DATA_FILE, alias="VEHICLE_DATA_FILE")
    tax_rate: Decimal = Field(default=DEFAULT_TAX_RATE, alias="VEHICLE_TAX_RATE")

    # Report output
    output_dir: Path = Field(default=Path("."), alias="REPORT_OUTPUT_DIR")
    year_order: YearOrder = Field(default="first_seen", alias="REPORT_YEAR_ORDER")
    legacy_sentinel_totals: bool = Field(default=True, alias="REPORT_LEGACY_SENTINEL_TOTALS")

    # Logging
    log_level: str = Field(default="WARNING", alias="LOG_LEVEL")
    log_format: str = Field(default="text", alias="LOG_FORMAT")

    def report_config(self) -> ReportConfig:
        return ReportConfig(
            output_dir=self.output_dir,
            year_order=self.year_order,
            legacy_sentinel_totals=self.legacy_sentinel_totals,
        )
