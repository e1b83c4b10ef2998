"""Scenario models and loaders for forecastify."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from pydantic import BaseModel, Field, model_validator

from forecastify.models import ForecastParameter, HistoricalPoint


class MetaParams(BaseModel):
    name: str = "forecast"
    description: str | None = None


class ValidationRules(BaseModel):
    """Input acceptance rules applied before forecasting."""

    min_historical_years: int = Field(3, ge=1, description="Minimum number of historical rows")
    min_year: int = Field(1900, description="Earliest accepted year (inclusive)")
    max_year: int = Field(2100, description="Latest accepted year (inclusive)")

    @model_validator(mode="after")
    def validate_bounds(self) -> "ValidationRules":
        if self.min_year > self.max_year:
            raise ValueError("min_year must not exceed max_year")
        return self


class ReportParams(BaseModel):
    """Presentation settings for exported tables and reports."""

    currency: str = Field("units", description="Label printed next to sales values")
    title: str = "Forecastify Sales Forecast"


class LoggingParams(BaseModel):
    level: str = "INFO"


class HistoricalRow(BaseModel):
    # Absent values are left for the validator to report.
    year: Optional[int] = None
    sales: Optional[float] = None


class ParameterRow(BaseModel):
    year: Optional[int] = None
    percentage: Optional[float] = None


class Scenario(BaseModel):
    """Top-level scenario: inputs plus rules and report settings."""

    meta: MetaParams = Field(default_factory=MetaParams)
    historical: List[HistoricalRow] = Field(default_factory=list)
    parameters: List[ParameterRow] = Field(default_factory=list)
    rules: ValidationRules = Field(default_factory=ValidationRules)
    report: ReportParams = Field(default_factory=ReportParams)
    logging: LoggingParams = Field(default_factory=LoggingParams)

    def historical_points(self) -> list[HistoricalPoint]:
        return [HistoricalPoint.from_mapping(row.model_dump()) for row in self.historical]

    def forecast_parameters(self) -> list[ForecastParameter]:
        return [ForecastParameter.from_mapping(row.model_dump()) for row in self.parameters]


def _deep_update(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    merged: Dict[str, Any] = dict(base)
    for key, value in overrides.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key] = _deep_update(merged[key], value)
        else:
            merged[key] = value
    return merged


def default_scenario_dict() -> Dict[str, Any]:
    """Return the default scenario as a dictionary."""

    return Scenario().model_dump()


def load_scenario(path: str | Path | None = None, overrides: Optional[Dict[str, Any]] = None) -> Scenario:
    """Load a scenario from YAML and merge with defaults."""

    base_dict = default_scenario_dict()
    if path is not None:
        with Path(path).open("r", encoding="utf-8") as handle:
            user_data = yaml.safe_load(handle) or {}
        if not isinstance(user_data, dict):
            raise ValueError(f"Scenario YAML {path} must map to an object")
        base_dict = _deep_update(base_dict, user_data)
    if overrides:
        base_dict = _deep_update(base_dict, overrides)
    return Scenario.model_validate(base_dict)


__all__ = [
    "Scenario",
    "MetaParams",
    "ValidationRules",
    "ReportParams",
    "LoggingParams",
    "HistoricalRow",
    "ParameterRow",
    "default_scenario_dict",
    "load_scenario",
]
