"""Input validation run before any forecast is computed."""

from __future__ import annotations

import math
from typing import Optional, Sequence

from forecastify.config import ValidationRules
from forecastify.models import ForecastParameter, HistoricalPoint, ValidationResult


def _is_absent(value: object) -> bool:
    return value is None or (isinstance(value, float) and math.isnan(value))


def _year_ok(year: object, rules: ValidationRules) -> bool:
    # Year 0 is falsy and already outside any sensible range.
    if _is_absent(year) or not year:
        return False
    return rules.min_year <= year <= rules.max_year  # type: ignore[operator]


def _historical_errors(historical: Optional[Sequence[HistoricalPoint]], rules: ValidationRules) -> list[str]:
    errors: list[str] = []
    if not historical or len(historical) < rules.min_historical_years:
        errors.append(f"Historical data must have at least {rules.min_historical_years} years")
    for row, point in enumerate(historical or [], start=1):
        if not _year_ok(point.year, rules):
            errors.append(f"Invalid year at row {row}")
        # Zero sales are rejected along with absent and negative values.
        if _is_absent(point.sales) or not point.sales or point.sales < 0:
            errors.append(f"Invalid sales value at row {row}")
    return errors


def _parameter_errors(parameters: Optional[Sequence[ForecastParameter]], rules: ValidationRules) -> list[str]:
    errors: list[str] = []
    if not parameters:
        errors.append("At least one forecasting parameter is required")
    for row, param in enumerate(parameters or [], start=1):
        if not _year_ok(param.year, rules):
            errors.append(f"Invalid forecast year at row {row}")
        if _is_absent(param.percentage):
            errors.append(f"Invalid percentage at row {row}")
    return errors


def validate(
    historical: Optional[Sequence[HistoricalPoint]],
    parameters: Optional[Sequence[ForecastParameter]],
    rules: Optional[ValidationRules] = None,
) -> ValidationResult:
    """Collect every structural and per-row problem in the inputs.

    Errors are accumulated rather than short-circuited so a caller can show
    all of them at once. Historical errors come first, then parameter errors,
    each in row order.
    """

    rules = rules or ValidationRules()
    errors = _historical_errors(historical, rules) + _parameter_errors(parameters, rules)
    return ValidationResult.from_errors(errors)


__all__ = ["validate"]
