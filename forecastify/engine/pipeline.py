"""Validate-then-compute composition used by the CLI and other callers."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional, Sequence

from forecastify.config import ValidationRules
from forecastify.engine.combine import combine
from forecastify.engine.forecast import forecast
from forecastify.engine.stats import aggregate
from forecastify.engine.validation import validate
from forecastify.models import (
    ForecastParameter,
    ForecastPoint,
    GraphPoint,
    HistoricalPoint,
    Statistics,
    ValidationResult,
)

logger = logging.getLogger(__name__)


class InvalidForecastInput(ValueError):
    """Raised when inputs fail validation; carries the full result."""

    def __init__(self, result: ValidationResult) -> None:
        super().__init__(result.message)
        self.result = result

    @property
    def errors(self) -> tuple[str, ...]:
        return self.result.errors


@dataclass(frozen=True)
class ForecastResult:
    historical: tuple[HistoricalPoint, ...]
    parameters: tuple[ForecastParameter, ...]
    forecast: tuple[ForecastPoint, ...]
    graph: tuple[GraphPoint, ...]
    statistics: Statistics


def _non_finite_metrics(statistics: Statistics) -> list[str]:
    names = []
    for name in ("average_growth_rate", "projected_growth"):
        value = getattr(statistics, name)
        if value is not None and not math.isfinite(value):
            names.append(name)
    return names


def run_forecast(
    historical: Sequence[HistoricalPoint],
    parameters: Sequence[ForecastParameter],
    rules: Optional[ValidationRules] = None,
) -> ForecastResult:
    """Validate inputs, then forecast, combine and aggregate them."""

    validation = validate(historical, parameters, rules)
    if not validation.is_valid:
        logger.debug("Rejected forecast input: %s", validation.message)
        raise InvalidForecastInput(validation)

    points = forecast(historical, parameters)
    graph = combine(historical, points)
    statistics = aggregate(historical, points)
    logger.debug(
        "Forecast %d historical year(s) into %d projected year(s)", len(historical), len(points)
    )
    degenerate = _non_finite_metrics(statistics)
    if degenerate:
        logger.warning("Non-finite statistics: %s", ", ".join(degenerate))
    return ForecastResult(
        historical=tuple(historical),
        parameters=tuple(parameters),
        forecast=tuple(points),
        graph=tuple(graph),
        statistics=statistics,
    )


__all__ = ["ForecastResult", "InvalidForecastInput", "run_forecast"]
