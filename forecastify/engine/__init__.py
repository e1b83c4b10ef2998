"""Forecast calculation engine."""

from .combine import combine
from .forecast import forecast
from .pipeline import ForecastResult, InvalidForecastInput, run_forecast
from .stats import aggregate
from .validation import validate

__all__ = [
    "validate",
    "forecast",
    "combine",
    "aggregate",
    "run_forecast",
    "ForecastResult",
    "InvalidForecastInput",
]
