"""Forecastify: compounding sales forecasts for supply-chain teaching.

The engine lives in :mod:`forecastify.engine`; the most common entry point is
re-exported here::

    from forecastify import HistoricalPoint, ForecastParameter, run_forecast
"""

from importlib import metadata

from forecastify.engine import InvalidForecastInput, run_forecast
from forecastify.models import ForecastParameter, HistoricalPoint

DISTRIBUTION = "forecastify"


def get_version() -> str:
    """Version of the installed distribution, or the source tree's when not installed."""
    try:
        return metadata.version(DISTRIBUTION)
    except metadata.PackageNotFoundError:  # pragma: no cover - running from a checkout
        return "0.1.0"


__all__ = [
    "get_version",
    "run_forecast",
    "InvalidForecastInput",
    "HistoricalPoint",
    "ForecastParameter",
]
