"""Tabular views of a forecast result."""

from __future__ import annotations

from pathlib import Path

import pandas as pd

from forecastify.engine.pipeline import ForecastResult
from forecastify.models import Statistics
from forecastify.utils.io import save_table


def historical_table(result: ForecastResult) -> pd.DataFrame:
    """Historical sales with the growth rate into each year ("-" for the first)."""

    rates = list(result.statistics.growth_rates)
    rows = []
    for idx, point in enumerate(result.historical):
        rows.append(
            {
                "year": point.year,
                "sales": point.sales,
                "growth_rate_pct": f"{rates[idx - 1]:.2f}" if idx > 0 else "-",
            }
        )
    return pd.DataFrame(rows, columns=["year", "sales", "growth_rate_pct"])


def forecast_table(result: ForecastResult) -> pd.DataFrame:
    return pd.DataFrame(
        [point.to_dict() for point in result.forecast],
        columns=["year", "sales", "percentage", "calculation"],
    )


def graph_table(result: ForecastResult) -> pd.DataFrame:
    """Chart series; ``NaN`` marks the series a year does not belong to."""

    return pd.DataFrame(
        [point.to_dict() for point in result.graph],
        columns=["year", "historical", "forecasted"],
    )


def statistics_table(statistics: Statistics) -> pd.DataFrame:
    """One metric/value row per scalar statistic."""

    data = statistics.to_dict()
    data.pop("growth_rates")
    return pd.DataFrame({"metric": list(data), "value": list(data.values())})


def export_tables(result: ForecastResult, out_dir: Path) -> list[Path]:
    """Write the historical, forecast, graph and statistics tables as CSV."""

    return [
        save_table(historical_table(result), out_dir, "historical"),
        save_table(forecast_table(result), out_dir, "forecast"),
        save_table(graph_table(result), out_dir, "graph"),
        save_table(statistics_table(result.statistics), out_dir, "statistics"),
    ]


__all__ = ["historical_table", "forecast_table", "graph_table", "statistics_table", "export_tables"]
