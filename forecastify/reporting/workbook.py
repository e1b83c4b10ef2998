"""Multi-section CSV export laid out like a spreadsheet workbook."""

from __future__ import annotations

import math
from datetime import date
from pathlib import Path
from typing import Optional

import pandas as pd

from forecastify.engine.forecast import format_number
from forecastify.engine.pipeline import ForecastResult
from forecastify.utils.io import ensure_directory

SECTION_PREFIX = "FORECASTIFY EDU"

FORMULAS = [
    {
        "Formula": "Growth Rate",
        "Description": "((Current Year - Previous Year) / Previous Year) × 100",
        "Example": "((2023 - 2022) / 2022) × 100",
    },
    {
        "Formula": "Average Growth",
        "Description": "Sum of all growth rates / Number of periods",
        "Example": "Sum of rates / Number of years",
    },
    {
        "Formula": "Forecasted Sales",
        "Description": "Previous Year Sales × (1 + Percentage Change)",
        "Example": "2023 Sales × (1 + 0.10)",
    },
    {
        "Formula": "Projected Growth",
        "Description": "((First Forecasted - Last Historical) / Last Historical) × 100",
        "Example": "((2024 - 2023) / 2023) × 100",
    },
]


def _grouped(value: Optional[float]) -> str:
    if value is None:
        return "N/A"
    if isinstance(value, float) and not math.isfinite(value):
        return format_number(value)
    if float(value).is_integer():
        return f"{int(value):,}"
    return f"{value:,.3f}".rstrip("0").rstrip(".")


def _percent(value: Optional[float]) -> str:
    if value is None:
        return "N/A"
    if not math.isfinite(value):
        return format_number(value)
    return f"{value:.2f}%"


def _section(title: str, generated_on: str, table: pd.DataFrame) -> str:
    header = f"{SECTION_PREFIX} - {title}\nGenerated on: {generated_on}\n\n"
    return header + table.to_csv(index=False, lineterminator="\n")


def _historical_section(result: ForecastResult, unit: str) -> pd.DataFrame:
    rates = result.statistics.growth_rates
    rows = []
    for idx, point in enumerate(result.historical):
        rows.append(
            {
                "Year": point.year,
                f"Sales {unit}": format_number(point.sales),
                "Growth Rate (%)": f"{rates[idx - 1]:.2f}" if idx > 0 else "-",
            }
        )
    return pd.DataFrame(rows, columns=["Year", f"Sales {unit}", "Growth Rate (%)"])


def _forecast_section(result: ForecastResult, unit: str) -> pd.DataFrame:
    rows = [
        {"Year": point.year, f"Sales {unit}": format_number(point.sales), "Growth Rate (%)": format_number(point.percentage)}
        for point in result.forecast
    ]
    return pd.DataFrame(rows, columns=["Year", f"Sales {unit}", "Growth Rate (%)"])


def _summary_section(result: ForecastResult) -> pd.DataFrame:
    stats = result.statistics
    rows = [
        ("Total Historical Years", str(len(result.historical))),
        ("Total Forecast Years", str(len(result.forecast))),
        ("Average Historical Growth", _percent(stats.average_growth_rate)),
        ("Total Historical Sales", _grouped(stats.total_historical)),
        ("Total Forecasted Sales", _grouped(stats.total_forecasted)),
        ("Projected Growth", _percent(stats.projected_growth)),
    ]
    return pd.DataFrame(rows, columns=["Metric", "Value"])


def _detail_section(result: ForecastResult) -> pd.DataFrame:
    rows = []
    history = result.historical
    for previous, current, rate in zip(history, history[1:], result.statistics.growth_rates):
        prev_sales = format_number(previous.sales)
        rows.append(
            {
                "Year": current.year,
                "Calculation": f"({format_number(current.sales)} - {prev_sales}) / {prev_sales} × 100",
                "Result": f"{rate:.2f}%",
            }
        )
    for point in result.forecast:
        rows.append({"Year": point.year, "Calculation": point.calculation, "Result": format_number(point.sales)})
    return pd.DataFrame(rows, columns=["Year", "Calculation", "Result"])


def build_workbook_csv(result: ForecastResult, currency: str = "units", generated_on: Optional[date] = None) -> str:
    """Render the result as five titled CSV sections separated by blank lines."""

    stamp = (generated_on or date.today()).isoformat()
    unit = "Units" if currency.lower() == "units" else f"({currency})"
    sections = [
        _section("Historical Sales Data", stamp, _historical_section(result, unit)),
        _section("Forecasted Sales Data", stamp, _forecast_section(result, unit)),
        _section("Summary Statistics", stamp, _summary_section(result)),
        _section("Calculation Formulas", stamp, pd.DataFrame(FORMULAS)),
        _section("Detailed Calculations", stamp, _detail_section(result)),
    ]
    return "\n\n".join(sections)


def save_workbook_csv(
    result: ForecastResult,
    out_dir: Path,
    name: str = "forecastify-results",
    currency: str = "units",
    generated_on: Optional[date] = None,
) -> Path:
    ensure_directory(out_dir)
    path = out_dir / f"{name}.csv"
    path.write_text(build_workbook_csv(result, currency, generated_on), encoding="utf-8")
    return path


__all__ = ["build_workbook_csv", "save_workbook_csv", "FORMULAS"]
