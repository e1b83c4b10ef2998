"""Markdown reporting for a single forecast scenario."""

from __future__ import annotations

import math
from pathlib import Path
from typing import Optional

from forecastify.config import Scenario
from forecastify.engine.pipeline import ForecastResult
from forecastify.reporting.tables import forecast_table, historical_table
from forecastify.reporting.workbook import FORMULAS


def _fmt_sales(value: Optional[float], currency: str) -> str:
    if value is None:
        return "n/a"
    if not math.isfinite(value):
        return str(value)
    return f"{value:,.0f} {currency}"


def _fmt_pct(value: Optional[float]) -> str:
    if value is None:
        return "n/a"
    return f"{value:.2f}%"


def _statistics_section(result: ForecastResult, currency: str) -> list[str]:
    stats = result.statistics
    return [
        "## Summary",
        f"- Total historical sales: {_fmt_sales(stats.total_historical, currency)}",
        f"- Total forecasted sales: {_fmt_sales(stats.total_forecasted, currency)}",
        f"- Average historical growth: {_fmt_pct(stats.average_growth_rate)}",
        f"- Projected growth (last historical to first forecast): {_fmt_pct(stats.projected_growth)}",
        "",
    ]


def build_markdown_report(result: ForecastResult, scenario: Optional[Scenario] = None) -> str:
    scenario = scenario or Scenario()
    currency = scenario.report.currency
    md = [f"# {scenario.report.title}", ""]
    md.append(f"**Scenario:** {scenario.meta.name}")
    if scenario.meta.description:
        md.append("")
        md.append(scenario.meta.description)
    md.append("")
    md.extend(_statistics_section(result, currency))

    historical = historical_table(result).rename(
        columns={"year": "Year", "sales": f"Sales ({currency})", "growth_rate_pct": "Growth Rate (%)"}
    )
    md.extend(["## Historical Sales", historical.to_markdown(index=False), ""])

    forecast = forecast_table(result).rename(
        columns={
            "year": "Year",
            "sales": f"Sales ({currency})",
            "percentage": "Growth (%)",
            "calculation": "Calculation",
        }
    )
    md.extend(["## Forecast", forecast.to_markdown(index=False), ""])

    md.append("## Formulas")
    for formula in FORMULAS:
        md.append(f"- **{formula['Formula']}**: {formula['Description']}")
    md.append("")
    return "\n".join(md)


def save_report(markdown: str, out_path: Path) -> None:
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(markdown, encoding="utf-8")


__all__ = ["build_markdown_report", "save_report"]
