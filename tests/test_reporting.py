from datetime import date
from pathlib import Path

import pandas as pd
import pytest

from forecastify.config import load_scenario
from forecastify.engine import run_forecast
from forecastify.models import ForecastParameter, HistoricalPoint
from forecastify.reporting.report import build_markdown_report, save_report
from forecastify.reporting.tables import export_tables, forecast_table, graph_table, historical_table, statistics_table
from forecastify.reporting.workbook import build_workbook_csv, save_workbook_csv

HISTORY = [HistoricalPoint(2020, 1000), HistoricalPoint(2021, 1200), HistoricalPoint(2022, 1400), HistoricalPoint(2023, 1600)]
PARAMS = [ForecastParameter(2024, 10), ForecastParameter(2025, 8)]


@pytest.fixture()
def result():
    return run_forecast(HISTORY, PARAMS)


def test_historical_table_growth_column(result) -> None:
    table = historical_table(result)
    assert table["growth_rate_pct"].tolist() == ["-", "20.00", "16.67", "14.29"]


def test_forecast_and_graph_tables(result) -> None:
    assert forecast_table(result)["sales"].tolist() == [1760, 1901]
    graph = graph_table(result)
    assert graph["year"].tolist() == [2020, 2021, 2022, 2023, 2024, 2025]
    transition = graph[graph["historical"].notna() & graph["forecasted"].notna()]
    assert transition["year"].tolist() == [2023]


def test_statistics_table(result) -> None:
    table = statistics_table(result.statistics).set_index("metric")["value"]
    assert table["total_historical"] == 5200
    assert table["projected_growth"] == pytest.approx(10.0)
    assert list(table.index) == [
        "total_historical",
        "total_forecasted",
        "average_growth_rate",
        "projected_growth",
        "last_historical",
        "first_forecasted",
    ]


def test_export_tables(tmp_path: Path, result) -> None:
    paths = export_tables(result, tmp_path)
    assert [path.name for path in paths] == ["historical.csv", "forecast.csv", "graph.csv", "statistics.csv"]
    assert len(pd.read_csv(tmp_path / "graph.csv")) == 6


def test_workbook_sections(result) -> None:
    text = build_workbook_csv(result, generated_on=date(2024, 1, 31))
    for title in (
        "Historical Sales Data",
        "Forecasted Sales Data",
        "Summary Statistics",
        "Calculation Formulas",
        "Detailed Calculations",
    ):
        assert f"FORECASTIFY EDU - {title}\nGenerated on: 2024-01-31\n" in text
    assert "Year,Sales Units,Growth Rate (%)\n2020,1000,-\n2021,1200,20.00\n" in text
    assert "2025,1901,8\n" in text
    assert 'Total Historical Sales,"5,200"' in text
    assert "Projected Growth,10.00%" in text
    assert "2024,1600 × (1 + 10%) = 1760,1760" in text


def test_workbook_currency_header(tmp_path: Path, result) -> None:
    path = save_workbook_csv(result, tmp_path, currency="MYR", generated_on=date(2024, 1, 31))
    assert path.name == "forecastify-results.csv"
    assert "Year,Sales (MYR),Growth Rate (%)" in path.read_text(encoding="utf-8")


def test_markdown_report(tmp_path: Path, result) -> None:
    scenario = load_scenario(overrides={"meta": {"name": "widgets", "description": "Widget line"}})
    markdown = build_markdown_report(result, scenario)
    assert markdown.startswith("# Forecastify Sales Forecast")
    assert "**Scenario:** widgets" in markdown
    assert "Total historical sales: 5,200 units" in markdown
    assert "Projected growth (last historical to first forecast): 10.00%" in markdown
    assert "## Forecast" in markdown
    target = tmp_path / "reports" / "report.md"
    save_report(markdown, target)
    assert target.read_text(encoding="utf-8") == markdown
