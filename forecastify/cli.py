"""Command line interface for forecastify."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from forecastify.config import Scenario, load_scenario
from forecastify.engine.pipeline import ForecastResult, InvalidForecastInput, run_forecast
from forecastify.engine.validation import validate as validate_inputs
from forecastify.models import ForecastParameter, HistoricalPoint
from forecastify.reporting.report import build_markdown_report, save_report
from forecastify.reporting.tables import export_tables
from forecastify.reporting.workbook import save_workbook_csv
from forecastify.utils.io import (
    load_historical_csv,
    load_parameters_csv,
    timestamped_dir,
    write_scenario_snapshot,
)
from forecastify.utils.logging import setup_logging

app = typer.Typer(help="Educational sales forecasting CLI")
console = Console()


def _resolve_inputs(
    scenario: Scenario, historical: Optional[Path], parameters: Optional[Path]
) -> tuple[list[HistoricalPoint], list[ForecastParameter]]:
    points = load_historical_csv(historical) if historical is not None else scenario.historical_points()
    params = load_parameters_csv(parameters) if parameters is not None else scenario.forecast_parameters()
    return points, params


def _report_errors(exc: InvalidForecastInput) -> None:
    console.print("[bold red]Input is invalid[/bold red]")
    for error in exc.errors:
        console.print(f"  - {error}")


def _forecast_table(result: ForecastResult, currency: str) -> Table:
    table = Table(title="Forecast")
    table.add_column("Year", justify="right")
    table.add_column(f"Sales ({currency})", justify="right")
    table.add_column("Growth %", justify="right")
    table.add_column("Calculation")
    for point in result.forecast:
        table.add_row(str(point.year), f"{point.sales:,}", f"{point.percentage:g}", point.calculation)
    return table


def _print_summary(result: ForecastResult, currency: str) -> None:
    stats = result.statistics
    console.print(_forecast_table(result, currency))
    console.print(f"Total historical: [bold]{stats.total_historical:,.0f}[/bold] {currency}")
    console.print(f"Total forecasted: [bold]{stats.total_forecasted:,.0f}[/bold] {currency}")
    console.print(f"Average growth: {stats.average_growth_rate:.2f}%")
    console.print(f"Projected growth: {stats.projected_growth:.2f}%")


def _compute(points, params, scenario: Scenario) -> ForecastResult:
    try:
        return run_forecast(points, params, scenario.rules)
    except InvalidForecastInput as exc:
        _report_errors(exc)
        raise typer.Exit(code=1) from exc


@app.command()
def run(
    config: Path = typer.Option(..., exists=True, dir_okay=False, help="Scenario YAML"),
    historical: Optional[Path] = typer.Option(None, exists=True, dir_okay=False, help="Historical sales CSV (year,sales)"),
    parameters: Optional[Path] = typer.Option(None, exists=True, dir_okay=False, help="Growth parameters CSV (year,percentage)"),
    out: Path = typer.Option(Path("results"), help="Output directory"),
) -> None:
    """Compute a forecast and write tables, workbook CSV and Markdown report."""

    scenario = load_scenario(config)
    setup_logging(scenario.logging, force=True)
    points, params = _resolve_inputs(scenario, historical, parameters)
    result = _compute(points, params, scenario)

    scenario_name = scenario.meta.name or config.stem
    out_dir = timestamped_dir(out, scenario_name)
    console.print(f"[bold green]Forecasting[/bold green] -> {out_dir}")
    currency = scenario.report.currency
    _print_summary(result, currency)

    export_tables(result, out_dir)
    save_workbook_csv(result, out_dir, currency=currency)
    save_report(build_markdown_report(result, scenario), out_dir / "report.md")
    write_scenario_snapshot(scenario, out_dir)
    console.print("Forecast complete")


@app.command()
def forecast(
    historical: Path = typer.Option(..., exists=True, dir_okay=False, help="Historical sales CSV (year,sales)"),
    parameters: Path = typer.Option(..., exists=True, dir_okay=False, help="Growth parameters CSV (year,percentage)"),
    currency: str = typer.Option("units", help="Label for sales values"),
) -> None:
    """Print the forecast for CSV inputs without writing files."""

    scenario = load_scenario(overrides={"report": {"currency": currency}})
    setup_logging(scenario.logging, force=True)
    points, params = _resolve_inputs(scenario, historical, parameters)
    result = _compute(points, params, scenario)
    _print_summary(result, currency)


@app.command()
def validate(
    config: Path = typer.Argument(..., exists=True, dir_okay=False),
    historical: Optional[Path] = typer.Option(None, exists=True, dir_okay=False, help="Historical sales CSV"),
    parameters: Optional[Path] = typer.Option(None, exists=True, dir_okay=False, help="Growth parameters CSV"),
) -> None:
    """Validate scenario inputs without forecasting."""

    scenario = load_scenario(config)
    setup_logging(scenario.logging, force=True)
    points, params = _resolve_inputs(scenario, historical, parameters)
    result = validate_inputs(points, params, scenario.rules)
    if not result.is_valid:
        _report_errors(InvalidForecastInput(result))
        raise typer.Exit(code=1)
    console.print("Inputs validated successfully")


if __name__ == "__main__":
    app()
