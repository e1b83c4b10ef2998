import logging

import pytest

from forecastify.engine import InvalidForecastInput, run_forecast
from forecastify.models import ForecastParameter, HistoricalPoint

HISTORY = [HistoricalPoint(2020, 1000), HistoricalPoint(2021, 1200), HistoricalPoint(2022, 1400), HistoricalPoint(2023, 1600)]
PARAMS = [ForecastParameter(2024, 10), ForecastParameter(2025, 8)]


def test_end_to_end_scenario() -> None:
    result = run_forecast(HISTORY, PARAMS)
    assert [(p.year, p.sales) for p in result.forecast] == [(2024, 1760), (2025, 1901)]
    assert result.statistics.total_historical == 5200
    assert result.statistics.total_forecasted == 3661
    assert result.statistics.projected_growth == pytest.approx(10.0)
    assert len(result.graph) == 6
    assert sum(1 for point in result.graph if point.is_transition) == 1


def test_invalid_input_raises_with_all_errors() -> None:
    with pytest.raises(InvalidForecastInput) as excinfo:
        run_forecast(HISTORY[:2], [ForecastParameter(2024, None)])
    assert excinfo.value.errors == (
        "Historical data must have at least 3 years",
        "Invalid percentage at row 1",
    )
    assert str(excinfo.value) == excinfo.value.result.message
    assert isinstance(excinfo.value, ValueError)


def test_run_forecast_is_repeatable() -> None:
    assert run_forecast(HISTORY, PARAMS) == run_forecast(HISTORY, PARAMS)


def test_inputs_are_not_mutated() -> None:
    history = list(HISTORY)
    params = list(PARAMS)
    run_forecast(history, params)
    assert history == HISTORY
    assert params == PARAMS


def test_warns_on_non_finite_statistics(caplog) -> None:
    history = [HistoricalPoint(2021, 1e308), HistoricalPoint(2022, 1e308), HistoricalPoint(2023, 1e308)]
    with caplog.at_level(logging.WARNING, logger="forecastify.engine.pipeline"):
        result = run_forecast(history, [ForecastParameter(2024, 100)])
    assert result.statistics.projected_growth == float("inf")
    assert "Non-finite statistics: projected_growth" in caplog.text
