import math

import pytest

from forecastify.engine.stats import aggregate, divide, mean, round_rate
from forecastify.models import ForecastPoint, HistoricalPoint, Statistics

HISTORY = [HistoricalPoint(2020, 1000), HistoricalPoint(2021, 1200), HistoricalPoint(2022, 1400), HistoricalPoint(2023, 1600)]


def _point(year: int, sales: int) -> ForecastPoint:
    return ForecastPoint(year=year, sales=sales, percentage=0, calculation="")


def test_projected_growth() -> None:
    stats = aggregate(HISTORY, [_point(2024, 1760)])
    assert stats.projected_growth == pytest.approx(10.0)
    assert stats.last_historical == 1600
    assert stats.first_forecasted == 1760


def test_totals_and_growth_rates() -> None:
    stats = aggregate(HISTORY, [_point(2024, 1760), _point(2025, 1901)])
    assert stats.total_historical == 5200
    assert stats.total_forecasted == 3661
    assert stats.growth_rates == (20.0, 16.67, 14.29)
    assert stats.average_growth_rate == pytest.approx((20.0 + 16.67 + 14.29) / 3)


def test_without_forecast_projection_is_zero() -> None:
    stats = aggregate(HISTORY, [])
    assert stats.total_forecasted == 0
    assert stats.projected_growth == 0
    assert stats.last_historical == 0
    assert stats.first_forecasted == 0


def test_single_year_history_has_no_growth_rates() -> None:
    stats = aggregate([HistoricalPoint(2023, 500)], None)
    assert stats.growth_rates == ()
    assert stats.average_growth_rate == 0


def test_empty_history_returns_empty_record() -> None:
    stats = aggregate([], [_point(2024, 1)])
    assert stats == Statistics()
    assert stats.is_empty


def test_zero_denominators_propagate_ieee_values() -> None:
    history = [HistoricalPoint(2021, 0), HistoricalPoint(2022, 50), HistoricalPoint(2023, 0)]
    stats = aggregate(history, [_point(2024, 0)])
    assert stats.growth_rates[0] == math.inf
    assert stats.growth_rates[1] == -100.0
    assert math.isinf(stats.average_growth_rate)
    assert math.isnan(stats.projected_growth)


def test_divide_signs() -> None:
    assert divide(5, 0) == math.inf
    assert divide(-5, 0) == -math.inf
    assert math.isnan(divide(0, 0))
    assert divide(6, 3) == 2


@pytest.mark.parametrize("value,expected", [(16.666666, 16.67), (0.125, 0.13), (-0.125, -0.13), (1.005, 1.0)])
def test_round_rate_half_away_from_zero(value, expected) -> None:
    assert round_rate(value) == expected


def test_mean_rejects_empty() -> None:
    with pytest.raises(ValueError):
        mean([])


def test_aggregate_is_idempotent() -> None:
    forecasted = [_point(2024, 1760)]
    assert aggregate(HISTORY, forecasted) == aggregate(HISTORY, forecasted)


def test_to_dict_lists_growth_rates() -> None:
    data = aggregate(HISTORY, [_point(2024, 1760)]).to_dict()
    assert data["growth_rates"] == [20.0, 16.67, 14.29]
    assert data["total_historical"] == 5200
    assert Statistics().to_dict()["projected_growth"] is None
