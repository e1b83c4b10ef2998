"""Summary statistics over historical and forecasted sales."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional, Sequence

from forecastify.models import ForecastPoint, HistoricalPoint, Statistics

_TWO_PLACES = Decimal("0.01")


def divide(numerator: float, denominator: float) -> float:
    """IEEE division: a zero denominator yields +/-inf or nan instead of raising."""

    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def round_rate(value: float) -> float:
    """Round a percentage to two decimals, ties away from zero."""

    if not math.isfinite(value):
        return value
    return float(Decimal(value).quantize(_TWO_PLACES, rounding=ROUND_HALF_UP))


def percent_change(previous: float, current: float) -> float:
    return divide(current - previous, previous) * 100


def mean(values: Sequence[float]) -> float:
    total = 0.0
    count = 0
    for v in values:
        total += float(v)
        count += 1
    if count == 0:
        raise ValueError("values cannot be empty")
    return total / count


def growth_rates(historical: Sequence[HistoricalPoint]) -> tuple[float, ...]:
    """Year-over-year growth percentages, one per consecutive pair."""

    return tuple(
        round_rate(percent_change(previous.sales, current.sales))
        for previous, current in zip(historical, historical[1:])
    )


def aggregate(
    historical: Optional[Sequence[HistoricalPoint]],
    forecasted: Optional[Sequence[ForecastPoint]],
) -> Statistics:
    """Return totals, growth rates and projected growth.

    An empty record is returned when there is no historical data. Zero
    denominators are not guarded and surface as ``inf`` or ``nan``.
    """

    if not historical:
        return Statistics()
    forecasted = forecasted or []

    rates = growth_rates(historical)
    average = mean(rates) if rates else 0

    projected = 0
    last_historical = 0
    first_forecasted = 0
    if forecasted:
        last_historical = historical[-1].sales
        first_forecasted = forecasted[0].sales
        projected = percent_change(last_historical, first_forecasted)

    return Statistics(
        total_historical=sum(item.sales for item in historical),
        total_forecasted=sum(item.sales for item in forecasted),
        average_growth_rate=average,
        projected_growth=projected,
        growth_rates=rates,
        last_historical=last_historical,
        first_forecasted=first_forecasted,
    )


__all__ = ["aggregate", "growth_rates", "percent_change", "round_rate", "divide", "mean"]
