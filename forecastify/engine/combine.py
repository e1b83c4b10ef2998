"""Merge historical and forecasted series into chart-ready points."""

from __future__ import annotations

from typing import Optional, Sequence

from forecastify.models import ForecastPoint, GraphPoint, HistoricalPoint


def combine(
    historical: Optional[Sequence[HistoricalPoint]],
    forecasted: Optional[Sequence[ForecastPoint]],
) -> list[GraphPoint]:
    """Return one point per year, ascending, joined at the last historical year.

    The last historical year is the transition point and carries its sales
    in both series. A forecast point for that same year is dropped.
    """

    if not historical:
        return []

    *earlier, last = historical
    points = [GraphPoint(year=item.year, historical=item.sales, forecasted=None) for item in earlier]
    points.append(GraphPoint(year=last.year, historical=last.sales, forecasted=last.sales))
    points.extend(
        GraphPoint(year=item.year, historical=None, forecasted=item.sales)
        for item in forecasted or []
        if item.year != last.year
    )
    points.sort(key=lambda point: point.year)
    return points


__all__ = ["combine"]
