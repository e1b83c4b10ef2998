"""Linear compounding forecast."""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Optional, Sequence

from forecastify.models import ForecastParameter, ForecastPoint, HistoricalPoint


def round_half_up(value: float) -> int | float:
    """Round to the nearest integer, ties toward positive infinity.

    Non-finite values are returned unchanged.
    """

    if not math.isfinite(value):
        return value
    floor = math.floor(value)
    return floor + 1 if value - floor >= 0.5 else floor


def format_number(value: float) -> str:
    """Shortest display form, as a browser would print the number.

    Integral values print without a fraction, and magnitudes from 1e-6 up to
    1e21 print in positional notation (``0.00001``, not ``1e-05``).
    """

    if isinstance(value, int):
        return str(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    text = repr(value)
    if "e" not in text:
        return text
    if 1e-6 <= abs(value) < 1e21:
        return format(Decimal(text), "f")
    mantissa, exponent = text.split("e")
    return f"{mantissa}e{int(exponent):+d}"


def forecast(
    historical: Optional[Sequence[HistoricalPoint]],
    parameters: Optional[Sequence[ForecastParameter]],
) -> list[ForecastPoint]:
    """Compound each parameter's growth onto the previous year's sales.

    The last historical sales value seeds the carry. Parameters are applied
    in the order given, never re-sorted by year. Each point stores the
    rounded sales figure, while the unrounded product is carried into the
    next step; the calculation string shows the carry actually multiplied.
    """

    if not historical or not parameters:
        return []

    carry = historical[-1].sales
    points: list[ForecastPoint] = []
    for param in parameters:
        projected = carry * (1 + param.percentage / 100)
        sales = round_half_up(projected)
        calculation = f"{format_number(carry)} × (1 + {format_number(param.percentage)}%) = {format_number(sales)}"
        points.append(ForecastPoint(year=param.year, sales=sales, percentage=param.percentage, calculation=calculation))
        carry = projected
    return points


__all__ = ["forecast", "round_half_up", "format_number"]
