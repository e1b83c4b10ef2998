"""Plain value records shared by the forecast engine and its callers."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Mapping, Optional, Tuple


@dataclass(frozen=True)
class HistoricalPoint:
    """One observed year of sales."""

    year: Optional[int]
    sales: Optional[float]

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "HistoricalPoint":
        return cls(year=data.get("year"), sales=data.get("sales"))


@dataclass(frozen=True)
class ForecastParameter:
    """Requested growth (percent, may be negative) for one future year."""

    year: Optional[int]
    percentage: Optional[float]

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ForecastParameter":
        return cls(year=data.get("year"), percentage=data.get("percentage"))


@dataclass(frozen=True)
class ForecastPoint:
    year: int
    sales: int
    percentage: float
    calculation: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class GraphPoint:
    """Chart point; only the transition year carries both series."""

    year: int
    historical: Optional[float]
    forecasted: Optional[float]

    @property
    def is_transition(self) -> bool:
        return self.historical is not None and self.forecasted is not None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class Statistics:
    """Summary metrics over both series.

    ``Statistics()`` is the empty record returned when there is no
    historical data: every scalar is ``None`` and ``growth_rates`` is empty.
    """

    total_historical: Optional[float] = None
    total_forecasted: Optional[float] = None
    average_growth_rate: Optional[float] = None
    projected_growth: Optional[float] = None
    growth_rates: Tuple[float, ...] = field(default_factory=tuple)
    last_historical: Optional[float] = None
    first_forecasted: Optional[float] = None

    @property
    def is_empty(self) -> bool:
        return self == Statistics()

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["growth_rates"] = list(self.growth_rates)
        return data


@dataclass(frozen=True)
class ValidationResult:
    is_valid: bool
    message: str
    errors: Tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def from_errors(cls, errors: list[str]) -> "ValidationResult":
        return cls(is_valid=not errors, message=", ".join(errors), errors=tuple(errors))


__all__ = [
    "HistoricalPoint",
    "ForecastParameter",
    "ForecastPoint",
    "GraphPoint",
    "Statistics",
    "ValidationResult",
]
