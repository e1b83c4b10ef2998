"""Input/output helpers for forecastify."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

import pandas as pd
import yaml

from forecastify.config import Scenario
from forecastify.models import ForecastParameter, HistoricalPoint


def ensure_directory(path: Path) -> None:
    """Create directory if it does not exist."""

    path.mkdir(parents=True, exist_ok=True)


def timestamped_dir(base: Path, prefix: str) -> Path:
    """Return a directory path suffixed with the current timestamp."""

    stamp = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%SZ")
    path = base / prefix / stamp
    ensure_directory(path)
    return path


def _read_columns(path: str | Path, columns: tuple[str, ...]) -> pd.DataFrame:
    df = pd.read_csv(path)
    df.columns = [str(col).strip().lower() for col in df.columns]
    missing = [col for col in columns if col not in df.columns]
    if missing:
        raise ValueError(f"CSV file {path} must contain columns {', '.join(missing)}")
    return df


def _optional_year(value: Any, path: str | Path, row: int) -> Optional[int]:
    if pd.isna(value):
        return None
    if not float(value).is_integer():
        raise ValueError(f"CSV file {path} has a non-integral year {float(value):g} at row {row}")
    return int(value)


def _optional_float(value: Any) -> Optional[float]:
    return None if pd.isna(value) else float(value)


def load_historical_csv(path: str | Path) -> list[HistoricalPoint]:
    """Load historical sales from a CSV with ``year`` and ``sales`` columns."""

    df = _read_columns(path, ("year", "sales"))
    return [
        HistoricalPoint(year=_optional_year(row.year, path, idx), sales=_optional_float(row.sales))
        for idx, row in enumerate(df.itertuples(index=False), start=1)
    ]


def load_parameters_csv(path: str | Path) -> list[ForecastParameter]:
    """Load growth parameters from a CSV with ``year`` and ``percentage`` columns."""

    df = _read_columns(path, ("year", "percentage"))
    return [
        ForecastParameter(year=_optional_year(row.year, path, idx), percentage=_optional_float(row.percentage))
        for idx, row in enumerate(df.itertuples(index=False), start=1)
    ]


def save_table(df: pd.DataFrame, out_dir: Path, name: str) -> Path:
    """Persist a dataframe as CSV."""

    ensure_directory(out_dir)
    path = out_dir / f"{name}.csv"
    df.to_csv(path, index=False)
    return path


def write_scenario_snapshot(scenario: Scenario, out_dir: Path, filename: str = "scenario_snapshot.yaml") -> Path:
    """Persist the scenario as YAML for reproducibility."""

    ensure_directory(out_dir)
    path = out_dir / filename
    with path.open("w", encoding="utf-8") as handle:
        yaml.safe_dump(scenario.model_dump(mode="json"), handle, sort_keys=False)
    return path


__all__ = [
    "ensure_directory",
    "timestamped_dir",
    "load_historical_csv",
    "load_parameters_csv",
    "save_table",
    "write_scenario_snapshot",
]
