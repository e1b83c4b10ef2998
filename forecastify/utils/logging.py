"""Console logging for the forecastify command line."""

from __future__ import annotations

import logging

from rich.logging import RichHandler

from forecastify.config import LoggingParams


def _numeric_level(level: str | int | LoggingParams) -> int:
    if isinstance(level, LoggingParams):
        level = level.level
    if isinstance(level, int):
        return level
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        raise ValueError(f"Unknown logging level {level!r}")
    return numeric


def setup_logging(level: str | int | LoggingParams = "INFO", force: bool = False) -> None:
    """Route the root logger through a Rich handler at ``level``.

    Library modules only create named loggers; configuring handlers is left
    to entry points. ``force`` replaces handlers installed by an earlier call.
    """

    logging.basicConfig(
        level=_numeric_level(level),
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True, markup=False, show_path=False)],
        force=force,
    )


__all__ = ["setup_logging"]
