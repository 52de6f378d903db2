"""Aggregation logic for windows of temperature readings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from models.records import Reading


@dataclass
class WindowSummary:
    """Reading count and mean temperature of one window."""

    reading_count: int = 0
    mean_temperature: float | None = None


class WindowAggregator:
    """Pure aggregation component that can be unit tested in isolation."""

    def aggregate(self, readings: Iterable[Reading]) -> WindowSummary:
        summary = WindowSummary()
        total = 0.0

        for reading in readings:
            summary.reading_count += 1
            total += reading.temperature

        # Empty windows keep mean_temperature as None instead of dividing by zero.
        if summary.reading_count:
            summary.mean_temperature = total / summary.reading_count

        return summary


def average(readings: Iterable[Reading]) -> Optional[float]:
    """Arithmetic mean of the temperatures, or ``None`` for an empty window."""
    return WindowAggregator().aggregate(readings).mean_temperature
