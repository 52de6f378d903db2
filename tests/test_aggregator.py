"""Unit tests for the aggregation logic."""

from __future__ import annotations

from dataclasses import fields

from models.records import Reading
from services.aggregator import WindowAggregator, WindowSummary, average


def _reading(timestamp: int, temperature: float) -> Reading:
    """Helper to build deterministic readings."""

    return Reading(timestamp=timestamp, temperature=temperature)


def test_aggregate_empty_iterable_returns_default_summary() -> None:
    aggregator = WindowAggregator()

    summary = aggregator.aggregate([])

    assert summary.reading_count == 0
    assert summary.mean_temperature is None


def test_aggregate_computes_statistics() -> None:
    aggregator = WindowAggregator()
    readings = [
        _reading(1, 10.0),
        _reading(2, 30.0),
        _reading(3, 20.0),
    ]

    summary = aggregator.aggregate(readings)

    assert summary.reading_count == 3
    assert summary.mean_temperature == 20.0


def test_average_of_empty_window_is_none() -> None:
    assert average([]) is None


def test_average_of_two_readings() -> None:
    assert average([_reading(1, 5.0), _reading(2, 15.0)]) == 10.0


def test_average_accepts_generators() -> None:
    assert average(_reading(t, 4.0) for t in range(3)) == 4.0


def test_summary_tracks_only_count_and_mean() -> None:
    assert [field.name for field in fields(WindowSummary)] == [
        "reading_count",
        "mean_temperature",
    ]
