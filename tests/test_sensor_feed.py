from __future__ import annotations

from typing import Iterable

import pytest

from datastore.timeseries import TimeSeriesStore
from models.records import Reading
from services.sensor import SensorFeed


class FixedRandom:
    """Stand-in random source returning a scripted sequence."""

    def __init__(self, values: Iterable[float]) -> None:
        self._values = iter(values)

    def random(self) -> float:
        return next(self._values)


def test_true_temperature_repeats_every_day_period() -> None:
    feed = SensorFeed(TimeSeriesStore())

    for timestamp in (0, 12_345, 75_000, 1_700_000_000_123):
        assert feed.true_temperature(timestamp) == pytest.approx(
            feed.true_temperature(timestamp + 300_000)
        )


def test_true_temperature_follows_sine_wave() -> None:
    feed = SensorFeed(TimeSeriesStore())

    assert feed.true_temperature(0) == pytest.approx(20.0)
    assert feed.true_temperature(75_000) == pytest.approx(30.0)
    assert feed.true_temperature(225_000) == pytest.approx(10.0)


def test_simulated_reading_stays_within_variance_fraction() -> None:
    feed = SensorFeed(TimeSeriesStore(), seed=7)

    for timestamp in range(0, 600_000, 997):
        true_temp = feed.true_temperature(timestamp)
        simulated = feed.simulate_reading(true_temp)
        assert abs(simulated - true_temp) <= 0.15 * abs(true_temp) + 1e-9


def test_simulated_reading_sign_depends_on_second_draw() -> None:
    above = SensorFeed(TimeSeriesStore(), rng=FixedRandom([0.5, 0.9]))
    below = SensorFeed(TimeSeriesStore(), rng=FixedRandom([0.5, 0.5]))

    assert above.simulate_reading(20.0) == pytest.approx(21.5)
    assert below.simulate_reading(20.0) == pytest.approx(18.5)


def test_tick_inserts_reading_at_current_millisecond() -> None:
    store = TimeSeriesStore()
    feed = SensorFeed(store, rng=FixedRandom([0.0, 0.9]), clock=lambda: 75_000)

    reading = feed.tick()

    assert reading.timestamp == 75_000
    assert reading.temperature == pytest.approx(30.0)
    assert store.snapshot_since(0) == [reading]


def test_ticks_in_same_millisecond_overwrite() -> None:
    store = TimeSeriesStore()
    feed = SensorFeed(store, rng=FixedRandom([0.0, 0.9, 1.0, 0.9]), clock=lambda: 0)

    feed.tick()
    second = feed.tick()

    assert store.size() == 1
    assert store.snapshot_since(0) == [Reading(timestamp=0, temperature=second.temperature)]
    assert second.temperature == pytest.approx(23.0)


def test_invalid_day_period_rejected() -> None:
    with pytest.raises(ValueError):
        SensorFeed(TimeSeriesStore(), day_period_ms=0)
