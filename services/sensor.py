"""Synthetic temperature feed.

The true temperature follows a sine wave whose period is one compressed
"day"; each tick perturbs it by a uniformly drawn fraction of itself and
writes the result into the store under the current millisecond.
"""

from __future__ import annotations

import math
import random
from typing import Optional

from datastore.timeseries import TimeSeriesStore
from models.records import Reading
from services.clock import Clock, current_time_ms


class SensorFeed:
    """Produces one simulated reading per tick."""

    def __init__(
        self,
        store: TimeSeriesStore,
        *,
        base_temp: float = 20.0,
        amplitude: float = 10.0,
        day_period_ms: int = 300_000,
        variance_fraction: float = 0.15,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
        clock: Clock = current_time_ms,
    ) -> None:
        if day_period_ms <= 0:
            raise ValueError("day_period_ms must be positive")
        if variance_fraction < 0:
            raise ValueError("variance_fraction must not be negative")
        self.store = store
        self.base_temp = base_temp
        self.amplitude = amplitude
        self.day_period_ms = day_period_ms
        self.variance_fraction = variance_fraction
        # Only the feed's own thread draws from this generator.
        self._rng = rng if rng is not None else random.Random(seed)
        self._clock = clock

    def true_temperature(self, timestamp: int) -> float:
        phase = 2 * math.pi * timestamp / self.day_period_ms
        return self.base_temp + self.amplitude * math.sin(phase)

    def simulate_reading(self, true_temp: float) -> float:
        variance = self._rng.random() * self.variance_fraction * true_temp
        if self._rng.random() > 0.5:
            return true_temp + variance
        return true_temp - variance

    def tick(self) -> Reading:
        now = self._clock()
        simulated = self.simulate_reading(self.true_temperature(now))
        self.store.insert(now, simulated)
        return Reading(timestamp=now, temperature=simulated)
