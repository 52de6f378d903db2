"""Periodic trend analysis over sliding windows of the store."""

from __future__ import annotations

import logging
from typing import Callable, Optional

from datastore.timeseries import TimeSeriesStore
from models.reports import Trend, TrendReport
from services.aggregator import WindowAggregator
from services.clock import Clock, current_time_ms

logger = logging.getLogger(__name__)

SUMMARY_WINDOW_MS = 5 * 60 * 1000
RECENT_WINDOW_MS = 15_000
BASELINE_OFFSET_MS = 60_000

ReportSink = Callable[[TrendReport], None]


def classify_trend(recent: Optional[float], baseline: Optional[float]) -> Trend:
    """Strictly greater is rising; ties are falling.

    A missing average compares above any number: an empty recent window
    against a populated baseline counts as rising, two empty windows as
    falling.
    """
    if recent is None:
        return Trend.rising if baseline is not None else Trend.falling
    if baseline is None:
        return Trend.falling
    return Trend.rising if recent > baseline else Trend.falling


class TrendAnalyzer:
    """Reads three windows from the store and reports the temperature trend."""

    def __init__(
        self,
        store: TimeSeriesStore,
        sink: Optional[ReportSink] = None,
        aggregator: Optional[WindowAggregator] = None,
        clock: Clock = current_time_ms,
    ) -> None:
        self.store = store
        self.sink = sink
        self.aggregator = aggregator or WindowAggregator()
        self._clock = clock

    def analyze(self) -> Optional[TrendReport]:
        now = self._clock()

        summary = self.aggregator.aggregate(
            self.store.snapshot_since(now - SUMMARY_WINDOW_MS)
        )
        recent = self.aggregator.aggregate(
            self.store.snapshot_since(now - RECENT_WINDOW_MS)
        )
        # Lower bound only: this window also covers everything newer than it.
        baseline = self.aggregator.aggregate(
            self.store.snapshot_since((now - BASELINE_OFFSET_MS) - RECENT_WINDOW_MS)
        )

        trend = classify_trend(recent.mean_temperature, baseline.mean_temperature)

        if summary.reading_count == 0:
            logger.debug("No readings in the last five minutes; nothing to report")
            return None

        report = TrendReport(
            generated_at=now,
            reading_count=summary.reading_count,
            average_temperature=summary.mean_temperature,
            recent_average=recent.mean_temperature,
            baseline_average=baseline.mean_temperature,
            trend=trend,
        )
        logger.debug(
            "Analysis cycle complete",
            extra={"reading_count": report.reading_count, "trend": trend.value},
        )
        if self.sink is not None:
            self.sink(report)
        return report
