"""Wiring of the store and its three background tasks."""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from datastore.timeseries import TimeSeriesStore, build_default_store
from services.analyzer import ReportSink, TrendAnalyzer
from services.evictor import Evictor
from services.scheduler import PeriodicTask, RestartPolicy
from services.sensor import SensorFeed
from settings import Settings, get_settings


class SensorSimulation:
    """Owns the feed, evictor and analyzer tasks sharing one store.

    ``start`` launches the feed and the evictor; ``start_analysis`` launches
    the analyzer on its own, so a failure in either group leaves the other
    running.
    """

    def __init__(
        self,
        store: TimeSeriesStore,
        feed: SensorFeed,
        evictor: Evictor,
        analyzer: TrendAnalyzer,
        settings: Settings,
        restart_policy: Optional[RestartPolicy] = None,
    ) -> None:
        self.store = store
        self.feed = feed
        self.evictor = evictor
        self.analyzer = analyzer
        self.settings = settings
        self.feed_task = PeriodicTask(
            "sensor-feed",
            feed.tick,
            settings.tick_interval_ms,
            restart_policy=restart_policy,
        )
        self.evictor_task = PeriodicTask(
            "evictor",
            evictor.sweep,
            settings.cleanup_interval_ms,
            restart_policy=restart_policy,
        )
        self.analysis_task = PeriodicTask(
            "trend-analyzer",
            analyzer.analyze,
            settings.analysis_interval_ms,
            run_immediately=True,
            restart_policy=restart_policy,
        )

    @property
    def tasks(self) -> tuple[PeriodicTask, ...]:
        return (self.feed_task, self.evictor_task, self.analysis_task)

    def start(self) -> None:
        self.feed_task.start()
        self.evictor_task.start()

    def start_analysis(self) -> None:
        self.analysis_task.start()

    def shutdown(self, timeout: Optional[float] = 1.0) -> None:
        """Signal every loop to stop and wait briefly for the threads."""
        for task in self.tasks:
            task.stop(timeout)


def build_simulation(
    settings: Settings,
    store: TimeSeriesStore,
    sink: Optional[ReportSink] = None,
    restart_policy: Optional[RestartPolicy] = None,
) -> SensorSimulation:
    feed = SensorFeed(
        store,
        base_temp=settings.base_temp,
        amplitude=settings.amplitude,
        day_period_ms=settings.day_period_ms,
        variance_fraction=settings.variance_fraction,
        seed=settings.random_seed,
    )
    evictor = Evictor(store, max_entries=settings.max_entries)
    analyzer = TrendAnalyzer(store, sink=sink)
    return SensorSimulation(
        store=store,
        feed=feed,
        evictor=evictor,
        analyzer=analyzer,
        settings=settings,
        restart_policy=restart_policy,
    )


@lru_cache
def build_default_simulation(
    sink: Optional[ReportSink] = None,
    restart_policy: Optional[RestartPolicy] = None,
) -> SensorSimulation:
    """Factory that wires the simulation around the process-wide store."""
    return build_simulation(
        get_settings(),
        build_default_store(),
        sink=sink,
        restart_policy=restart_policy,
    )
