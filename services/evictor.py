from __future__ import annotations

import logging

from datastore.timeseries import TimeSeriesStore
from services.clock import Clock, current_time_ms

logger = logging.getLogger(__name__)


class Evictor:
    """Size-triggered, age-based sweep of the store.

    Once the store holds more than ``max_entries`` readings, everything older
    than ``now - max_entries`` milliseconds is dropped. The count doubles as
    an age, which only bounds the size when the feed writes about one reading
    per millisecond.
    """

    def __init__(
        self,
        store: TimeSeriesStore,
        max_entries: int = 500_000,
        clock: Clock = current_time_ms,
    ) -> None:
        if max_entries < 0:
            raise ValueError("max_entries must not be negative")
        self.store = store
        self.max_entries = max_entries
        self._clock = clock

    def sweep(self) -> int:
        entry_count = self.store.size()
        if entry_count <= self.max_entries:
            logger.debug(
                "Store within bounds; sweep skipped",
                extra={"entry_count": entry_count},
            )
            return 0

        oldest_allowed = self._clock() - self.max_entries
        removed = self.store.delete_older_than(oldest_allowed)
        logger.info(
            "Evicted readings older than threshold",
            extra={
                "entry_count": entry_count,
                "threshold_ms": oldest_allowed,
                "removed_count": removed,
            },
        )
        return removed
