from __future__ import annotations

from functools import lru_cache
from threading import Lock
from typing import Dict

from models.records import Reading


class TimeSeriesStore:
    """Temperature readings keyed by millisecond timestamp.

    Every operation takes the same lock. Inserts hold it for a single dict
    assignment; snapshots hold it only while copying the items.
    """

    def __init__(self, name: str = "sensor_data") -> None:
        self.name = name
        self._entries: Dict[int, float] = {}
        self._lock = Lock()

    def insert(self, timestamp: int, temperature: float) -> None:
        with self._lock:
            self._entries[timestamp] = temperature

    def size(self) -> int:
        with self._lock:
            return len(self._entries)

    def delete_older_than(self, threshold: int) -> int:
        """Remove every entry with ``timestamp < threshold``; return how many went."""

        with self._lock:
            before = len(self._entries)
            self._entries = {
                timestamp: temperature
                for timestamp, temperature in self._entries.items()
                if timestamp >= threshold
            }
            return before - len(self._entries)

    def snapshot_since(self, threshold: int) -> list[Reading]:
        """Return copies of all readings with ``timestamp >= threshold``, unordered."""

        with self._lock:
            items = list(self._entries.items())
        return [
            Reading(timestamp=timestamp, temperature=temperature)
            for timestamp, temperature in items
            if timestamp >= threshold
        ]


@lru_cache
def build_default_store() -> TimeSeriesStore:
    return TimeSeriesStore()
