"""Unit tests for the in-memory time-series store."""

from __future__ import annotations

import threading

from datastore.timeseries import TimeSeriesStore, build_default_store
from models.records import Reading


def test_insert_same_timestamp_keeps_latest_value() -> None:
    store = TimeSeriesStore()

    store.insert(1000, 20.0)
    store.insert(1000, 22.5)

    assert store.size() == 1
    assert store.snapshot_since(0) == [Reading(timestamp=1000, temperature=22.5)]


def test_snapshot_since_is_inclusive_at_threshold() -> None:
    store = TimeSeriesStore()
    now = 100_000
    for timestamp in (84_999, 85_000, 99_999):
        store.insert(timestamp, 20.0)

    snapshot = store.snapshot_since(now - 15_000)

    assert sorted(reading.timestamp for reading in snapshot) == [85_000, 99_999]


def test_snapshot_is_a_copy() -> None:
    store = TimeSeriesStore()
    store.insert(10, 1.0)

    snapshot = store.snapshot_since(0)
    store.insert(20, 2.0)
    store.delete_older_than(100)

    assert snapshot == [Reading(timestamp=10, temperature=1.0)]
    assert store.snapshot_since(0) == []


def test_delete_older_than_removes_only_older_entries() -> None:
    store = TimeSeriesStore()
    for timestamp in range(10):
        store.insert(timestamp, float(timestamp))

    removed = store.delete_older_than(4)

    assert removed == 4
    assert store.size() == 6
    assert sorted(r.timestamp for r in store.snapshot_since(0)) == list(range(4, 10))


def test_delete_on_empty_store_is_noop() -> None:
    store = TimeSeriesStore()

    assert store.delete_older_than(1_000) == 0
    assert store.size() == 0


def test_concurrent_inserts_survive_deletes_below_their_timestamps() -> None:
    store = TimeSeriesStore()
    threshold = 50_000
    for timestamp in range(threshold):
        store.insert(timestamp, 1.0)

    writers_started = threading.Barrier(3)

    def write(offset: int) -> None:
        writers_started.wait(timeout=1.0)
        for i in range(5_000):
            store.insert(threshold + offset + i * 2, 2.0)

    def sweep() -> None:
        writers_started.wait(timeout=1.0)
        for _ in range(20):
            store.delete_older_than(threshold)
            store.snapshot_since(threshold)

    threads = [
        threading.Thread(target=write, args=(0,)),
        threading.Thread(target=write, args=(1,)),
        threading.Thread(target=sweep),
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(timeout=10)

    store.delete_older_than(threshold)
    readings = store.snapshot_since(0)
    assert store.size() == 10_000
    assert len(readings) == 10_000
    assert min(r.timestamp for r in readings) == threshold
    assert all(r.temperature == 2.0 for r in readings)


def test_build_default_store_returns_single_instance() -> None:
    build_default_store.cache_clear()
    try:
        assert build_default_store() is build_default_store()
    finally:
        build_default_store.cache_clear()
