from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional


_MAX_ENTRIES_ENV = "SENSOR_MAX_ENTRIES"
_CLEANUP_INTERVAL_ENV = "SENSOR_CLEANUP_INTERVAL_MS"
_TICK_INTERVAL_ENV = "SENSOR_TICK_INTERVAL_MS"
_ANALYSIS_INTERVAL_ENV = "SENSOR_ANALYSIS_INTERVAL_MS"
_DAY_PERIOD_ENV = "SENSOR_DAY_PERIOD_MS"
_BASE_TEMP_ENV = "SENSOR_BASE_TEMP"
_AMPLITUDE_ENV = "SENSOR_AMPLITUDE"
_VARIANCE_FRACTION_ENV = "SENSOR_VARIANCE_FRACTION"
_RANDOM_SEED_ENV = "SENSOR_RANDOM_SEED"
_LOG_LEVEL_ENV = "LOG_LEVEL"


@dataclass(frozen=True)
class Settings:
    max_entries: int = 500_000
    cleanup_interval_ms: int = 1000
    tick_interval_ms: int = 1
    analysis_interval_ms: int = 10_000
    day_period_ms: int = 300_000
    base_temp: float = 20.0
    amplitude: float = 10.0
    variance_fraction: float = 0.15
    random_seed: Optional[int] = None
    log_level: str = "INFO"


def _read_env(name: str) -> Optional[str]:
    value = os.getenv(name)
    if value is None:
        return None
    candidate = value.strip()
    return candidate or None


def _read_int_env(name: str, default: int, minimum: int = 1) -> int:
    candidate = _read_env(name)
    if candidate is None:
        return default
    try:
        parsed = int(candidate)
    except ValueError:
        return default
    return parsed if parsed >= minimum else default


def _read_float_env(name: str, default: float) -> float:
    candidate = _read_env(name)
    if candidate is None:
        return default
    try:
        return float(candidate)
    except ValueError:
        return default


def _read_seed(default: Optional[int]) -> Optional[int]:
    candidate = _read_env(_RANDOM_SEED_ENV)
    if candidate is None:
        return default
    try:
        return int(candidate)
    except ValueError:
        return default


def _read_log_level(default: str) -> str:
    candidate = _read_env(_LOG_LEVEL_ENV)
    if candidate is None:
        return default
    return candidate.upper()


@lru_cache
def get_settings() -> Settings:
    defaults = Settings()
    return Settings(
        max_entries=_read_int_env(_MAX_ENTRIES_ENV, defaults.max_entries, minimum=0),
        cleanup_interval_ms=_read_int_env(_CLEANUP_INTERVAL_ENV, defaults.cleanup_interval_ms),
        tick_interval_ms=_read_int_env(_TICK_INTERVAL_ENV, defaults.tick_interval_ms),
        analysis_interval_ms=_read_int_env(_ANALYSIS_INTERVAL_ENV, defaults.analysis_interval_ms),
        day_period_ms=_read_int_env(_DAY_PERIOD_ENV, defaults.day_period_ms),
        base_temp=_read_float_env(_BASE_TEMP_ENV, defaults.base_temp),
        amplitude=_read_float_env(_AMPLITUDE_ENV, defaults.amplitude),
        variance_fraction=_read_float_env(_VARIANCE_FRACTION_ENV, defaults.variance_fraction),
        random_seed=_read_seed(defaults.random_seed),
        log_level=_read_log_level(defaults.log_level),
    )
