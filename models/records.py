"""Domain models shared across services."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Reading:
    """A single temperature sample keyed by its wall-clock millisecond."""

    timestamp: int
    temperature: float
