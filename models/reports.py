"""Pydantic schemas for analysis output."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class Trend(str, Enum):
    """Direction of recent temperature movement."""

    rising = "rising"
    falling = "falling"


class TrendReport(BaseModel):
    """Outcome of one analysis cycle over a non-empty five-minute window."""

    generated_at: int = Field(..., description="Wall-clock milliseconds of the cycle.")
    reading_count: int = Field(..., ge=1)
    average_temperature: float
    recent_average: Optional[float] = Field(
        default=None, description="Mean of the last fifteen seconds."
    )
    baseline_average: Optional[float] = Field(
        default=None, description="Mean from seventy-five seconds ago onwards."
    )
    trend: Trend

    def format_line(self) -> str:
        return (
            f"Past 5 min readings count: {self.reading_count}. "
            f"Average temp (last 5 min): {self.average_temperature}, "
            f"Trend: {self.trend.value}"
        )
