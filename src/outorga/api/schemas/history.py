"""Monitoring history DTOs."""
from __future__ import annotations
from pydantic import BaseModel


class MonthlyReading(BaseModel):
    month_label: str
    month: int
    year: int
    hydrometer: float | None = None
    hour_meter: float | None = None
    dynamic_level: float | None = None
    static_level: float | None = None


class MonitoringHistory(BaseModel):
    """``started`` is False (and ``months`` None) until the first finalized reading."""

    license_id: int
    started: bool
    anchor_month: int | None = None
    anchor_year: int | None = None
    months: list[MonthlyReading] | None = None
