"""Monthly reading DTOs — pure Pydantic, zero ORM imports."""
from __future__ import annotations
from datetime import date, datetime
from pydantic import BaseModel, Field
from outorga.domain.enums import ReadingStatus


class ReadingCreate(BaseModel):
    hydrometer_value: float = Field(ge=0)
    hour_meter_value: float = Field(ge=0)
    hydrometer_declared: float | None = None
    hour_meter_declared: float | None = None
    dynamic_level: float | None = Field(default=None, ge=0)
    static_level: float | None = Field(default=None, ge=0)
    month: int | None = Field(default=None, ge=1, le=12)
    year: int | None = Field(default=None, ge=1900)
    reading_date: date | None = None
    notes: str | None = None


class ReadingRead(BaseModel):
    model_config = {"from_attributes": True}

    id: int
    license_id: int
    month: int
    year: int
    status: ReadingStatus
    reading_date: date
    hydrometer_previous: float | None = None
    hydrometer_value: float | None = None
    hydrometer_consumption: float | None = None
    hour_meter_previous: float | None = None
    hour_meter_value: float | None = None
    hour_meter_hours: float | None = None
    dynamic_level: float | None = None
    static_level: float | None = None
    notes: str | None = None
    user_id: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ReadingList(BaseModel):
    items: list[ReadingRead]
    total: int
