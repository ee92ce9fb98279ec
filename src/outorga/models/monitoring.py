"""Monthly meter readings (hydrometer, hour meter, ND/NE levels) per licence."""
from datetime import date, datetime
from typing import Optional
from sqlalchemy import Index, String
from sqlmodel import Field, SQLModel
from outorga.domain.enums import ReadingStatus
from outorga.models.core import utcnow


class MeterReading(SQLModel, table=True):
    __tablename__ = "meter_reading"
    __table_args__ = (
        Index("ix_meter_reading_license_period", "license_id", "year", "month"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    license_id: int = Field(foreign_key="license.id", index=True)
    month: int
    year: int
    status: ReadingStatus = Field(default=ReadingStatus.DRAFT, sa_type=String(16), index=True)
    reading_date: date

    hydrometer_previous: Optional[float] = None
    hydrometer_value: Optional[float] = None
    hydrometer_consumption: Optional[float] = None
    hour_meter_previous: Optional[float] = None
    hour_meter_value: Optional[float] = None
    hour_meter_hours: Optional[float] = None
    dynamic_level: Optional[float] = None
    static_level: Optional[float] = None

    notes: Optional[str] = None
    user_id: str
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: Optional[datetime] = None
