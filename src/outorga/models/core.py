"""Licence and contract tables."""
from datetime import date, datetime, timezone
from typing import Optional
from sqlalchemy import String
from sqlmodel import Field, SQLModel
from outorga.domain.enums import Priority


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class License(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    license_number: str = Field(index=True, unique=True)
    act_type: str
    municipality: str = Field(index=True)
    priority: Priority = Field(default=Priority.MEDIUM, sa_type=String(16))
    status: str = Field(default="active", index=True)
    start_date: date
    end_date: date
    holder_name: Optional[str] = None
    holder_document: Optional[str] = None
    created_at: datetime = Field(default_factory=utcnow)


class Contract(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    license_id: int = Field(foreign_key="license.id", index=True)
    number: str
    signed_on: date
    purpose: str
    measurement_start: Optional[date] = None
    measurement_end: Optional[date] = None
    technician_name: Optional[str] = None
    created_at: datetime = Field(default_factory=utcnow)
