"""Licence DTOs — pure Pydantic, zero ORM imports."""
from __future__ import annotations
from datetime import date, datetime
from pydantic import BaseModel, field_validator, model_validator
from outorga.domain.enums import Priority


class LicenseCreate(BaseModel):
    license_number: str
    act_type: str
    municipality: str
    priority: Priority = Priority.MEDIUM
    status: str = "active"
    start_date: date
    end_date: date
    holder_name: str | None = None
    holder_document: str | None = None

    @field_validator("license_number", "act_type", "municipality")
    @classmethod
    def not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be empty")
        return v.strip()

    @model_validator(mode="after")
    def end_after_start(self) -> "LicenseCreate":
        if self.end_date < self.start_date:
            raise ValueError("end_date must not precede start_date")
        return self


class LicenseRead(BaseModel):
    model_config = {"from_attributes": True}

    id: int
    license_number: str
    act_type: str
    municipality: str
    priority: Priority
    status: str
    start_date: date
    end_date: date
    holder_name: str | None = None
    holder_document: str | None = None
    created_at: datetime | None = None


class LicenseList(BaseModel):
    items: list[LicenseRead]
    total: int
