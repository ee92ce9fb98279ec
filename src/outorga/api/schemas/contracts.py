"""Contract DTOs — pure Pydantic, zero ORM imports."""
from __future__ import annotations
from datetime import date, datetime
from pydantic import BaseModel, field_validator


class ContractCreate(BaseModel):
    number: str
    signed_on: date
    purpose: str
    measurement_start: date | None = None
    measurement_end: date | None = None
    technician_name: str | None = None

    @field_validator("number", "purpose")
    @classmethod
    def not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be empty")
        return v.strip()


class ContractRead(BaseModel):
    model_config = {"from_attributes": True}

    id: int
    license_id: int
    number: str
    signed_on: date
    purpose: str
    measurement_start: date | None = None
    measurement_end: date | None = None
    technician_name: str | None = None
    created_at: datetime | None = None


class ContractList(BaseModel):
    items: list[ContractRead]
    total: int
