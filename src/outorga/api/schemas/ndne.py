"""ND/NE DTOs — pure Pydantic, zero ORM imports.

Write payloads accept loosely typed values (form strings included) so that
field problems are reported by the ND/NE rules, keyed by field, rather than
rejected wholesale by request parsing.
"""
from __future__ import annotations
from datetime import date, datetime
from pydantic import BaseModel, Field, computed_field
from outorga.domain.enums import Origin, Period

Level = float | str | None
DateInput = date | str | None


class NDNECreate(BaseModel):
    period: str | None = None
    technician_id: str | None = None
    measured_on: DateInput = None
    static_level: Level = None
    dynamic_level: Level = None
    responsible_name: str | None = None
    origin: Origin = Origin.MANUAL


class NDNEUpdate(BaseModel):
    period: str | None = None
    technician_id: str | None = None
    measured_on: DateInput = None
    static_level: Level = None
    dynamic_level: Level = None
    responsible_name: str | None = None


class NDNEFilters(BaseModel):
    period: Period | None = None
    origin: Origin | None = None
    year: int | None = Field(default=None, ge=1, le=9999)


class NDNERead(BaseModel):
    model_config = {"from_attributes": True}

    id: int
    contract_id: int
    period: Period
    static_level: float
    dynamic_level: float
    measured_on: date
    technician_id: str
    responsible_name: str | None = None
    origin: Origin
    original_origin: Origin | None = None
    created_at: datetime | None = None
    created_by: str
    edited_at: datetime | None = None
    edited_by: str | None = None

    @computed_field
    @property
    def edited(self) -> bool:
        return self.original_origin is not None and self.origin != self.original_origin


class NDNEList(BaseModel):
    items: list[NDNERead]
    total: int


class ValidationReport(BaseModel):
    valid: bool
    errors: dict[str, str]
