"""Water analysis DTOs — pure Pydantic, zero ORM imports."""
from __future__ import annotations
from datetime import date, datetime, time
from pydantic import BaseModel
from outorga.domain.enums import CollectionType


class AnalysisCreate(BaseModel):
    collected_on: date
    collected_at: time | None = None
    collector_name: str | None = None
    collector_registration: str | None = None
    laboratory: str | None = None
    lab_received_on: date | None = None
    ambient_temperature: float | None = None
    sample_temperature: float | None = None
    collection_type: CollectionType | None = None
    sample_code: str | None = None
    notes: str | None = None
    parameters: dict[str, float | None] = {}


class AnalysisUpdate(BaseModel):
    collected_on: date | None = None
    collected_at: time | None = None
    collector_name: str | None = None
    collector_registration: str | None = None
    laboratory: str | None = None
    lab_received_on: date | None = None
    ambient_temperature: float | None = None
    sample_temperature: float | None = None
    collection_type: CollectionType | None = None
    sample_code: str | None = None
    notes: str | None = None
    # Replaces the stored result set when given.
    parameters: dict[str, float | None] | None = None


class AnalysisRead(BaseModel):
    model_config = {"from_attributes": True}

    id: int
    contract_id: int
    license_id: int
    collected_on: date
    collected_at: time | None = None
    collector_name: str | None = None
    collector_registration: str | None = None
    laboratory: str | None = None
    lab_received_on: date | None = None
    ambient_temperature: float | None = None
    sample_temperature: float | None = None
    collection_type: CollectionType | None = None
    sample_code: str | None = None
    notes: str | None = None
    parameters: dict[str, float]
    created_at: datetime | None = None
    created_by: str
    updated_at: datetime | None = None
    updated_by: str | None = None


class AnalysisList(BaseModel):
    items: list[AnalysisRead]
    total: int


class ParameterRead(BaseModel):
    model_config = {"from_attributes": True}

    key: str
    name: str
    reference_value: str
    method: str
    unit: str


class ParameterGroup(BaseModel):
    group: str
    parameters: list[ParameterRead]
