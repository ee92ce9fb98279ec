"""Physical-chemical and bacteriological water analyses per contract."""
from datetime import date, datetime, time
from typing import Optional
from sqlalchemy import JSON, String
from sqlmodel import Field, SQLModel
from outorga.domain.enums import CollectionType
from outorga.models.core import utcnow


class WaterAnalysis(SQLModel, table=True):
    __tablename__ = "water_analysis"

    id: Optional[int] = Field(default=None, primary_key=True)
    contract_id: int = Field(foreign_key="contract.id", index=True)
    license_id: int = Field(foreign_key="license.id", index=True)

    collector_name: Optional[str] = None
    collector_registration: Optional[str] = None
    laboratory: Optional[str] = None
    lab_received_on: Optional[date] = None
    collected_on: date = Field(index=True)
    collected_at: Optional[time] = None
    ambient_temperature: Optional[float] = None
    sample_temperature: Optional[float] = None
    collection_type: Optional[CollectionType] = Field(default=None, sa_type=String(16))
    sample_code: Optional[str] = None
    notes: Optional[str] = None
    # Result per catalogue key; parameters that were not measured are absent.
    parameters: dict = Field(default_factory=dict, sa_type=JSON)

    created_at: datetime = Field(default_factory=utcnow)
    created_by: str
    updated_at: Optional[datetime] = None
    updated_by: Optional[str] = None
