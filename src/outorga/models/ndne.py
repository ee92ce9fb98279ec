"""ND/NE (dynamic / static water level) measurement records per contract."""
from datetime import date, datetime
from typing import Optional
from sqlalchemy import Index, String, text
from sqlmodel import Field, SQLModel
from outorga.domain.enums import Origin, Period
from outorga.models.core import utcnow

AUTOMATED_PERIOD_INDEX = "ux_ndne_record_automated_period"
AUTOMATED_PREDICATE = "origin = 'automated'"


class NDNERecord(SQLModel, table=True):
    __tablename__ = "ndne_record"
    __table_args__ = (
        # At most one automated record per contract and period.
        Index(
            AUTOMATED_PERIOD_INDEX,
            "contract_id",
            "period",
            unique=True,
            sqlite_where=text(AUTOMATED_PREDICATE),
            postgresql_where=text(AUTOMATED_PREDICATE),
        ),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    contract_id: int = Field(foreign_key="contract.id", index=True)
    period: Period = Field(sa_type=String(8))
    static_level: float
    dynamic_level: float
    measured_on: date = Field(index=True)
    technician_id: str
    responsible_name: Optional[str] = None
    origin: Origin = Field(default=Origin.MANUAL, sa_type=String(16))
    original_origin: Optional[Origin] = Field(default=None, sa_type=String(16))
    created_at: datetime = Field(default_factory=utcnow)
    created_by: str
    edited_at: Optional[datetime] = None
    edited_by: Optional[str] = None
