"""Repository for ND/NE records. No business logic; caller owns the transaction."""
from __future__ import annotations
from datetime import date
from sqlmodel import Session, select, desc
from outorga.domain.enums import Origin, Period
from outorga.models.ndne import NDNERecord


class NDNERepository:
    def __init__(self, session: Session) -> None:
        self._s = session

    def get_by_id(self, record_id: int) -> NDNERecord | None:
        return self._s.get(NDNERecord, record_id)

    def list_by_contract(
        self,
        contract_id: int,
        *,
        period: Period | None = None,
        origin: Origin | None = None,
        year: int | None = None,
    ) -> list[NDNERecord]:
        stmt = select(NDNERecord).where(NDNERecord.contract_id == contract_id)
        if period is not None:
            stmt = stmt.where(NDNERecord.period == period)
        if origin is not None:
            stmt = stmt.where(NDNERecord.origin == origin)
        if year is not None:
            stmt = stmt.where(
                NDNERecord.measured_on >= date(year, 1, 1),
                NDNERecord.measured_on <= date(year, 12, 31),
            )
        stmt = stmt.order_by(desc(NDNERecord.measured_on), desc(NDNERecord.id))
        return list(self._s.exec(stmt).all())

    def find_automated(self, contract_id: int, period: Period) -> NDNERecord | None:
        return self._s.exec(
            select(NDNERecord).where(
                NDNERecord.contract_id == contract_id,
                NDNERecord.period == period,
                NDNERecord.origin == Origin.AUTOMATED,
            )
        ).first()

    def create(self, *, contract_id: int, created_by: str, **values) -> NDNERecord:
        record = NDNERecord(contract_id=contract_id, created_by=created_by, **values)
        self._s.add(record)
        self._s.flush()  # surfaces the automated-period unique index before commit
        return record

    def save(self, record: NDNERecord) -> NDNERecord:
        self._s.add(record)
        self._s.flush()
        return record
