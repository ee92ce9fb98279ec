"""Repository for MeterReading records. No business logic."""
from __future__ import annotations
from sqlalchemy import and_, or_
from sqlmodel import Session, select, desc
from outorga.domain.enums import ReadingStatus
from outorga.models.monitoring import MeterReading


class ReadingRepository:
    def __init__(self, session: Session) -> None:
        self._s = session

    def get_by_id(self, reading_id: int) -> MeterReading | None:
        return self._s.get(MeterReading, reading_id)

    def list_by_license(
        self, license_id: int, *, year: int | None = None, status: ReadingStatus | None = None,
    ) -> list[MeterReading]:
        stmt = select(MeterReading).where(MeterReading.license_id == license_id)
        if year is not None:
            stmt = stmt.where(MeterReading.year == year)
        if status is not None:
            stmt = stmt.where(MeterReading.status == status)
        stmt = stmt.order_by(
            desc(MeterReading.year), desc(MeterReading.month),
            desc(MeterReading.created_at), desc(MeterReading.id),
        )
        return list(self._s.exec(stmt).all())

    def list_finalized(self, license_id: int) -> list[MeterReading]:
        """Finalized readings of a licence, most recently created first."""
        return list(self._s.exec(
            select(MeterReading)
            .where(
                MeterReading.license_id == license_id,
                MeterReading.status == ReadingStatus.FINALIZED,
            )
            .order_by(desc(MeterReading.created_at), desc(MeterReading.id))
        ).all())

    def latest_for_month(self, license_id: int, month: int, year: int) -> MeterReading | None:
        return self._s.exec(
            select(MeterReading)
            .where(
                MeterReading.license_id == license_id,
                MeterReading.month == month,
                MeterReading.year == year,
            )
            .order_by(desc(MeterReading.created_at), desc(MeterReading.id))
        ).first()

    def latest_before(self, license_id: int, month: int, year: int) -> MeterReading | None:
        """Most recent reading strictly earlier than (month, year)."""
        return self._s.exec(
            select(MeterReading)
            .where(
                MeterReading.license_id == license_id,
                or_(
                    MeterReading.year < year,
                    and_(MeterReading.year == year, MeterReading.month < month),
                ),
            )
            .order_by(
                desc(MeterReading.year), desc(MeterReading.month),
                desc(MeterReading.created_at), desc(MeterReading.id),
            )
        ).first()

    def create(self, **values) -> MeterReading:
        reading = MeterReading(**values)
        self._s.add(reading)
        self._s.flush()
        return reading
