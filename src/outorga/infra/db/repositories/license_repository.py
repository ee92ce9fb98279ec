"""Repository for License records. No business logic; caller owns the transaction."""
from __future__ import annotations
from datetime import date
from sqlalchemy import func
from sqlmodel import Session, select, desc
from outorga.models.core import License


class LicenseRepository:
    def __init__(self, session: Session) -> None:
        self._s = session

    def get_by_id(self, license_id: int) -> License | None:
        return self._s.get(License, license_id)

    def get_by_number(self, license_number: str) -> License | None:
        return self._s.exec(
            select(License).where(License.license_number == license_number)
        ).first()

    def _filtered(self, stmt, *, status, priority, act_type, municipality, valid_from, valid_until):
        if status:
            stmt = stmt.where(License.status == status)
        if priority:
            stmt = stmt.where(License.priority == priority)
        if act_type:
            stmt = stmt.where(License.act_type == act_type)
        if municipality:
            stmt = stmt.where(License.municipality.ilike(f"%{municipality}%"))
        if valid_from:
            stmt = stmt.where(License.start_date >= valid_from)
        if valid_until:
            stmt = stmt.where(License.end_date <= valid_until)
        return stmt

    def list_all(
        self,
        *,
        limit: int = 100,
        offset: int = 0,
        status: str | None = None,
        priority: str | None = None,
        act_type: str | None = None,
        municipality: str | None = None,
        valid_from: date | None = None,
        valid_until: date | None = None,
    ) -> list[License]:
        stmt = self._filtered(
            select(License),
            status=status, priority=priority, act_type=act_type,
            municipality=municipality, valid_from=valid_from, valid_until=valid_until,
        )
        stmt = stmt.order_by(desc(License.created_at), desc(License.id)).offset(offset).limit(limit)
        return list(self._s.exec(stmt).all())

    def count(
        self,
        *,
        status: str | None = None,
        priority: str | None = None,
        act_type: str | None = None,
        municipality: str | None = None,
        valid_from: date | None = None,
        valid_until: date | None = None,
    ) -> int:
        stmt = self._filtered(
            select(func.count()).select_from(License),
            status=status, priority=priority, act_type=act_type,
            municipality=municipality, valid_from=valid_from, valid_until=valid_until,
        )
        return self._s.exec(stmt).one()

    def create(self, **values) -> License:
        lic = License(**values)
        self._s.add(lic)
        self._s.flush()  # get generated PK without committing
        return lic
