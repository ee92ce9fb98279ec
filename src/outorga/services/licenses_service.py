"""Licences use-case service. Owns ORM→DTO mapping; routers never see ORM objects."""
from __future__ import annotations
import logging
from datetime import date
from outorga.domain.enums import Priority
from outorga.domain.exceptions import ConflictError, NotFoundError
from outorga.infra.db.uow import UnitOfWork, storage_errors
from outorga.infra.db.repositories.license_repository import LicenseRepository
from outorga.api.schemas.licenses import LicenseCreate, LicenseList, LicenseRead

logger = logging.getLogger(__name__)


class LicensesService:
    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def create_license(self, payload: LicenseCreate) -> LicenseRead:
        repo = LicenseRepository(self._uow.session)
        with storage_errors("license create"):
            if repo.get_by_number(payload.license_number) is not None:
                raise ConflictError(f"License number {payload.license_number} already registered")
            lic = repo.create(**payload.model_dump())
            self._uow.commit()
            logger.info("Created license %s (%s)", lic.id, lic.license_number)
            return LicenseRead.model_validate(lic)

    def get_license(self, license_id: int) -> LicenseRead:
        with storage_errors("license read"):
            lic = LicenseRepository(self._uow.session).get_by_id(license_id)
            if lic is None:
                raise NotFoundError(f"License {license_id} not found")
            return LicenseRead.model_validate(lic)

    def list_licenses(
        self,
        *,
        limit: int = 100,
        offset: int = 0,
        status: str | None = None,
        priority: Priority | None = None,
        act_type: str | None = None,
        municipality: str | None = None,
        valid_from: date | None = None,
        valid_until: date | None = None,
    ) -> LicenseList:
        filters = dict(
            status=status, priority=priority, act_type=act_type,
            municipality=municipality, valid_from=valid_from, valid_until=valid_until,
        )
        repo = LicenseRepository(self._uow.session)
        with storage_errors("license list"):
            items = repo.list_all(limit=limit, offset=offset, **filters)
            total = repo.count(**filters)
            return LicenseList(items=[LicenseRead.model_validate(i) for i in items], total=total)
