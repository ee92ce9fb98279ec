"""Licence endpoints."""
from datetime import date
from fastapi import APIRouter, Depends, Query
from outorga.api.deps import get_uow
from outorga.api.schemas.licenses import LicenseCreate, LicenseList, LicenseRead
from outorga.domain.enums import Priority
from outorga.infra.db.uow import UnitOfWork
from outorga.services.licenses_service import LicensesService

router = APIRouter(prefix="/licenses", tags=["licenses"])


@router.post("", response_model=LicenseRead, status_code=201)
def create_license(payload: LicenseCreate, uow: UnitOfWork = Depends(get_uow)) -> LicenseRead:
    return LicensesService(uow).create_license(payload)


@router.get("", response_model=LicenseList)
def list_licenses(
    limit: int = Query(default=100, ge=1, le=500),
    offset: int = Query(default=0, ge=0),
    status: str | None = None,
    priority: Priority | None = None,
    act_type: str | None = None,
    municipality: str | None = None,
    valid_from: date | None = None,
    valid_until: date | None = None,
    uow: UnitOfWork = Depends(get_uow),
) -> LicenseList:
    return LicensesService(uow).list_licenses(
        limit=limit, offset=offset, status=status, priority=priority, act_type=act_type,
        municipality=municipality, valid_from=valid_from, valid_until=valid_until,
    )


@router.get("/{license_id}", response_model=LicenseRead)
def get_license(license_id: int, uow: UnitOfWork = Depends(get_uow)) -> LicenseRead:
    return LicensesService(uow).get_license(license_id)
