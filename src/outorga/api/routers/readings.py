"""Monthly meter reading endpoints."""
from fastapi import APIRouter, Depends
from outorga.api.deps import get_actor, get_uow
from outorga.api.schemas.readings import ReadingCreate, ReadingList, ReadingRead
from outorga.domain.enums import ReadingStatus
from outorga.infra.db.uow import UnitOfWork
from outorga.services.readings_service import ReadingsService

router = APIRouter(tags=["readings"])


@router.post("/licenses/{license_id}/readings", response_model=ReadingRead, status_code=201)
def submit_reading(
    license_id: int,
    payload: ReadingCreate,
    actor: str = Depends(get_actor),
    uow: UnitOfWork = Depends(get_uow),
) -> ReadingRead:
    return ReadingsService(uow).submit_reading(license_id, payload, actor=actor)


@router.get("/licenses/{license_id}/readings", response_model=ReadingList)
def list_readings(
    license_id: int,
    year: int | None = None,
    status: ReadingStatus | None = None,
    uow: UnitOfWork = Depends(get_uow),
) -> ReadingList:
    return ReadingsService(uow).list_readings(license_id, year=year, status=status)


@router.get("/licenses/{license_id}/readings/current", response_model=ReadingRead | None)
def current_month_reading(license_id: int, uow: UnitOfWork = Depends(get_uow)) -> ReadingRead | None:
    return ReadingsService(uow).current_month_reading(license_id)


@router.post("/readings/{reading_id}/finalize", response_model=ReadingRead)
def finalize_reading(reading_id: int, uow: UnitOfWork = Depends(get_uow)) -> ReadingRead:
    return ReadingsService(uow).finalize_reading(reading_id)
