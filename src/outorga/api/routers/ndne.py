"""ND/NE record endpoints."""
from fastapi import APIRouter, Depends, Query
from outorga.api.deps import get_actor, get_uow
from outorga.api.schemas.ndne import (
    NDNECreate, NDNEFilters, NDNEList, NDNERead, NDNEUpdate, ValidationReport,
)
from outorga.domain.enums import Origin, Period
from outorga.infra.db.uow import UnitOfWork
from outorga.services.ndne_service import NDNEService

router = APIRouter(tags=["ndne"])


@router.get("/contracts/{contract_id}/ndne", response_model=NDNEList)
def list_records(
    contract_id: int,
    period: Period | None = None,
    origin: Origin | None = None,
    year: int | None = Query(default=None, ge=1900, le=9999),
    uow: UnitOfWork = Depends(get_uow),
) -> NDNEList:
    filters = NDNEFilters(period=period, origin=origin, year=year)
    return NDNEService(uow).list_records(contract_id, filters)


@router.post("/contracts/{contract_id}/ndne", response_model=NDNERead, status_code=201)
def create_record(
    contract_id: int,
    payload: NDNECreate,
    actor: str = Depends(get_actor),
    uow: UnitOfWork = Depends(get_uow),
) -> NDNERead:
    return NDNEService(uow).create_record(contract_id, payload, actor=actor)


@router.get("/contracts/{contract_id}/ndne/automated", response_model=NDNERead | None)
def find_automated_record(
    contract_id: int, period: Period, uow: UnitOfWork = Depends(get_uow),
) -> NDNERead | None:
    return NDNEService(uow).find_automated_record(contract_id, period)


@router.post("/ndne/validate", response_model=ValidationReport)
def validate_record(payload: NDNECreate, uow: UnitOfWork = Depends(get_uow)) -> ValidationReport:
    result = NDNEService(uow).validate(payload)
    return ValidationReport(valid=result.is_valid, errors=result.errors)


@router.get("/ndne/{record_id}", response_model=NDNERead)
def get_record(record_id: int, uow: UnitOfWork = Depends(get_uow)) -> NDNERead:
    return NDNEService(uow).get_record(record_id)


@router.patch("/ndne/{record_id}", response_model=NDNERead)
def update_record(
    record_id: int,
    payload: NDNEUpdate,
    actor: str = Depends(get_actor),
    uow: UnitOfWork = Depends(get_uow),
) -> NDNERead:
    return NDNEService(uow).update_record(record_id, payload, actor=actor)
