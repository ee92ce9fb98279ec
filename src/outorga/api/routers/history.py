"""Monitoring history endpoint."""
from fastapi import APIRouter, Depends
from outorga.api.deps import get_uow
from outorga.api.schemas.history import MonitoringHistory
from outorga.infra.db.uow import UnitOfWork
from outorga.services.history_service import HistoryService

router = APIRouter(prefix="/licenses/{license_id}/history", tags=["history"])


@router.get("", response_model=MonitoringHistory)
def get_history(license_id: int, uow: UnitOfWork = Depends(get_uow)) -> MonitoringHistory:
    return HistoryService(uow).get_history(license_id)
