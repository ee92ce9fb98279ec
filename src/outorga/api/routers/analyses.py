"""Water analysis endpoints."""
from fastapi import APIRouter, Depends
from outorga.api.deps import get_actor, get_uow
from outorga.api.schemas.analyses import (
    AnalysisCreate, AnalysisList, AnalysisRead, AnalysisUpdate, ParameterGroup,
)
from outorga.infra.db.uow import UnitOfWork
from outorga.services.analysis_service import AnalysisService, parameter_catalog

router = APIRouter(tags=["analyses"])


@router.get("/analysis-parameters", response_model=list[ParameterGroup])
def list_parameters() -> list[ParameterGroup]:
    return parameter_catalog()


@router.post("/contracts/{contract_id}/analyses", response_model=AnalysisRead, status_code=201)
def create_analysis(
    contract_id: int,
    payload: AnalysisCreate,
    actor: str = Depends(get_actor),
    uow: UnitOfWork = Depends(get_uow),
) -> AnalysisRead:
    return AnalysisService(uow).create_analysis(contract_id, payload, actor=actor)


@router.get("/contracts/{contract_id}/analyses", response_model=AnalysisList)
def list_analyses(contract_id: int, uow: UnitOfWork = Depends(get_uow)) -> AnalysisList:
    return AnalysisService(uow).list_analyses(contract_id)


@router.get("/analyses/{analysis_id}", response_model=AnalysisRead)
def get_analysis(analysis_id: int, uow: UnitOfWork = Depends(get_uow)) -> AnalysisRead:
    return AnalysisService(uow).get_analysis(analysis_id)


@router.patch("/analyses/{analysis_id}", response_model=AnalysisRead)
def update_analysis(
    analysis_id: int,
    payload: AnalysisUpdate,
    actor: str = Depends(get_actor),
    uow: UnitOfWork = Depends(get_uow),
) -> AnalysisRead:
    return AnalysisService(uow).update_analysis(analysis_id, payload, actor=actor)
