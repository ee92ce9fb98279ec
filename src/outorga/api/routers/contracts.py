"""Contract endpoints."""
from fastapi import APIRouter, Depends
from outorga.api.deps import get_uow
from outorga.api.schemas.contracts import ContractCreate, ContractList, ContractRead
from outorga.infra.db.uow import UnitOfWork
from outorga.services.contracts_service import ContractsService

router = APIRouter(tags=["contracts"])


@router.post("/licenses/{license_id}/contracts", response_model=ContractRead, status_code=201)
def create_contract(
    license_id: int, payload: ContractCreate, uow: UnitOfWork = Depends(get_uow),
) -> ContractRead:
    return ContractsService(uow).create_contract(license_id, payload)


@router.get("/licenses/{license_id}/contracts", response_model=ContractList)
def list_contracts(license_id: int, uow: UnitOfWork = Depends(get_uow)) -> ContractList:
    return ContractsService(uow).list_contracts(license_id)


@router.get("/contracts/{contract_id}", response_model=ContractRead)
def get_contract(contract_id: int, uow: UnitOfWork = Depends(get_uow)) -> ContractRead:
    return ContractsService(uow).get_contract(contract_id)
