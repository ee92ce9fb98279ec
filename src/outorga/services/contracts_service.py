"""Contracts use-case service."""
from __future__ import annotations
import logging
from outorga.domain.exceptions import NotFoundError
from outorga.infra.db.uow import UnitOfWork, storage_errors
from outorga.infra.db.repositories.contract_repository import ContractRepository
from outorga.infra.db.repositories.license_repository import LicenseRepository
from outorga.api.schemas.contracts import ContractCreate, ContractList, ContractRead

logger = logging.getLogger(__name__)


class ContractsService:
    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def _ensure_license(self, license_id: int) -> None:
        if LicenseRepository(self._uow.session).get_by_id(license_id) is None:
            raise NotFoundError(f"License {license_id} not found")

    def create_contract(self, license_id: int, payload: ContractCreate) -> ContractRead:
        with storage_errors("contract create"):
            self._ensure_license(license_id)
            contract = ContractRepository(self._uow.session).create(
                license_id=license_id, **payload.model_dump(),
            )
            self._uow.commit()
            logger.info("Created contract %s for license %s", contract.id, license_id)
            return ContractRead.model_validate(contract)

    def get_contract(self, contract_id: int) -> ContractRead:
        with storage_errors("contract read"):
            contract = ContractRepository(self._uow.session).get_by_id(contract_id)
            if contract is None:
                raise NotFoundError(f"Contract {contract_id} not found")
            return ContractRead.model_validate(contract)

    def list_contracts(self, license_id: int) -> ContractList:
        with storage_errors("contract list"):
            self._ensure_license(license_id)
            items = ContractRepository(self._uow.session).list_by_license(license_id)
            return ContractList(items=[ContractRead.model_validate(c) for c in items], total=len(items))
