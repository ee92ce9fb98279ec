"""Repository for Contract records. No business logic; caller owns the transaction."""
from __future__ import annotations
from sqlmodel import Session, select
from outorga.models.core import Contract


class ContractRepository:
    def __init__(self, session: Session) -> None:
        self._s = session

    def get_by_id(self, contract_id: int) -> Contract | None:
        return self._s.get(Contract, contract_id)

    def list_by_license(self, license_id: int) -> list[Contract]:
        return list(self._s.exec(
            select(Contract).where(Contract.license_id == license_id).order_by(Contract.signed_on, Contract.id)
        ).all())

    def create(self, *, license_id: int, **values) -> Contract:
        contract = Contract(license_id=license_id, **values)
        self._s.add(contract)
        self._s.flush()
        return contract
