"""ND/NE use-case service.

Every write goes through ``validate_ndne`` first; nothing reaches the store
while a field error is outstanding. Automated-origin records are unique per
contract and period: a second one is refused with
``DuplicateAutomatedRecordError`` so the caller edits the existing record
instead. The store carries a partial unique index for the same rule, which
catches concurrent creates that both passed the read-side check.
"""
from __future__ import annotations
import logging
from datetime import datetime, timezone
from sqlalchemy.exc import IntegrityError
from outorga.domain.enums import Origin, Period
from outorga.domain.exceptions import DuplicateAutomatedRecordError, NotFoundError
from outorga.domain.ndne_rules import NDNEFields, ValidationResult, validate_ndne
from outorga.infra.db.uow import UnitOfWork, storage_errors
from outorga.infra.db.repositories.contract_repository import ContractRepository
from outorga.infra.db.repositories.ndne_repository import NDNERepository
from outorga.models.ndne import NDNERecord
from outorga.api.schemas.ndne import NDNECreate, NDNEFilters, NDNEList, NDNERead, NDNEUpdate

logger = logging.getLogger(__name__)

_FIELD_NAMES = ("period", "technician_id", "measured_on", "static_level", "dynamic_level", "responsible_name")


def _fields_of(payload: NDNECreate | NDNEUpdate) -> NDNEFields:
    return NDNEFields(**{name: getattr(payload, name) for name in _FIELD_NAMES})


def _merged_fields(record: NDNERecord, payload: NDNEUpdate) -> NDNEFields:
    merged = {name: getattr(record, name) for name in _FIELD_NAMES}
    for name, value in payload.model_dump(exclude_unset=True).items():
        if value is not None:
            merged[name] = value
    return NDNEFields(**merged)


class NDNEService:
    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def _ensure_contract(self, contract_id: int) -> None:
        if ContractRepository(self._uow.session).get_by_id(contract_id) is None:
            raise NotFoundError(f"Contract {contract_id} not found")

    def validate(self, payload: NDNECreate | NDNEUpdate) -> ValidationResult:
        return validate_ndne(_fields_of(payload))

    def list_records(self, contract_id: int, filters: NDNEFilters | None = None) -> NDNEList:
        filters = filters or NDNEFilters()
        with storage_errors("ND/NE list"):
            self._ensure_contract(contract_id)
            items = NDNERepository(self._uow.session).list_by_contract(
                contract_id, period=filters.period, origin=filters.origin, year=filters.year,
            )
            return NDNEList(items=[NDNERead.model_validate(r) for r in items], total=len(items))

    def get_record(self, record_id: int) -> NDNERead:
        with storage_errors("ND/NE read"):
            record = NDNERepository(self._uow.session).get_by_id(record_id)
            if record is None:
                raise NotFoundError(f"ND/NE record {record_id} not found")
            return NDNERead.model_validate(record)

    def find_automated_record(self, contract_id: int, period: Period) -> NDNERead | None:
        with storage_errors("ND/NE read"):
            self._ensure_contract(contract_id)
            record = NDNERepository(self._uow.session).find_automated(contract_id, period)
            return NDNERead.model_validate(record) if record else None

    def create_record(self, contract_id: int, payload: NDNECreate, *, actor: str) -> NDNERead:
        result = self.validate(payload)
        result.raise_if_invalid()
        values = result.values
        period = values["period"]

        repo = NDNERepository(self._uow.session)
        with storage_errors("ND/NE create"):
            self._ensure_contract(contract_id)
            if repo.find_automated(contract_id, period) is not None:
                logger.info("Refused ND/NE create: automated record exists (contract=%s, period=%s)",
                            contract_id, period.value)
                raise DuplicateAutomatedRecordError(contract_id, period.value)
            try:
                record = repo.create(
                    contract_id=contract_id,
                    created_by=actor,
                    origin=payload.origin,
                    original_origin=None,
                    **values,
                )
            except IntegrityError as exc:
                if payload.origin != Origin.AUTOMATED:
                    raise
                self._uow.rollback()
                logger.info("Concurrent automated ND/NE create lost the race (contract=%s, period=%s)",
                            contract_id, period.value)
                raise DuplicateAutomatedRecordError(contract_id, period.value) from exc
            self._uow.commit()
            logger.info("Created ND/NE record %s (contract=%s, period=%s, origin=%s)",
                        record.id, contract_id, period.value, payload.origin.value)
            return NDNERead.model_validate(record)

    def update_record(self, record_id: int, payload: NDNEUpdate, *, actor: str) -> NDNERead:
        repo = NDNERepository(self._uow.session)
        with storage_errors("ND/NE update"):
            record = repo.get_by_id(record_id)
        if record is None:
            raise NotFoundError(f"ND/NE record {record_id} not found")

        result = validate_ndne(_merged_fields(record, payload))
        result.raise_if_invalid()

        with storage_errors("ND/NE update"):
            for name, value in result.values.items():
                setattr(record, name, value)
            # The pre-edit origin is captured once, on the first edit.
            record.original_origin = record.original_origin or record.origin
            record.origin = Origin.MANUAL
            record.edited_at = datetime.now(timezone.utc)
            record.edited_by = actor
            repo.save(record)
            self._uow.commit()
            logger.info("Updated ND/NE record %s (original origin=%s)", record.id, record.original_origin)
            return NDNERead.model_validate(record)
