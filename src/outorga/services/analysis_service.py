"""Water analysis use-case service.

An analysis belongs to a contract and inherits its licence. Reported results
are checked against the parameter catalogue before anything is written;
errors come back keyed ``parameters.<key>`` like the ND/NE field errors.
"""
from __future__ import annotations
import logging
from datetime import datetime, timezone
from outorga.domain.analysis_parameters import PARAMETER_GROUPS, validate_results
from outorga.domain.exceptions import NotFoundError, ValidationError
from outorga.infra.db.uow import UnitOfWork, storage_errors
from outorga.infra.db.repositories.analysis_repository import AnalysisRepository
from outorga.infra.db.repositories.contract_repository import ContractRepository
from outorga.api.schemas.analyses import (
    AnalysisCreate, AnalysisList, AnalysisRead, AnalysisUpdate, ParameterGroup, ParameterRead,
)

logger = logging.getLogger(__name__)


def parameter_catalog() -> list[ParameterGroup]:
    return [
        ParameterGroup(group=name, parameters=[ParameterRead.model_validate(p) for p in params])
        for name, params in PARAMETER_GROUPS.items()
    ]


def _checked_results(results: dict) -> dict[str, float]:
    errors, values = validate_results(results)
    if errors:
        logger.info("Rejected analysis results: %s", ", ".join(sorted(errors)))
        raise ValidationError(errors)
    return values


class AnalysisService:
    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def create_analysis(self, contract_id: int, payload: AnalysisCreate, *, actor: str) -> AnalysisRead:
        results = _checked_results(payload.parameters)
        with storage_errors("analysis create"):
            contract = ContractRepository(self._uow.session).get_by_id(contract_id)
            if contract is None:
                raise NotFoundError(f"Contract {contract_id} not found")
            analysis = AnalysisRepository(self._uow.session).create(
                contract_id=contract_id,
                license_id=contract.license_id,
                created_by=actor,
                **payload.model_dump(exclude={"parameters"}),
                parameters=results,
            )
            self._uow.commit()
            logger.info("Recorded analysis %s for contract %s (%d results)",
                        analysis.id, contract_id, len(results))
            return AnalysisRead.model_validate(analysis)

    def update_analysis(self, analysis_id: int, payload: AnalysisUpdate, *, actor: str) -> AnalysisRead:
        changes = {k: v for k, v in payload.model_dump(exclude_unset=True).items() if v is not None}
        if "parameters" in changes:
            changes["parameters"] = _checked_results(changes["parameters"])

        repo = AnalysisRepository(self._uow.session)
        with storage_errors("analysis update"):
            analysis = repo.get_by_id(analysis_id)
            if analysis is None:
                raise NotFoundError(f"Analysis {analysis_id} not found")
            for name, value in changes.items():
                setattr(analysis, name, value)
            analysis.updated_at = datetime.now(timezone.utc)
            analysis.updated_by = actor
            repo.save(analysis)
            self._uow.commit()
            logger.info("Updated analysis %s (%s)", analysis_id, ", ".join(sorted(changes)) or "no changes")
            return AnalysisRead.model_validate(analysis)

    def get_analysis(self, analysis_id: int) -> AnalysisRead:
        with storage_errors("analysis read"):
            analysis = AnalysisRepository(self._uow.session).get_by_id(analysis_id)
            if analysis is None:
                raise NotFoundError(f"Analysis {analysis_id} not found")
            return AnalysisRead.model_validate(analysis)

    def list_analyses(self, contract_id: int) -> AnalysisList:
        with storage_errors("analysis list"):
            if ContractRepository(self._uow.session).get_by_id(contract_id) is None:
                raise NotFoundError(f"Contract {contract_id} not found")
            items = AnalysisRepository(self._uow.session).list_by_contract(contract_id)
            return AnalysisList(items=[AnalysisRead.model_validate(a) for a in items], total=len(items))
