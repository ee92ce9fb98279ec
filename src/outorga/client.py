"""Typed HTTP client for callers of the API (report generators, scripts, CLI).

Only imports from ``outorga.api.schemas``; never ORM, never DB.
"""
from __future__ import annotations

from typing import Any

import httpx

from outorga.api.schemas.licenses import LicenseCreate, LicenseRead, LicenseList
from outorga.api.schemas.contracts import ContractCreate, ContractRead, ContractList
from outorga.api.schemas.readings import ReadingCreate, ReadingRead, ReadingList
from outorga.api.schemas.history import MonitoringHistory
from outorga.api.schemas.analyses import (
    AnalysisCreate, AnalysisList, AnalysisRead, AnalysisUpdate, ParameterGroup,
)
from outorga.api.schemas.ndne import (
    NDNECreate, NDNEFilters, NDNEList, NDNERead, NDNEUpdate, ValidationReport,
)
from outorga.config import settings


class APIError(Exception):
    """Raised when the backend returns a 4xx/5xx response."""

    def __init__(self, status_code: int, detail: Any, errors: dict[str, str] | None = None) -> None:
        self.status_code = status_code
        self.detail = detail
        self.errors = errors or {}
        super().__init__(f"[{status_code}] {detail}")


class OutorgaClient:
    """One method per backend endpoint.  All return pure Pydantic DTOs.

    Pass ``http`` to reuse an existing ``httpx.Client`` (a FastAPI
    ``TestClient`` works too); otherwise one is built for ``base_url``.
    """

    def __init__(
        self,
        base_url: str | None = None,
        *,
        user_id: str | None = None,
        http: httpx.Client | None = None,
    ) -> None:
        self._client = http or httpx.Client(base_url=base_url or settings.API_BASE_URL, timeout=30.0)
        self._headers = {"X-User-Id": user_id} if user_id else {}

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _raise_for_status(self, resp: httpx.Response) -> None:
        if resp.is_success:
            return
        try:
            body = resp.json()
        except ValueError:
            raise APIError(resp.status_code, resp.text) from None
        raise APIError(resp.status_code, body.get("detail", resp.text), body.get("errors"))

    # ------------------------------------------------------------------
    # Licences & contracts
    # ------------------------------------------------------------------

    def create_license(self, payload: LicenseCreate) -> LicenseRead:
        resp = self._client.post("/licenses", json=payload.model_dump(mode="json"))
        self._raise_for_status(resp)
        return LicenseRead.model_validate(resp.json())

    def list_licenses(self, limit: int = 100, offset: int = 0, **filters: Any) -> LicenseList:
        params = {"limit": limit, "offset": offset}
        params.update({k: v for k, v in filters.items() if v is not None})
        resp = self._client.get("/licenses", params=params)
        self._raise_for_status(resp)
        return LicenseList.model_validate(resp.json())

    def get_license(self, license_id: int) -> LicenseRead:
        resp = self._client.get(f"/licenses/{license_id}")
        self._raise_for_status(resp)
        return LicenseRead.model_validate(resp.json())

    def create_contract(self, license_id: int, payload: ContractCreate) -> ContractRead:
        resp = self._client.post(f"/licenses/{license_id}/contracts", json=payload.model_dump(mode="json"))
        self._raise_for_status(resp)
        return ContractRead.model_validate(resp.json())

    def list_contracts(self, license_id: int) -> ContractList:
        resp = self._client.get(f"/licenses/{license_id}/contracts")
        self._raise_for_status(resp)
        return ContractList.model_validate(resp.json())

    # ------------------------------------------------------------------
    # Readings & history
    # ------------------------------------------------------------------

    def submit_reading(self, license_id: int, payload: ReadingCreate) -> ReadingRead:
        resp = self._client.post(
            f"/licenses/{license_id}/readings",
            json=payload.model_dump(mode="json", exclude_none=True),
            headers=self._headers,
        )
        self._raise_for_status(resp)
        return ReadingRead.model_validate(resp.json())

    def finalize_reading(self, reading_id: int) -> ReadingRead:
        resp = self._client.post(f"/readings/{reading_id}/finalize")
        self._raise_for_status(resp)
        return ReadingRead.model_validate(resp.json())

    def list_readings(self, license_id: int, year: int | None = None) -> ReadingList:
        params = {"year": year} if year is not None else {}
        resp = self._client.get(f"/licenses/{license_id}/readings", params=params)
        self._raise_for_status(resp)
        return ReadingList.model_validate(resp.json())

    def get_history(self, license_id: int) -> MonitoringHistory:
        resp = self._client.get(f"/licenses/{license_id}/history")
        self._raise_for_status(resp)
        return MonitoringHistory.model_validate(resp.json())

    # ------------------------------------------------------------------
    # ND/NE
    # ------------------------------------------------------------------

    def list_ndne(self, contract_id: int, filters: NDNEFilters | None = None) -> NDNEList:
        params = filters.model_dump(mode="json", exclude_none=True) if filters else {}
        resp = self._client.get(f"/contracts/{contract_id}/ndne", params=params)
        self._raise_for_status(resp)
        return NDNEList.model_validate(resp.json())

    def create_ndne(self, contract_id: int, payload: NDNECreate) -> NDNERead:
        resp = self._client.post(
            f"/contracts/{contract_id}/ndne",
            json=payload.model_dump(mode="json", exclude_none=True),
            headers=self._headers,
        )
        self._raise_for_status(resp)
        return NDNERead.model_validate(resp.json())

    def update_ndne(self, record_id: int, payload: NDNEUpdate) -> NDNERead:
        resp = self._client.patch(
            f"/ndne/{record_id}",
            json=payload.model_dump(mode="json", exclude_none=True),
            headers=self._headers,
        )
        self._raise_for_status(resp)
        return NDNERead.model_validate(resp.json())

    def get_ndne(self, record_id: int) -> NDNERead:
        resp = self._client.get(f"/ndne/{record_id}")
        self._raise_for_status(resp)
        return NDNERead.model_validate(resp.json())

    def find_automated_ndne(self, contract_id: int, period: str) -> NDNERead | None:
        resp = self._client.get(f"/contracts/{contract_id}/ndne/automated", params={"period": period})
        self._raise_for_status(resp)
        body = resp.json()
        return NDNERead.model_validate(body) if body is not None else None

    def validate_ndne(self, payload: NDNECreate) -> ValidationReport:
        resp = self._client.post("/ndne/validate", json=payload.model_dump(mode="json", exclude_none=True))
        self._raise_for_status(resp)
        return ValidationReport.model_validate(resp.json())

    # ------------------------------------------------------------------
    # Water analyses
    # ------------------------------------------------------------------

    def list_analysis_parameters(self) -> list[ParameterGroup]:
        resp = self._client.get("/analysis-parameters")
        self._raise_for_status(resp)
        return [ParameterGroup.model_validate(g) for g in resp.json()]

    def create_analysis(self, contract_id: int, payload: AnalysisCreate) -> AnalysisRead:
        resp = self._client.post(
            f"/contracts/{contract_id}/analyses",
            json=payload.model_dump(mode="json", exclude_none=True),
            headers=self._headers,
        )
        self._raise_for_status(resp)
        return AnalysisRead.model_validate(resp.json())

    def list_analyses(self, contract_id: int) -> AnalysisList:
        resp = self._client.get(f"/contracts/{contract_id}/analyses")
        self._raise_for_status(resp)
        return AnalysisList.model_validate(resp.json())

    def get_analysis(self, analysis_id: int) -> AnalysisRead:
        resp = self._client.get(f"/analyses/{analysis_id}")
        self._raise_for_status(resp)
        return AnalysisRead.model_validate(resp.json())

    def update_analysis(self, analysis_id: int, payload: AnalysisUpdate) -> AnalysisRead:
        resp = self._client.patch(
            f"/analyses/{analysis_id}",
            json=payload.model_dump(mode="json", exclude_unset=True),
            headers=self._headers,
        )
        self._raise_for_status(resp)
        return AnalysisRead.model_validate(resp.json())

    # ------------------------------------------------------------------
    # Health
    # ------------------------------------------------------------------

    def health(self) -> dict:
        resp = self._client.get("/health")
        self._raise_for_status(resp)
        return resp.json()
