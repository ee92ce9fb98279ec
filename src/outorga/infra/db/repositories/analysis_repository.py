"""Repository for water analyses. No business logic."""
from __future__ import annotations
from sqlmodel import Session, select, desc
from outorga.models.analysis import WaterAnalysis


class AnalysisRepository:
    def __init__(self, session: Session) -> None:
        self._s = session

    def get_by_id(self, analysis_id: int) -> WaterAnalysis | None:
        return self._s.get(WaterAnalysis, analysis_id)

    def list_by_contract(self, contract_id: int) -> list[WaterAnalysis]:
        return list(self._s.exec(
            select(WaterAnalysis)
            .where(WaterAnalysis.contract_id == contract_id)
            .order_by(desc(WaterAnalysis.created_at), desc(WaterAnalysis.id))
        ).all())

    def create(self, **values) -> WaterAnalysis:
        analysis = WaterAnalysis(**values)
        self._s.add(analysis)
        self._s.flush()
        return analysis

    def save(self, analysis: WaterAnalysis) -> WaterAnalysis:
        self._s.add(analysis)
        self._s.flush()
        return analysis
