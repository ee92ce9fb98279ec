"""Monitoring history use-case service.

Rebuilds the 12-month reading window of a licence, anchored at the month of
its earliest finalized reading. Months without a finalized reading stay in the
window with every value set to None.
"""
from __future__ import annotations
from outorga.domain.exceptions import NotFoundError
from outorga.domain.seasons import HISTORY_MONTHS, month_label, month_window
from outorga.infra.db.uow import UnitOfWork, storage_errors
from outorga.infra.db.repositories.license_repository import LicenseRepository
from outorga.infra.db.repositories.reading_repository import ReadingRepository
from outorga.api.schemas.history import MonitoringHistory, MonthlyReading


class HistoryService:
    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def _ensure_license(self, license_id: int) -> None:
        if LicenseRepository(self._uow.session).get_by_id(license_id) is None:
            raise NotFoundError(f"License {license_id} not found")

    def reconstruct_history(self, license_id: int) -> list[MonthlyReading] | None:
        """Return the 12-month window, or None when monitoring has not started."""
        with storage_errors("history read"):
            self._ensure_license(license_id)
            readings = ReadingRepository(self._uow.session).list_finalized(license_id)

        if not readings:
            return None

        anchor_year, anchor_month = min((r.year, r.month) for r in readings)

        # Newest-created first, so the first row seen per month is authoritative.
        by_month = {}
        for reading in readings:
            by_month.setdefault((reading.month, reading.year), reading)

        months = []
        for month, year in month_window(anchor_month, anchor_year, HISTORY_MONTHS):
            reading = by_month.get((month, year))
            months.append(MonthlyReading(
                month_label=month_label(month, year),
                month=month,
                year=year,
                hydrometer=reading.hydrometer_value if reading else None,
                hour_meter=reading.hour_meter_value if reading else None,
                dynamic_level=reading.dynamic_level if reading else None,
                static_level=reading.static_level if reading else None,
            ))
        return months

    def get_history(self, license_id: int) -> MonitoringHistory:
        months = self.reconstruct_history(license_id)
        if months is None:
            return MonitoringHistory(license_id=license_id, started=False)
        return MonitoringHistory(
            license_id=license_id,
            started=True,
            anchor_month=months[0].month,
            anchor_year=months[0].year,
            months=months,
        )
