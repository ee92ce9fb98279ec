"""Monthly meter readings use-case service.

A submitted reading starts as a draft. Consumption and operating hours are
derived from the previous reading of the licence, or from the values the
holder declared when there is no earlier reading. Only finalized readings
count for the monitoring history.
"""
from __future__ import annotations
import logging
from datetime import date, datetime, timezone
from outorga.domain.enums import ReadingStatus
from outorga.domain.exceptions import ConflictError, NotFoundError
from outorga.infra.db.uow import UnitOfWork, storage_errors
from outorga.infra.db.repositories.license_repository import LicenseRepository
from outorga.infra.db.repositories.reading_repository import ReadingRepository
from outorga.api.schemas.readings import ReadingCreate, ReadingList, ReadingRead

logger = logging.getLogger(__name__)


def _delta(current: float, previous: float | None) -> float | None:
    return current - previous if previous is not None else None


class ReadingsService:
    def __init__(self, uow: UnitOfWork, *, today: date | None = None) -> None:
        self._uow = uow
        self._today = today

    def _current_date(self) -> date:
        return self._today or date.today()

    def _ensure_license(self, license_id: int) -> None:
        if LicenseRepository(self._uow.session).get_by_id(license_id) is None:
            raise NotFoundError(f"License {license_id} not found")

    def submit_reading(self, license_id: int, payload: ReadingCreate, *, actor: str) -> ReadingRead:
        today = self._current_date()
        reading_date = payload.reading_date or today
        month = payload.month or reading_date.month
        year = payload.year or reading_date.year

        repo = ReadingRepository(self._uow.session)
        with storage_errors("reading submit"):
            self._ensure_license(license_id)
            previous = repo.latest_before(license_id, month, year)
            hydrometer_previous = (
                previous.hydrometer_value
                if previous is not None and previous.hydrometer_value is not None
                else payload.hydrometer_declared
            )
            hour_meter_previous = (
                previous.hour_meter_value
                if previous is not None and previous.hour_meter_value is not None
                else payload.hour_meter_declared
            )
            reading = repo.create(
                license_id=license_id,
                month=month,
                year=year,
                status=ReadingStatus.DRAFT,
                reading_date=reading_date,
                hydrometer_previous=hydrometer_previous,
                hydrometer_value=payload.hydrometer_value,
                hydrometer_consumption=_delta(payload.hydrometer_value, hydrometer_previous),
                hour_meter_previous=hour_meter_previous,
                hour_meter_value=payload.hour_meter_value,
                hour_meter_hours=_delta(payload.hour_meter_value, hour_meter_previous),
                dynamic_level=payload.dynamic_level,
                static_level=payload.static_level,
                notes=payload.notes,
                user_id=actor,
            )
            self._uow.commit()
            logger.info("Submitted reading %s for license %s (%02d/%d)", reading.id, license_id, month, year)
            return ReadingRead.model_validate(reading)

    def finalize_reading(self, reading_id: int) -> ReadingRead:
        repo = ReadingRepository(self._uow.session)
        with storage_errors("reading finalize"):
            reading = repo.get_by_id(reading_id)
            if reading is None:
                raise NotFoundError(f"Reading {reading_id} not found")
            if reading.status == ReadingStatus.FINALIZED:
                raise ConflictError(f"Reading {reading_id} is already finalized")
            reading.status = ReadingStatus.FINALIZED
            reading.updated_at = datetime.now(timezone.utc)
            self._uow.session.add(reading)
            self._uow.commit()
            logger.info("Finalized reading %s", reading_id)
            return ReadingRead.model_validate(reading)

    def list_readings(
        self, license_id: int, *, year: int | None = None, status: ReadingStatus | None = None,
    ) -> ReadingList:
        with storage_errors("reading list"):
            self._ensure_license(license_id)
            items = ReadingRepository(self._uow.session).list_by_license(license_id, year=year, status=status)
            return ReadingList(items=[ReadingRead.model_validate(r) for r in items], total=len(items))

    def current_month_reading(self, license_id: int) -> ReadingRead | None:
        today = self._current_date()
        with storage_errors("reading read"):
            self._ensure_license(license_id)
            reading = ReadingRepository(self._uow.session).latest_for_month(license_id, today.month, today.year)
            return ReadingRead.model_validate(reading) if reading else None
