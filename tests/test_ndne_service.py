"""Tests for ND/NE record creation, editing provenance and listing."""
from datetime import date
import pytest
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select
from outorga.api.schemas.ndne import NDNECreate, NDNEFilters, NDNEUpdate
from outorga.domain.enums import Origin, Period
from outorga.domain.exceptions import DuplicateAutomatedRecordError, NotFoundError, ValidationError
from outorga.infra.db.repositories.ndne_repository import NDNERepository
from outorga.infra.db.uow import UnitOfWork
from outorga.models.ndne import NDNERecord
from outorga.services.ndne_service import NDNEService


def _payload(**overrides) -> NDNECreate:
    values = dict(
        period="wet",
        technician_id="tech-1",
        measured_on="2024-01-15",
        static_level=8,
        dynamic_level=10,
    )
    values.update(overrides)
    return NDNECreate(**values)


def _create(contract_id, actor="user-1", **overrides):
    with UnitOfWork() as uow:
        return NDNEService(uow).create_record(contract_id, _payload(**overrides), actor=actor)


def _update(record_id, actor="user-2", **fields):
    with UnitOfWork() as uow:
        return NDNEService(uow).update_record(record_id, NDNEUpdate(**fields), actor=actor)


def _count(engine, contract_id, period, origin):
    with Session(engine) as s:
        return len(s.exec(select(NDNERecord).where(
            NDNERecord.contract_id == contract_id,
            NDNERecord.period == period,
            NDNERecord.origin == origin,
        )).all())


# --- create ---

def test_create_manual_record(use_test_engine, seeded):
    record = _create(seeded["contract_id"])
    assert record.id is not None
    assert record.origin is Origin.MANUAL
    assert record.original_origin is None
    assert record.created_by == "user-1"
    assert record.measured_on == date(2024, 1, 15)
    assert record.edited is False


def test_create_rejects_invalid_fields_without_writing(use_test_engine, seeded):
    with pytest.raises(ValidationError) as exc_info:
        _create(seeded["contract_id"], static_level=10, dynamic_level=8, period="dry")
    assert set(exc_info.value.errors) == {"dynamic_level", "measured_on"}
    assert _count(use_test_engine, seeded["contract_id"], Period.DRY, Origin.MANUAL) == 0


def test_create_for_unknown_contract(use_test_engine):
    with pytest.raises(NotFoundError):
        _create(9999)


def test_second_automated_record_for_period_is_rejected(use_test_engine, seeded):
    cid = seeded["contract_id"]
    _create(cid, origin=Origin.AUTOMATED)

    with pytest.raises(DuplicateAutomatedRecordError) as exc_info:
        _create(cid, origin=Origin.AUTOMATED)

    assert "period" in exc_info.value.errors
    assert _count(use_test_engine, cid, Period.WET, Origin.AUTOMATED) == 1


def test_manual_create_is_rejected_while_automated_exists(use_test_engine, seeded):
    cid = seeded["contract_id"]
    _create(cid, origin=Origin.AUTOMATED)
    with pytest.raises(DuplicateAutomatedRecordError):
        _create(cid)


def test_automated_records_in_other_period_are_independent(use_test_engine, seeded):
    cid = seeded["contract_id"]
    _create(cid, origin=Origin.AUTOMATED)
    dry = _create(cid, origin=Origin.AUTOMATED, period="dry", measured_on="2024-07-01")
    assert dry.period is Period.DRY


def test_several_manual_records_per_period_are_allowed(use_test_engine, seeded):
    cid = seeded["contract_id"]
    _create(cid)
    _create(cid, measured_on="2024-02-01")
    assert _count(use_test_engine, cid, Period.WET, Origin.MANUAL) == 2


def test_store_index_blocks_duplicate_automated_rows(use_test_engine, seeded):
    """A concurrent create that skipped the read-side check still cannot insert."""
    def row():
        return NDNERecord(
            contract_id=seeded["contract_id"], period=Period.WET, static_level=1.0,
            dynamic_level=2.0, measured_on=date(2024, 1, 1), technician_id="t",
            origin=Origin.AUTOMATED, created_by="intake",
        )

    with Session(use_test_engine) as s:
        s.add(row())
        s.commit()
        s.add(row())
        with pytest.raises(IntegrityError):
            s.commit()


def test_concurrent_automated_create_is_reported_as_duplicate(use_test_engine, seeded, monkeypatch):
    """The read-side check misses a row inserted by a parallel request."""
    cid = seeded["contract_id"]
    _create(cid, origin=Origin.AUTOMATED)
    monkeypatch.setattr(NDNERepository, "find_automated", lambda self, contract_id, period: None)

    with pytest.raises(DuplicateAutomatedRecordError) as exc_info:
        _create(cid, origin=Origin.AUTOMATED, measured_on="2024-02-01")

    assert "period" in exc_info.value.errors
    assert _count(use_test_engine, cid, Period.WET, Origin.AUTOMATED) == 1


# --- update ---

def test_first_edit_captures_automated_origin(use_test_engine, seeded):
    created = _create(seeded["contract_id"], origin=Origin.AUTOMATED)

    updated = _update(created.id, dynamic_level=12)

    assert updated.origin is Origin.MANUAL
    assert updated.original_origin is Origin.AUTOMATED
    assert updated.dynamic_level == 12.0
    assert updated.edited_by == "user-2"
    assert updated.edited_at is not None
    assert updated.edited is True


def test_second_edit_keeps_original_origin(use_test_engine, seeded):
    created = _create(seeded["contract_id"], origin=Origin.AUTOMATED)
    _update(created.id, dynamic_level=12)

    again = _update(created.id, actor="user-3", static_level=9)

    assert again.original_origin is Origin.AUTOMATED
    assert again.origin is Origin.MANUAL
    assert again.edited_by == "user-3"


def test_editing_a_manual_record_is_not_flagged_as_edited(use_test_engine, seeded):
    created = _create(seeded["contract_id"])
    updated = _update(created.id, static_level=9)
    assert updated.original_origin is Origin.MANUAL
    assert updated.edited is False


def test_update_validates_merged_fields(use_test_engine, seeded):
    created = _create(seeded["contract_id"], static_level=8, dynamic_level=10)
    with pytest.raises(ValidationError) as exc_info:
        _update(created.id, static_level=11)
    assert exc_info.value.errors == {"dynamic_level": "dynamic level must be greater than or equal to static level"}


def test_update_rejects_period_change_that_breaks_season(use_test_engine, seeded):
    created = _create(seeded["contract_id"])
    with pytest.raises(ValidationError) as exc_info:
        _update(created.id, period="dry")
    assert "measured_on" in exc_info.value.errors


def test_failed_update_leaves_record_untouched(use_test_engine, seeded):
    created = _create(seeded["contract_id"], origin=Origin.AUTOMATED)
    with pytest.raises(ValidationError):
        _update(created.id, static_level="abc")
    with UnitOfWork() as uow:
        current = NDNEService(uow).get_record(created.id)
    assert current.origin is Origin.AUTOMATED
    assert current.original_origin is None
    assert current.static_level == 8.0


def test_edited_automated_record_frees_the_period(use_test_engine, seeded):
    cid = seeded["contract_id"]
    created = _create(cid, origin=Origin.AUTOMATED)
    _update(created.id, dynamic_level=11)
    fresh = _create(cid, origin=Origin.AUTOMATED)
    assert fresh.origin is Origin.AUTOMATED


def test_update_unknown_record(use_test_engine):
    with pytest.raises(NotFoundError):
        _update(12345, static_level=1)


# --- list / lookups ---

def test_list_orders_by_measurement_date_desc(use_test_engine, seeded):
    cid = seeded["contract_id"]
    _create(cid, measured_on="2023-11-03")
    _create(cid, measured_on="2024-02-20")
    _create(cid, period="dry", measured_on="2024-05-10")

    with UnitOfWork() as uow:
        result = NDNEService(uow).list_records(cid)

    assert result.total == 3
    assert [r.measured_on.isoformat() for r in result.items] == ["2024-05-10", "2024-02-20", "2023-11-03"]


def test_list_filters_compose(use_test_engine, seeded):
    cid = seeded["contract_id"]
    _create(cid, measured_on="2023-11-03")
    _create(cid, measured_on="2024-03-01")
    _create(cid, period="dry", measured_on="2024-05-10")
    # Automated last: while it exists, no other wet record can be created.
    _create(cid, measured_on="2024-02-20", origin=Origin.AUTOMATED)

    with UnitOfWork() as uow:
        service = NDNEService(uow)
        wet_2024 = service.list_records(cid, NDNEFilters(period=Period.WET, year=2024))
        manual_wet_2024 = service.list_records(
            cid, NDNEFilters(period=Period.WET, year=2024, origin=Origin.MANUAL),
        )
        year_2023 = service.list_records(cid, NDNEFilters(year=2023))

    assert [r.measured_on.isoformat() for r in wet_2024.items] == ["2024-03-01", "2024-02-20"]
    assert [r.measured_on.isoformat() for r in manual_wet_2024.items] == ["2024-03-01"]
    assert [r.measured_on.isoformat() for r in year_2023.items] == ["2023-11-03"]


def test_year_filter_includes_year_boundaries(use_test_engine, seeded):
    cid = seeded["contract_id"]
    _create(cid, measured_on="2024-01-01")
    _create(cid, measured_on="2024-12-31")
    _create(cid, measured_on="2025-01-01")

    with UnitOfWork() as uow:
        result = NDNEService(uow).list_records(cid, NDNEFilters(year=2024))

    assert result.total == 2


def test_find_automated_record(use_test_engine, seeded):
    cid = seeded["contract_id"]
    with UnitOfWork() as uow:
        assert NDNEService(uow).find_automated_record(cid, Period.WET) is None
    created = _create(cid, origin=Origin.AUTOMATED)
    with UnitOfWork() as uow:
        found = NDNEService(uow).find_automated_record(cid, Period.WET)
    assert found.id == created.id


@pytest.mark.parametrize("year", [0, -5, 10000])
def test_year_filter_out_of_range_is_a_schema_error(year):
    with pytest.raises(PydanticValidationError):
        NDNEFilters(year=year)
