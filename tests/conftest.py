"""Shared test fixtures.

  use_test_engine  — redirects UoW + infra layer to a temp-file SQLite DB.
  client           — FastAPI TestClient wired to the test engine.
  seeded           — one licence with one contract, ids returned as a dict.
"""
import os
from datetime import date
import pytest
from sqlmodel import SQLModel, create_engine, Session


def pytest_configure(config):
    """Point the module-level engine at an in-memory DB before any test imports it.

    Every test that touches storage patches in its own temp-file engine; this only
    keeps collection from creating data/ in the working directory.
    """
    os.environ.setdefault("DATABASE_URL", "sqlite://")


@pytest.fixture
def use_test_engine(tmp_path, monkeypatch):
    """Monkeypatch infra/db engine references to an isolated temp-file SQLite DB."""
    db_path = tmp_path / "test_outorga.db"
    test_engine = create_engine(f"sqlite:///{db_path}", echo=False)

    import outorga.models  # noqa: F401 — register all ORM mappers
    import outorga.infra.db.uow  # noqa: F401 — make sure the module exists before patching
    SQLModel.metadata.create_all(test_engine)

    # Redirect all infra/db references to the test engine
    monkeypatch.setattr("outorga.infra.db.engine.engine", test_engine)
    monkeypatch.setattr("outorga.infra.db.uow.engine", test_engine)

    yield test_engine

    SQLModel.metadata.drop_all(test_engine)
    test_engine.dispose()


@pytest.fixture
def client(use_test_engine):
    """FastAPI TestClient backed by the isolated test engine."""
    from fastapi.testclient import TestClient
    from outorga.api.app import create_app

    app = create_app()
    with TestClient(app) as c:
        yield c


@pytest.fixture
def seeded(use_test_engine):
    """Insert one licence and one contract directly; return their ids."""
    from outorga.models.core import Contract, License

    with Session(use_test_engine) as s:
        lic = License(
            license_number="OUT-2023-0001",
            act_type="groundwater",
            municipality="Teresina",
            start_date=date(2023, 1, 1),
            end_date=date(2027, 12, 31),
        )
        s.add(lic)
        s.flush()
        contract = Contract(
            license_id=lic.id, number="C-001", signed_on=date(2023, 2, 1), purpose="supply",
        )
        s.add(contract)
        s.commit()
        return {"license_id": lic.id, "contract_id": contract.id}
