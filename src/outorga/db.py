"""Engine singleton and table creation."""
from __future__ import annotations
from pathlib import Path
from sqlalchemy.engine import make_url
from sqlmodel import SQLModel, create_engine
from outorga.config import settings


def _make_engine():
    url = make_url(settings.DATABASE_URL)
    connect_args = {}
    if url.get_backend_name() == "sqlite":
        if url.database and url.database != ":memory:":
            Path(url.database).parent.mkdir(parents=True, exist_ok=True)
        connect_args["check_same_thread"] = False
    return create_engine(url, echo=False, connect_args=connect_args)


engine = _make_engine()


def init_db() -> None:
    """Create every table registered on SQLModel.metadata, then apply compat upgrades."""
    import outorga.models  # noqa: F401  # registers the ORM table mappers
    from outorga.infra.db.schema_compat import ensure_schema_compat

    SQLModel.metadata.create_all(engine)
    ensure_schema_compat(engine)
