"""Runtime DB compatibility helpers for legacy SQLite schemas.

These helpers backfill additive schema changes for deployments that still rely
on ``SQLModel.metadata.create_all()`` instead of migrations. ``create_all``
never adds indexes to a table that already exists, so databases created before
the automated-record uniqueness index was introduced need it added here.
"""

from __future__ import annotations

import logging

from sqlalchemy import text
from sqlalchemy.engine import Connection, Engine

from outorga.models.ndne import AUTOMATED_PERIOD_INDEX, AUTOMATED_PREDICATE

logger = logging.getLogger(__name__)


def ensure_schema_compat(engine: Engine) -> None:
    """Apply additive compatibility upgrades for existing SQLite databases."""
    if engine.dialect.name != "sqlite":
        return

    with engine.begin() as conn:
        _ensure_ndne_responsible_name(conn)
        _ensure_ndne_automated_index(conn)


def _ensure_ndne_responsible_name(conn: Connection) -> None:
    if not _table_exists(conn, "ndne_record"):
        return

    if not _column_exists(conn, "ndne_record", "responsible_name"):
        conn.execute(text("ALTER TABLE ndne_record ADD COLUMN responsible_name VARCHAR"))
        logger.info("Applied compatibility upgrade: added ndne_record.responsible_name")


def _ensure_ndne_automated_index(conn: Connection) -> None:
    if not _table_exists(conn, "ndne_record") or _index_exists(conn, AUTOMATED_PERIOD_INDEX):
        return

    duplicates = conn.execute(
        text(
            "SELECT contract_id, period, COUNT(*) FROM ndne_record "
            f"WHERE {AUTOMATED_PREDICATE} GROUP BY contract_id, period HAVING COUNT(*) > 1"
        )
    ).fetchall()
    if duplicates:
        # Needs manual cleanup before the index can be created.
        logger.warning(
            "Skipped %s: %d contract/period pairs hold duplicate automated records",
            AUTOMATED_PERIOD_INDEX, len(duplicates),
        )
        return

    conn.execute(
        text(
            f"CREATE UNIQUE INDEX {AUTOMATED_PERIOD_INDEX} "
            f"ON ndne_record (contract_id, period) WHERE {AUTOMATED_PREDICATE}"
        )
    )
    logger.info("Applied compatibility upgrade: created %s", AUTOMATED_PERIOD_INDEX)


def _table_exists(conn: Connection, table_name: str) -> bool:
    return (
        conn.execute(
            text(
                "SELECT 1 FROM sqlite_master "
                "WHERE type = 'table' AND name = :name LIMIT 1"
            ),
            {"name": table_name},
        ).first()
        is not None
    )


def _column_exists(conn: Connection, table_name: str, column_name: str) -> bool:
    rows = conn.execute(text(f"PRAGMA table_info({table_name})")).fetchall()
    return any(row[1] == column_name for row in rows)


def _index_exists(conn: Connection, index_name: str) -> bool:
    return (
        conn.execute(
            text(
                "SELECT 1 FROM sqlite_master "
                "WHERE type = 'index' AND name = :name LIMIT 1"
            ),
            {"name": index_name},
        ).first()
        is not None
    )
