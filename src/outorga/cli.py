import sys
import typer
from outorga.config import settings
from outorga.logging import logger, get_run_id

app = typer.Typer(no_args_is_help=True)

@app.callback()
def main():
    """
    Outorga monitoring CLI.
    """
    pass

@app.command(name="doctor")
def doctor():
    """
    Check configuration and database reachability.
    """
    logger.info("Running doctor check...")

    failures: list[str] = []
    passed = 0

    print("\n🩺 Outorga Doctor\n")

    # ── Check 1: Environment / Interpreter ──────────────────────────────────
    print("[Environment]")
    print(f"  Python: {sys.version.split()[0]}")
    print(f"  Prefix: {sys.prefix}")
    print(f"  Run ID: {get_run_id()}")
    passed += 1

    # ── Check 2: Configuration ──────────────────────────────────────────────
    print("\n[Configuration]")
    print(f"  DATABASE_URL:  {settings.DATABASE_URL}")
    print(f"  LOG_LEVEL:     {settings.LOG_LEVEL}")
    print(f"  API_BASE_URL:  {settings.API_BASE_URL}")
    passed += 1

    # ── Check 3: Database connectivity ──────────────────────────────────────
    print("\n[Database]")
    from sqlalchemy import inspect
    from sqlalchemy.exc import SQLAlchemyError
    from outorga.infra.db.engine import engine
    try:
        tables = set(inspect(engine).get_table_names())
    except SQLAlchemyError as e:
        print(f"  connection                ❌ {e}")
        failures.append("Database is unreachable — check DATABASE_URL")
    else:
        print("  connection                ✅ OK")
        passed += 1
        missing = {"license", "contract", "meter_reading", "ndne_record", "water_analysis"} - tables
        if missing:
            print(f"  tables                    ❌ Missing: {', '.join(sorted(missing))}")
            failures.append("Tables missing — run `outorga db init`")
        else:
            print("  tables                    ✅ All present")
            passed += 1

    # ── Summary ──────────────────────────────────────────────────────────────
    total = passed + len(failures)
    print(f"\n{'─' * 50}")
    if failures:
        print(f"Result: {passed}/{total} checks passed\n")
        for msg in failures:
            print(f"  ❌ {msg}")
        print()
        raise typer.Exit(code=1)
    else:
        print(f"Result: {passed}/{total} checks passed — all good ✅")
        print()


db_app = typer.Typer(help="Database management commands.")
app.add_typer(db_app, name="db")

@db_app.command("init")
def init():
    """Create tables and apply compatibility upgrades."""
    from outorga.db import init_db
    from outorga.domain.exceptions import StorageError
    from sqlalchemy.exc import SQLAlchemyError
    try:
        init_db()
        logger.info("Database initialized successfully.")
        print("✅ Database initialized.")
    except (SQLAlchemyError, StorageError) as e:
        logger.error(f"Failed to initialize database: {e}")
        print(f"❌ Failed: {e}")
        raise typer.Exit(code=1)


def _fmt(value: float | None) -> str:
    return "—" if value is None else f"{value:g}"


@app.command(name="history")
def history(license_id: int):
    """Print the 12-month monitoring history of a licence."""
    from outorga.domain.exceptions import OutorgaError
    from outorga.infra.db.uow import UnitOfWork
    from outorga.services.history_service import HistoryService
    try:
        with UnitOfWork() as uow:
            result = HistoryService(uow).get_history(license_id)
    except OutorgaError as e:
        print(f"❌ {e.message}")
        raise typer.Exit(code=1)

    if not result.started:
        print("Monitoring for this licence has not started yet.")
        return

    print(f"{'Month':<10} {'Hydrometer':>12} {'Hour meter':>12} {'ND (m)':>8} {'NE (m)':>8}")
    for m in result.months:
        print(
            f"{m.month_label:<10} {_fmt(m.hydrometer):>12} {_fmt(m.hour_meter):>12} "
            f"{_fmt(m.dynamic_level):>8} {_fmt(m.static_level):>8}"
        )


ndne_app = typer.Typer(help="ND/NE level records.")
app.add_typer(ndne_app, name="ndne")

@ndne_app.command("list")
def ndne_list(
    contract_id: int,
    period: str | None = typer.Option(None, help="wet or dry"),
    origin: str | None = typer.Option(None, help="automated or manual"),
    year: int | None = typer.Option(None, help="Calendar year of the measurement date"),
):
    """List ND/NE records of a contract, newest measurement first."""
    from pydantic import ValidationError as SchemaError
    from outorga.api.schemas.ndne import NDNEFilters
    from outorga.domain.exceptions import OutorgaError
    from outorga.infra.db.uow import UnitOfWork
    from outorga.services.ndne_service import NDNEService
    try:
        filters = NDNEFilters(period=period, origin=origin, year=year)
    except SchemaError as e:
        print(f"❌ Invalid filter: {e.errors()[0]['msg']}")
        raise typer.Exit(code=1)
    try:
        with UnitOfWork() as uow:
            records = NDNEService(uow).list_records(contract_id, filters)
    except OutorgaError as e:
        print(f"❌ {e.message}")
        raise typer.Exit(code=1)

    if not records.items:
        print("No records found.")
        return

    print(f"Found {records.total} records:")
    for r in records.items:
        flag = " (edited)" if r.edited else ""
        print(
            f"[ID {r.id}] {r.measured_on.isoformat()} {r.period.value:<3} "
            f"NE={r.static_level:g} ND={r.dynamic_level:g} {r.origin.value}{flag}"
        )

if __name__ == "__main__":
    app()
