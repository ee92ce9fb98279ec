"""Unit of Work: one session per logical operation."""
from __future__ import annotations
import logging
from contextlib import contextmanager
from typing import Iterator
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session
from outorga.domain.exceptions import StorageError
from outorga.infra.db.engine import engine

logger = logging.getLogger(__name__)


def _driver_message(exc: SQLAlchemyError) -> str:
    orig = getattr(exc, "orig", None)
    return str(orig) if orig is not None else str(exc)


@contextmanager
def storage_errors(action: str) -> Iterator[None]:
    """Translate SQLAlchemy failures inside the block into StorageError."""
    try:
        yield
    except SQLAlchemyError as exc:
        logger.error("%s failed: %s", action, exc)
        raise StorageError(f"{action} failed: {_driver_message(exc)}") from exc


class UnitOfWork:
    """Context manager wrapping a single DB session.

    Commits on clean exit, rolls back on exception, always closes.
    """

    def __init__(self) -> None:
        self._session: Session | None = None

    def __enter__(self) -> "UnitOfWork":
        self._session = Session(engine)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        try:
            if exc_type is None:
                with storage_errors("commit"):
                    self._session.commit()
            else:
                self._session.rollback()
        finally:
            self._session.close()
            self._session = None

    @property
    def session(self) -> Session:
        if self._session is None:
            raise RuntimeError("UnitOfWork is not active; use it as a context manager.")
        return self._session

    def commit(self) -> None:
        """Explicit mid-operation commit (e.g. to return a persisted row)."""
        with storage_errors("commit"):
            self.session.commit()

    def rollback(self) -> None:
        self.session.rollback()
