"""FastAPI dependencies."""
from __future__ import annotations
from typing import Generator
from fastapi import Header
from outorga.infra.db.uow import UnitOfWork


def get_uow() -> Generator[UnitOfWork, None, None]:
    """Yield one UnitOfWork per request; commit/rollback in __exit__."""
    with UnitOfWork() as uow:
        yield uow


def get_actor(x_user_id: str = Header(..., min_length=1)) -> str:
    """Identity of the caller, stamped into created_by / edited_by / user_id."""
    return x_user_id
