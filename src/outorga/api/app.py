"""FastAPI application factory."""
from __future__ import annotations
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlmodel import SQLModel
from outorga.domain.exceptions import (
    ConflictError,
    DuplicateAutomatedRecordError,
    NotFoundError,
    StorageError,
    ValidationError,
)


def create_app() -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        from outorga.infra.db.engine import engine  # triggers pragmas + mapper registration
        from outorga.infra.db.schema_compat import ensure_schema_compat
        SQLModel.metadata.create_all(engine)
        ensure_schema_compat(engine)
        yield

    app = FastAPI(
        title="Outorga Monitoring API",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Import routers inside create_app() to avoid circular imports at module load time
    from outorga.api.routers.licenses import router as licenses_router
    from outorga.api.routers.contracts import router as contracts_router
    from outorga.api.routers.readings import router as readings_router
    from outorga.api.routers.history import router as history_router
    from outorga.api.routers.ndne import router as ndne_router
    from outorga.api.routers.analyses import router as analyses_router

    app.include_router(licenses_router)
    app.include_router(contracts_router)
    app.include_router(readings_router)
    app.include_router(history_router)
    app.include_router(ndne_router)
    app.include_router(analyses_router)

    @app.exception_handler(NotFoundError)
    def _not_found(request: Request, exc: NotFoundError) -> JSONResponse:
        return JSONResponse(status_code=404, content={"detail": exc.message})

    @app.exception_handler(ConflictError)
    def _conflict(request: Request, exc: ConflictError) -> JSONResponse:
        return JSONResponse(status_code=409, content={"detail": exc.message})

    @app.exception_handler(ValidationError)
    def _invalid(request: Request, exc: ValidationError) -> JSONResponse:
        return JSONResponse(status_code=422, content={"detail": exc.message, "errors": exc.errors})

    @app.exception_handler(DuplicateAutomatedRecordError)
    def _duplicate(request: Request, exc: DuplicateAutomatedRecordError) -> JSONResponse:
        return JSONResponse(status_code=409, content={"detail": exc.message, "errors": exc.errors})

    @app.exception_handler(StorageError)
    def _storage(request: Request, exc: StorageError) -> JSONResponse:
        return JSONResponse(status_code=503, content={"detail": exc.message})

    @app.get("/health", tags=["ops"])
    def health() -> dict:
        return {"status": "ok"}

    return app
