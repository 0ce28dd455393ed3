# backend/core/errors.py
import logging
from typing import Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import DBAPIError, SQLAlchemyError
from sqlalchemy.orm import Session
from starlette.exceptions import HTTPException as StarletteHTTPException

from backend.config.settings import get_settings
from backend.core.responses import fail
from backend.services.ledger_service import LedgerError

logger = logging.getLogger(__name__)


class ServerError(HTTPException):
    """500 with a static message; the raw cause is only shown in development."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(status_code=500, detail=message)
        self.cause = cause


def log_db_error(message: str, exc: BaseException) -> None:
    if isinstance(exc, DBAPIError):
        logger.exception(
            "%s: %s | orig=%r | statement=%s", message, exc.__class__.__name__, exc.orig, exc.statement
        )
    else:
        logger.exception("%s: %s", message, exc)


def commit_or_500(db: Session, message: str) -> None:
    """Commit the unit of work; on a database error roll back and raise a static 500."""
    try:
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        log_db_error(message, e)
        raise ServerError(message, e) from e


def _field_name(loc) -> str:
    parts = [str(p) for p in loc if p not in ("body", "query", "path")]
    return ".".join(parts) or "body"


def validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    missing = [_field_name(e["loc"]) for e in errors if e.get("type") == "missing"]
    if missing and len(missing) == len(errors):
        return "Missing required fields: " + ", ".join(missing)
    return "Invalid fields: " + ", ".join(_field_name(e["loc"]) for e in errors)


def register_exception_handlers(app: FastAPI) -> None:
    settings = get_settings()

    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException):
        details = None
        cause = getattr(exc, "cause", None)
        if settings.is_development and cause is not None:
            details = str(cause)
        return JSONResponse(
            status_code=exc.status_code,
            content=fail(str(exc.detail), details),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error(request: Request, exc: RequestValidationError):
        message = validation_message(exc)
        logger.info("%s %s rejected: %s", request.method, request.url.path, message)
        return JSONResponse(status_code=400, content=fail(message))

    @app.exception_handler(LedgerError)
    async def ledger_error(request: Request, exc: LedgerError):
        logger.info("%s %s rejected: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=400, content=fail(str(exc)))

    @app.exception_handler(SQLAlchemyError)
    async def database_error(request: Request, exc: SQLAlchemyError):
        log_db_error(f"{request.method} {request.url.path} failed", exc)
        return JSONResponse(
            status_code=500,
            content=fail("Internal server error", str(exc) if settings.is_development else None),
        )

    @app.exception_handler(Exception)
    async def unexpected_error(request: Request, exc: Exception):
        logger.exception("%s %s failed", request.method, request.url.path)
        return JSONResponse(
            status_code=500,
            content=fail("Internal server error", str(exc) if settings.is_development else None),
        )
