"""Error taxonomy and the kind-to-status translation table."""

import enum
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)


class ErrorKind(str, enum.Enum):
    VALIDATION = "validation_error"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    SERVER = "server_error"


ERROR_STATUS = {
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorKind.SERVER: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


class AppError(Exception):
    kind = ErrorKind.SERVER

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    @property
    def status_code(self) -> int:
        return ERROR_STATUS[self.kind]

    def to_body(self) -> dict:
        return {"error": self.kind.value, "message": self.message}


class ValidationError(AppError):
    kind = ErrorKind.VALIDATION

    def __init__(self, message: str = "Validation failed", errors: list[dict] | None = None):
        super().__init__(message)
        self.errors = errors or []

    def to_body(self) -> dict:
        body = super().to_body()
        body["errors"] = self.errors
        return body


class NotFound(AppError):
    kind = ErrorKind.NOT_FOUND

    def __init__(self, resource: str):
        super().__init__(f"{resource.capitalize()} not found")
        self.resource = resource


class Conflict(AppError):
    kind = ErrorKind.CONFLICT

    def __init__(self, field: str, message: str | None = None):
        super().__init__(message or f"A record with this {field} already exists")
        self.field = field

    def to_body(self) -> dict:
        body = super().to_body()
        body["field"] = self.field
        return body


class ServerError(AppError):
    kind = ErrorKind.SERVER

    def __init__(self, message: str = "Internal server error"):
        super().__init__(message)


def field_errors(errors) -> list[dict]:
    """Flatten pydantic error dicts into ``{"field", "message"}`` pairs.

    The request location prefix (``body``, ``path``, ``query``) is dropped so
    clients see the bare field name.
    """
    flattened = []
    for err in errors:
        loc = [str(part) for part in err.get("loc", ())]
        if loc and loc[0] in ("body", "path", "query"):
            loc = loc[1:]
        flattened.append({"field": ".".join(loc) or None, "message": err.get("msg", "Invalid value")})
    return flattened


def _json(error: AppError) -> JSONResponse:
    return JSONResponse(status_code=error.status_code, content=error.to_body())


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    if exc.kind is ErrorKind.SERVER:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return _json(exc)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return _json(ValidationError("Request validation failed", field_errors(exc.errors())))


async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception("Database error during %s %s", request.method, request.url.path)
    return _json(ServerError("Database unavailable"))


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error during %s %s", request.method, request.url.path)
    return _json(ServerError())


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(SQLAlchemyError, database_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
