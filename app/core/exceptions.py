"""Application-level exceptions and FastAPI exception handlers."""


import logging
from enum import Enum

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ErrorKind(str, Enum):
    """Closed set of error codes returned to clients."""

    BAD_PAYLOAD = "BAD_PAYLOAD"
    NOT_FOUND = "NOT_FOUND"
    FORBIDDEN = "FORBIDDEN"
    CONFLICT = "CONFLICT"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class AppException(Exception):
    """Base application exception."""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        code: ErrorKind = ErrorKind.INTERNAL_ERROR,
    ):
        self.message = message
        self.status_code = status_code
        self.code = code
        super().__init__(message)

class BadPayloadError(AppException):
    def __init__(self, message: str = "Bad payload"):
        super().__init__(message, status_code=400, code=ErrorKind.BAD_PAYLOAD)

class NotFoundError(AppException):
    def __init__(self, entity: str, entity_id: str | None = None):
        msg = f"{entity} not found" if not entity_id else f"{entity} '{entity_id}' not found"
        super().__init__(msg, status_code=404, code=ErrorKind.NOT_FOUND)

class ForbiddenError(AppException):
    def __init__(self, message: str = "You have no access to this resource"):
        super().__init__(message, status_code=403, code=ErrorKind.FORBIDDEN)

class ConflictError(AppException):
    def __init__(self, message: str):
        super().__init__(message, status_code=409, code=ErrorKind.CONFLICT)

# ---------------------------------------------------------------------------
# FastAPI exception handlers
# ---------------------------------------------------------------------------

def _error_body(code: ErrorKind, message: str) -> dict:
    return {"error": {"code": code.value, "message": message}}

def register_exception_handlers(app: FastAPI) -> None:
    """Attach all custom exception handlers to the FastAPI app."""

    @app.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(exc.code, exc.message),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        # Malformed bodies are the same client mistake as empty fields
        fields = ", ".join(
            ".".join(str(p) for p in err.get("loc", ()) if p != "body")
            for err in exc.errors()
        )
        message = f"Bad payload: {fields}" if fields else "Bad payload"
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_error_body(ErrorKind.BAD_PAYLOAD, message),
        )

    @app.exception_handler(404)
    async def not_found_handler(request: Request, exc: Exception) -> JSONResponse:
        return JSONResponse(
            status_code=404,
            content=_error_body(ErrorKind.NOT_FOUND, "Resource not found"),
        )

    @app.exception_handler(500)
    async def internal_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=500,
            content=_error_body(ErrorKind.INTERNAL_ERROR, "An unexpected error occurred"),
        )
