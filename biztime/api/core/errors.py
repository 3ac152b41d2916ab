"""
Error taxonomy and the single place it is turned into HTTP responses.

    BadRequestError / RequestValidationError  -> 400
    NotFoundError                             -> 404
    HTTPException (unknown route, method)     -> its own status
    SQLAlchemyError                           -> 500 (gateway failure)
    anything else                             -> 500

Every error body has the same shape: {"error": {"message": ..., "status": ...}}
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class BizTimeError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class BadRequestError(BizTimeError):
    """Missing required key, forbidden immutable key, or malformed payload."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str = "Bad Request"):
        super().__init__(message)


class NotFoundError(BizTimeError):
    """Primary-key lookup matched no row."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, message: str = "Not Found"):
        super().__init__(message)


def error_body(message: str, status_code: int) -> dict:
    return {"error": {"message": message, "status": status_code}}


def _describe_validation_errors(exc: RequestValidationError) -> str:
    missing = []
    other = []
    for err in exc.errors():
        # loc looks like ("body", "name") or ("path", "invoice_id")
        field = ".".join(str(part) for part in err.get("loc", ())[1:])
        if err.get("type") == "missing" and field:
            missing.append(field)
        elif err.get("type") == "missing":
            other.append("Request body is required")
        elif field:
            other.append(f"{field}: {err.get('msg')}")
        else:
            other.append(str(err.get("msg")))

    parts = []
    if missing:
        parts.append(f"Must have {', '.join(missing)} in request")
    parts.extend(other)
    return "; ".join(parts) or "Bad Request"


def bad_request_from_validation(exc: RequestValidationError) -> BadRequestError:
    return BadRequestError(_describe_validation_errors(exc))


def _biztime_error_response(exc: BizTimeError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(exc.message, exc.status_code),
    )


def register_exception_handlers(app: FastAPI, debug: bool = False) -> None:
    @app.exception_handler(BizTimeError)
    async def biztime_error_handler(request: Request, exc: BizTimeError):
        return _biztime_error_response(exc)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        error = bad_request_from_validation(exc)
        logger.info("Rejected %s %s: %s", request.method, request.url.path, error.message)
        return _biztime_error_response(error)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(str(exc.detail), exc.status_code),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(SQLAlchemyError)
    async def database_error_handler(request: Request, exc: SQLAlchemyError):
        logger.exception("Database error on %s %s", request.method, request.url.path)
        message = str(exc.orig if hasattr(exc, "orig") else exc) if debug else "Database error"
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_body(message, status.HTTP_500_INTERNAL_SERVER_ERROR),
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error: %s", exc)
        message = str(exc) if debug else "An internal error occurred"
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_body(message, status.HTTP_500_INTERNAL_SERVER_ERROR),
        )
