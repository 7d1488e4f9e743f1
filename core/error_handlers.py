"""Error handlers for the FastAPI application.

Every error leaves the API in the same envelope::

    {"error": {"message": ..., "status_code": ..., "details": {...}}}
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import SQLAlchemyError
from core.exceptions import AppException
from core.logger import get_logger

logger = get_logger("core.error_handlers")


def create_error_response(
    message: str,
    status_code: int = 500,
    details: dict = None,
) -> JSONResponse:
    """Create a standardized error response.

    Args:
        message: Error message.
        status_code: HTTP status code.
        details: Optional error details dictionary.

    Returns:
        JSONResponse with error details.
    """
    error_body = {
        "error": {
            "message": message,
            "status_code": status_code,
        }
    }

    if details:
        error_body["error"]["details"] = details

    return JSONResponse(
        status_code=status_code,
        content=error_body
    )


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Handle custom application exceptions such as `NotFoundError`."""
    logger.warning(
        "Application error: %s [%s %s]",
        exc.message,
        request.method,
        request.url.path
    )

    return create_error_response(
        message=exc.message,
        status_code=exc.status_code,
        details=exc.details
    )


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """Handle request validation errors.

    Each pydantic error becomes one ``{field, message, type}`` entry. The
    leading ``body``/``query``/``path`` location is dropped from the field
    name so clients see the JSON key that failed.
    """
    errors = []
    for error in exc.errors():
        loc = [str(part) for part in error["loc"]]
        if len(loc) > 1 and loc[0] in ("body", "query", "path"):
            loc = loc[1:]
        errors.append({
            "field": ".".join(loc),
            "message": error["msg"],
            "type": error["type"]
        })

    logger.warning(
        "Validation error on %s %s: %s",
        request.method,
        request.url.path,
        errors
    )

    return create_error_response(
        message="Validation error",
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        details={"validation_errors": errors}
    )


def _server_error(request: Request, exc: Exception, message: str, error_type: str) -> JSONResponse:
    # Internal error text stays in the log, never in the response
    logger.error(
        "%s on %s %s: %s",
        error_type,
        request.method,
        request.url.path,
        exc,
        exc_info=exc
    )
    return create_error_response(
        message=message,
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        details={"type": error_type}
    )


async def sqlalchemy_exception_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Store failures, including NOT NULL and UNIQUE violations, become a 500."""
    return _server_error(request, exc, "A database error occurred", "database_error")


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    return _server_error(request, exc, "An internal server error occurred", "internal_error")


def register_exception_handlers(app):
    """Register all exception handlers with the FastAPI app."""
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(SQLAlchemyError, sqlalchemy_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    logger.info("Exception handlers registered")
