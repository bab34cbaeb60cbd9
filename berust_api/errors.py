"""
API error handling.

Maps berust exceptions to the ``{"error": {...}}`` response envelope.
"""

from typing import Dict, Type

from fastapi import HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from berust.core.config import settings
from berust.core.errors import BerustError, SourceTooLargeError
from berust.core.logging import get_logger

logger = get_logger(__name__)


STATUS_CODES: Dict[Type[BerustError], int] = {
    SourceTooLargeError: status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
}


def status_code_for(error: BerustError) -> int:
    for error_type, code in STATUS_CODES.items():
        if isinstance(error, error_type):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def create_error_response(error: BerustError, status_code: int) -> JSONResponse:
    """Create standardized error response"""
    logger.error(
        f"Error occurred: {error}",
        extra_data={
            "error_type": error.__class__.__name__,
            "status_code": status_code,
            **error.details,
        }
    )

    return JSONResponse(
        status_code=status_code,
        content={
            "error": {
                "type": error.__class__.__name__,
                "message": error.message,
                "details": error.details,
            }
        }
    )


async def berust_error_handler(request: Request, exc: BerustError) -> JSONResponse:
    """Handle BerustError exceptions"""
    return create_error_response(exc, status_code_for(exc))


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    """Handle HTTPException exceptions"""
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": {
                "type": "HTTPException",
                "message": exc.detail,
            }
        }
    )


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Handle request validation errors"""
    logger.warning(
        "Validation error",
        extra_data={"errors": str(exc.errors())}
    )

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "error": {
                "type": "ValidationError",
                "message": "Request validation failed",
                "details": [
                    {"loc": list(e["loc"]), "msg": e["msg"], "type": e["type"]}
                    for e in exc.errors()
                ],
            }
        }
    )


async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected errors"""
    logger.exception(
        "Unexpected error occurred",
        extra_data={"path": request.url.path}
    )

    # Don't expose internal errors outside debug mode
    message = str(exc) if settings.DEBUG else "An internal error occurred"

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": {
                "type": "InternalServerError",
                "message": message,
            }
        }
    )


def register_error_handlers(app):
    """Register error handlers with FastAPI app"""
    app.add_exception_handler(BerustError, berust_error_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, generic_error_handler)
