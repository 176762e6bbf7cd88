"""
Error handling middleware for API

FastAPI lets us define custom handlers for specific exception types.
When an exception is raised anywhere in the request, FastAPI catches it
and calls the appropriate handler to return a formatted error response.

The color endpoint itself never raises for bad channels or bulb failures;
those are returned in the color envelope. These handlers cover the rest:
- Validation errors (body is not four integers)
- Domain errors (services not ready)
- Generic errors (unexpected problems)
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
import uuid
from typing import Optional

from api.schemas.error import ErrorResponse, ErrorDetail, ValidationErrorResponse
from utils.logger import get_logger
from models.enums import LogCategory

log = get_logger().for_category(LogCategory.API)


class DomainError(Exception):
    """Base class for domain-specific errors"""
    def __init__(
        self,
        code: str,
        message: str,
        details: Optional[dict] = None,
        status_code: int = 400
    ):
        self.code = code
        self.message = message
        self.details = details or {}
        self.status_code = status_code
        super().__init__(message)


class ServicesNotReadyError(DomainError):
    """Service container was not set before the first request"""
    def __init__(self):
        super().__init__(
            code="SERVICES_NOT_READY",
            message="Service container not initialized. The relay may still be starting.",
            status_code=503
        )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with FastAPI app"""

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Handle Pydantic validation errors (bad JSON structure)"""
        request_id = str(uuid.uuid4())
        errors = exc.errors()

        log.warn(f"Validation error ({request_id}): {len(errors)} errors", path=request.url.path)

        validation_errors = []
        for error in errors:
            field = ".".join(str(x) for x in error["loc"][1:])  # Skip "body"
            validation_errors.append({
                "field": field,
                "message": error["msg"],
                "type": error["type"]
            })

        response = ValidationErrorResponse(
            error=ErrorDetail(
                code="VALIDATION_ERROR",
                message="Request validation failed",
                details={"error_count": len(errors)},
            ),
            validation_errors=validation_errors,
            request_id=request_id
        )

        return JSONResponse(
            status_code=422,
            content=response.model_dump(mode="json")
        )

    @app.exception_handler(DomainError)
    async def domain_exception_handler(request: Request, exc: DomainError):
        """Handle domain-specific business logic errors"""
        request_id = str(uuid.uuid4())

        log.warn(f"Domain error ({request_id}): {exc.code} - {exc.message}")

        response = ErrorResponse(
            error=ErrorDetail(
                code=exc.code,
                message=exc.message,
                details=exc.details,
            ),
            request_id=request_id
        )

        return JSONResponse(
            status_code=exc.status_code,
            content=response.model_dump(mode="json")
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Handle unexpected errors"""
        request_id = str(uuid.uuid4())

        log.error(
            f"Unexpected error ({request_id}): {type(exc).__name__}: {str(exc)}",
            path=request.url.path
        )

        response = ErrorResponse(
            error=ErrorDetail(
                code="INTERNAL_SERVER_ERROR",
                message="An unexpected error occurred. Please try again.",
                details={"request_id": request_id},
            ),
            request_id=request_id
        )

        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=response.model_dump(mode="json")
        )
