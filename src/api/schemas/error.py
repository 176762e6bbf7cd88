"""
Error schemas - Pydantic models for error responses

Used for failures outside the color envelope: malformed request bodies,
services not yet initialized, unexpected server errors.
"""

from pydantic import BaseModel, Field
from typing import Optional, Dict, Any
from datetime import datetime, timezone


class ErrorDetail(BaseModel):
    """Detailed error information"""
    code: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error message")
    details: Optional[Dict[str, Any]] = Field(
        None,
        description="Additional context (field names, valid values, etc.)"
    )
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When the error occurred"
    )


class ErrorResponse(BaseModel):
    """API error response - standardized format"""
    error: ErrorDetail = Field(description="Error information")
    request_id: Optional[str] = Field(None, description="Request ID for logging/debugging")

    model_config = {
        "json_schema_extra": {
            "example": {
                "error": {
                    "code": "SERVICES_NOT_READY",
                    "message": "Service container not initialized",
                    "details": None,
                    "timestamp": "2025-11-26T10:30:00Z"
                },
                "request_id": "req-12345"
            }
        }
    }


class ValidationErrorResponse(BaseModel):
    """Validation error - when request body is not four integers"""
    error: ErrorDetail = Field(description="Error information")
    validation_errors: list[Dict[str, Any]] = Field(
        description="Per-field validation errors"
    )
    request_id: Optional[str] = Field(None, description="Request ID for logging/debugging")

    model_config = {
        "json_schema_extra": {
            "example": {
                "error": {
                    "code": "VALIDATION_ERROR",
                    "message": "Request validation failed",
                    "details": {"error_count": 1},
                    "timestamp": "2025-11-26T10:30:00Z"
                },
                "validation_errors": [
                    {
                        "field": "r",
                        "message": "Input should be a valid integer",
                        "type": "int_parsing"
                    }
                ],
                "request_id": "req-12345"
            }
        }
    }
