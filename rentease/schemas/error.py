"""
Error response schemas for API documentation and consistent error formatting.
"""

from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional


class ErrorDetail(BaseModel):
    """Schema for individual error detail."""

    field: Optional[str] = Field(None, description="Field name that caused the error", examples=["rent"])
    message: str = Field(..., description="Human-readable error message", examples=["Rent must be positive"])
    type: Optional[str] = Field(None, description="Error type identifier", examples=["not_positive"])


class ErrorResponse(BaseModel):
    """Schema for standardized error responses."""

    code: str = Field(..., description="Error code identifier", examples=["VALIDATION_ERROR"])
    message: str = Field(..., description="Human-readable error message", examples=["Rent must be positive"])
    timestamp: str = Field(..., description="Error timestamp in ISO format", examples=["2024-01-01T00:00:00Z"])
    request_id: Optional[str] = Field(None, description="Request identifier for tracking", examples=["abc12345"])
    redirect_to: Optional[str] = Field(None, description="Where the client should navigate", examples=["/auth"])
    details: Optional[List[ErrorDetail]] = Field(None, description="Field-level errors")
    draft: Optional[Dict[str, Any]] = Field(None, description="Rejected form draft, returned unchanged")


class APIErrorResponse(BaseModel):
    """Schema for API error response wrapper."""

    error: ErrorResponse = Field(..., description="Error information")


def _example(code: str, message: str, **extra: Any) -> Dict[str, Any]:
    error = {
        "code": code,
        "message": message,
        "timestamp": "2024-01-01T00:00:00Z",
        "request_id": "abc12345",
    }
    error.update(extra)
    return {"application/json": {"example": {"error": error}}}


# Common error response examples for documentation
COMMON_ERROR_RESPONSES = {
    401: {
        "description": "Unauthorized - sign in required",
        "model": APIErrorResponse,
        "content": _example("UNAUTHORIZED", "Please sign in to continue", redirect_to="/auth"),
    },
    403: {
        "description": "Forbidden - role required",
        "model": APIErrorResponse,
        "content": _example("FORBIDDEN", "Access denied. Owner role required.", redirect_to="/"),
    },
    404: {
        "description": "Not Found",
        "model": APIErrorResponse,
        "content": _example("NOT_FOUND", "Property not found with ID: 42"),
    },
    422: {
        "description": "Validation Error",
        "model": APIErrorResponse,
        "content": _example(
            "VALIDATION_ERROR",
            "Rent must be positive",
            details=[{"field": "rent", "message": "Rent must be positive"}],
        ),
    },
    428: {
        "description": "Confirmation required",
        "model": APIErrorResponse,
        "content": _example("CONFIRMATION_REQUIRED", "Are you sure you want to delete this property?"),
    },
    502: {
        "description": "Backend call failed",
        "model": APIErrorResponse,
        "content": _example("REMOTE_CALL_FAILED", "Failed to save property"),
    },
}


def get_error_responses(*status_codes: int) -> Dict[int, Dict[str, Any]]:
    """
    Get error response schemas for specific status codes.

    Args:
        status_codes: HTTP status codes to include

    Returns:
        Dictionary of error response schemas
    """
    return {
        code: COMMON_ERROR_RESPONSES[code]
        for code in status_codes
        if code in COMMON_ERROR_RESPONSES
    }


def get_auth_error_responses() -> Dict[int, Dict[str, Any]]:
    """Get authentication and authorization error response schemas."""
    return get_error_responses(401, 403)


def get_form_error_responses() -> Dict[int, Dict[str, Any]]:
    """Get error response schemas for listing form submissions."""
    return get_error_responses(401, 403, 404, 422, 502)


def get_delete_error_responses() -> Dict[int, Dict[str, Any]]:
    """Get error response schemas for confirmed deletions."""
    return get_error_responses(401, 403, 404, 428, 502)
