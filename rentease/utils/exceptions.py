"""
Custom exception classes for the RentEase web application.
Maps the failure taxonomy (authentication required, access denied,
remote call failure, form validation) onto HTTP errors with redirect hints.
"""

from typing import Any, Dict, Optional, List
from fastapi import HTTPException, status


class APIException(HTTPException):
    """Base API exception class."""

    def __init__(
        self,
        status_code: int,
        detail: str,
        error_code: Optional[str] = None,
        headers: Optional[Dict[str, Any]] = None,
        redirect_to: Optional[str] = None,
        payload: Optional[Dict[str, Any]] = None
    ):
        super().__init__(status_code=status_code, detail=detail, headers=headers)
        self.error_code = error_code
        self.redirect_to = redirect_to
        self.payload = payload or {}


class ValidationError(APIException):
    """Validation error exception."""

    def __init__(
        self,
        detail: str,
        field_errors: Optional[List[Dict[str, str]]] = None,
        payload: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=detail,
            error_code="VALIDATION_ERROR",
            payload=payload
        )
        self.field_errors = field_errors or []


class FormValidationError(ValidationError):
    """
    Local form validation failure.

    The message is the first violated rule; the submitted draft is echoed
    back untouched so the form can be corrected and resubmitted.
    """

    def __init__(
        self,
        detail: str,
        field_errors: Optional[List[Dict[str, str]]] = None,
        draft: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            detail,
            field_errors=field_errors,
            payload={"draft": draft} if draft is not None else None
        )


class NotFoundError(APIException):
    """Resource not found exception."""

    def __init__(self, resource: str, resource_id: Optional[str] = None, redirect_to: Optional[str] = None):
        detail = f"{resource} not found"
        if resource_id:
            detail += f" with ID: {resource_id}"

        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=detail,
            error_code="NOT_FOUND",
            redirect_to=redirect_to
        )


class UnauthorizedError(APIException):
    """Authentication required exception."""

    def __init__(self, detail: str = "Authentication required", redirect_to: Optional[str] = None):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            error_code="UNAUTHORIZED",
            headers={"WWW-Authenticate": "Bearer"},
            redirect_to=redirect_to
        )


class ForbiddenError(APIException):
    """Access forbidden exception."""

    def __init__(self, detail: str = "Access forbidden", redirect_to: Optional[str] = None):
        super().__init__(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=detail,
            error_code="FORBIDDEN",
            redirect_to=redirect_to
        )


# Session and access exceptions
class AuthenticationRequiredError(UnauthorizedError):
    """No signed-in identity; the client is sent to the auth entry point."""

    def __init__(self, detail: str = "Please sign in to continue"):
        super().__init__(detail, redirect_to="/auth")


class AccessDeniedError(ForbiddenError):
    """Signed in, but without the role the page requires."""

    def __init__(self, detail: str = "Access denied"):
        super().__init__(detail, redirect_to="/")


class InvalidCredentialsError(UnauthorizedError):
    """Invalid login credentials exception."""

    def __init__(self, detail: str = "Invalid email or password"):
        super().__init__(detail)


# Listing exceptions
class PropertyNotFoundError(NotFoundError):
    """Property not found exception."""

    def __init__(self, property_id: str):
        super().__init__("Property", property_id)


class ListingUnavailableError(APIException):
    """Listing detail could not be loaded; the client goes back to browsing."""

    def __init__(self, detail: str = "Failed to load property details"):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=detail,
            error_code="NOT_FOUND",
            redirect_to="/properties"
        )


class ConfirmationRequiredError(APIException):
    """Destructive action attempted without explicit confirmation."""

    def __init__(self, detail: str = "Are you sure you want to delete this property?"):
        super().__init__(
            status_code=status.HTTP_428_PRECONDITION_REQUIRED,
            detail=detail,
            error_code="CONFIRMATION_REQUIRED"
        )


# Remote backend exceptions
class RemoteCallError(Exception):
    """
    A call against the hosted record store or auth service failed.

    Raised by repositories; never reaches the client directly. Read views
    degrade to an empty collection, mutations re-raise as RemoteServiceError.
    """

    def __init__(self, collection: str, action: str, reason: Optional[str] = None):
        message = f"Failed to {action} {collection}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.collection = collection
        self.action = action


class RemoteServiceError(APIException):
    """User-facing failure of a remote mutation."""

    def __init__(self, detail: str, payload: Optional[Dict[str, Any]] = None):
        super().__init__(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=detail,
            error_code="REMOTE_CALL_FAILED",
            payload=payload
        )


class ServiceUnavailableError(APIException):
    """Service unavailable exception."""

    def __init__(self, detail: str = "Service temporarily unavailable"):
        super().__init__(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=detail,
            error_code="SERVICE_UNAVAILABLE"
        )
