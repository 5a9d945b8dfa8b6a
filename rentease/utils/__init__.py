"""
Utility modules for the RentEase web application.
"""

from .exceptions import (
    APIException,
    ValidationError,
    FormValidationError,
    NotFoundError,
    UnauthorizedError,
    ForbiddenError,
    AuthenticationRequiredError,
    AccessDeniedError,
    InvalidCredentialsError,
    PropertyNotFoundError,
    ListingUnavailableError,
    ConfirmationRequiredError,
    RemoteCallError,
    RemoteServiceError,
    ServiceUnavailableError
)

# Dependencies are imported directly where needed to avoid circular imports

__all__ = [
    "APIException",
    "ValidationError",
    "FormValidationError",
    "NotFoundError",
    "UnauthorizedError",
    "ForbiddenError",
    "AuthenticationRequiredError",
    "AccessDeniedError",
    "InvalidCredentialsError",
    "PropertyNotFoundError",
    "ListingUnavailableError",
    "ConfirmationRequiredError",
    "RemoteCallError",
    "RemoteServiceError",
    "ServiceUnavailableError"
]
