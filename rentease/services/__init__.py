"""
Service layer.
Contains session handling, listing management, dashboards and error handling.
"""

from .session import Page, RoleResolver, SessionContext, SessionManager, SessionState, Subscription
from .filtering import filter_properties
from .navigation import build_navigation
from .property import PropertyService, SaveResult
from .dashboard import AdminDashboard, OwnerDashboard
from .contact import ContactService
from .error_handler import ErrorHandlerService

__all__ = [
    "Page",
    "RoleResolver",
    "SessionContext",
    "SessionManager",
    "SessionState",
    "Subscription",
    "filter_properties",
    "build_navigation",
    "PropertyService",
    "SaveResult",
    "AdminDashboard",
    "OwnerDashboard",
    "ContactService",
    "ErrorHandlerService"
]
