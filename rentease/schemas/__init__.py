"""
Pydantic schemas for request/response validation.
"""

from .common import Notice, NoticeLevel, ViewState
from .navigation import NavigationResponse, NavLink, SessionControl
from .auth import LoginRequest, LoginResponse, LogoutResponse, SessionResponse, SignupRequest
from .property import (
    PropertyBrowseResponse,
    PropertyDetailResponse,
    PropertyDraft,
    PropertyDraftResponse,
    PropertyFilterCriteria,
    PropertyForm
)
from .dashboard import (
    AdminDashboardResponse,
    AdminDeleteResponse,
    AdminStats,
    ListingSaveResponse,
    OwnerDashboardResponse,
    OwnerDeleteResponse
)
from .contact import ContactCreate, ContactPageResponse, ContactSubmitResponse
from .pages import AboutResponse, Feature, HomeResponse

__all__ = [
    # Common
    "Notice",
    "NoticeLevel",
    "ViewState",

    # Navigation
    "NavigationResponse",
    "NavLink",
    "SessionControl",

    # Authentication
    "LoginRequest",
    "LoginResponse",
    "LogoutResponse",
    "SessionResponse",
    "SignupRequest",

    # Property
    "PropertyBrowseResponse",
    "PropertyDetailResponse",
    "PropertyDraft",
    "PropertyDraftResponse",
    "PropertyFilterCriteria",
    "PropertyForm",

    # Dashboards
    "AdminDashboardResponse",
    "AdminDeleteResponse",
    "AdminStats",
    "ListingSaveResponse",
    "OwnerDashboardResponse",
    "OwnerDeleteResponse",

    # Contact and pages
    "ContactCreate",
    "ContactPageResponse",
    "ContactSubmitResponse",
    "AboutResponse",
    "Feature",
    "HomeResponse"
]
