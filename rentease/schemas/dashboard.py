"""
Owner and admin dashboard view schemas.
"""

from pydantic import BaseModel, Field
from typing import List, Optional

from rentease.models.contact import ContactMessage
from rentease.models.property import Listing
from rentease.models.user import Profile
from rentease.schemas.common import Notice, ViewState
from rentease.schemas.navigation import NavigationResponse
from rentease.schemas.property import PropertyDraft


class OwnerDashboardResponse(BaseModel):
    state: ViewState
    properties: List[Listing] = Field(default_factory=list)
    notice: Optional[Notice] = None
    navigation: Optional[NavigationResponse] = None


class AdminStats(BaseModel):
    users: int = Field(0, description="Total profiles")
    properties: int = Field(0, description="Total listings")
    contacts: int = Field(0, description="Total contact messages")


class AdminDashboardResponse(BaseModel):
    state: ViewState
    stats: AdminStats = Field(default_factory=AdminStats)
    users: List[Profile] = Field(default_factory=list)
    properties: List[Listing] = Field(default_factory=list)
    contacts: List[ContactMessage] = Field(default_factory=list)
    notice: Optional[Notice] = None
    navigation: Optional[NavigationResponse] = None


class ListingSaveResponse(BaseModel):
    """Result of a successful create/update: the form closes and the list refreshes."""

    notice: Notice
    property: Optional[Listing] = None
    draft: PropertyDraft = Field(default_factory=PropertyDraft, description="Reset draft")
    dashboard: OwnerDashboardResponse


class OwnerDeleteResponse(BaseModel):
    notice: Notice
    dashboard: OwnerDashboardResponse


class AdminDeleteResponse(BaseModel):
    notice: Notice
    dashboard: AdminDashboardResponse
