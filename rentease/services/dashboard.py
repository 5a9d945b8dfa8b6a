"""
Owner and admin dashboard aggregators.

Both start in ``loading``, settle in ``ready`` or ``ready-empty`` after one
fetch, and degrade to an empty ``ready`` view with a notice when the fetch
fails. Nothing is retried.
"""

from typing import Any, List, Optional
import asyncio
import logging

from rentease.models.contact import ContactMessage
from rentease.models.property import Listing
from rentease.models.user import Identity, Profile
from rentease.repositories.contact import ContactRepository
from rentease.repositories.property import PropertyRepository
from rentease.repositories.user import ProfileRepository
from rentease.schemas.common import Notice, ViewState
from rentease.schemas.dashboard import AdminDashboardResponse, AdminStats, OwnerDashboardResponse
from rentease.schemas.navigation import NavigationResponse
from rentease.utils.exceptions import RemoteCallError

logger = logging.getLogger(__name__)


class OwnerDashboard:
    """The signed-in owner's own listings, newest first."""

    def __init__(self, client: Any, owner: Identity):
        self.owner = owner
        self.property_repo = PropertyRepository(client)
        self.state = ViewState.LOADING
        self.properties: List[Listing] = []
        self.notice: Optional[Notice] = None

    async def load(self) -> "OwnerDashboard":
        try:
            self.properties = await self.property_repo.list_by_owner(self.owner.id)
        except RemoteCallError:
            self.properties = []
            self.notice = Notice.error("Failed to load properties")
            self.state = ViewState.READY
            return self

        self.state = ViewState.READY if self.properties else ViewState.READY_EMPTY
        return self

    def to_response(self, navigation: Optional[NavigationResponse] = None) -> OwnerDashboardResponse:
        return OwnerDashboardResponse(
            state=self.state,
            properties=self.properties,
            notice=self.notice,
            navigation=navigation
        )


class AdminDashboard:
    """
    Moderation overview: every profile, listing and contact message.

    The three collections are fetched concurrently and succeed or fail
    together; a partial result is never shown.
    """

    def __init__(self, client: Any):
        self.profile_repo = ProfileRepository(client)
        self.property_repo = PropertyRepository(client)
        self.contact_repo = ContactRepository(client)
        self.state = ViewState.LOADING
        self.users: List[Profile] = []
        self.properties: List[Listing] = []
        self.contacts: List[ContactMessage] = []
        self.notice: Optional[Notice] = None

    @property
    def stats(self) -> AdminStats:
        return AdminStats(
            users=len(self.users),
            properties=len(self.properties),
            contacts=len(self.contacts)
        )

    async def load(self) -> "AdminDashboard":
        try:
            users, properties, contacts = await asyncio.gather(
                self.profile_repo.list_profiles(),
                self.property_repo.list_with_owner_names(),
                self.contact_repo.list_messages()
            )
        except RemoteCallError as e:
            logger.warning(f"Admin dashboard fetch failed: {e}")
            self.users, self.properties, self.contacts = [], [], []
            self.notice = Notice.error("Failed to load dashboard data")
            self.state = ViewState.READY
            return self

        self.users, self.properties, self.contacts = users, properties, contacts
        empty = not (users or properties or contacts)
        self.state = ViewState.READY_EMPTY if empty else ViewState.READY
        logger.debug(f"Admin dashboard loaded: {self.stats}")
        return self

    def to_response(self, navigation: Optional[NavigationResponse] = None) -> AdminDashboardResponse:
        return AdminDashboardResponse(
            state=self.state,
            stats=self.stats,
            users=self.users,
            properties=self.properties,
            contacts=self.contacts,
            notice=self.notice,
            navigation=navigation
        )
