"""
Property service for browsing listings and owner/admin listing management.
Handles the browse view, listing details, form submission and confirmed deletion.
"""

from typing import Any, Optional
import logging

from rentease.models.property import Listing
from rentease.models.user import Identity
from rentease.repositories.property import PropertyRepository
from rentease.schemas.common import Notice, ViewState
from rentease.schemas.property import (
    PropertyBrowseResponse,
    PropertyDraft,
    PropertyFilterCriteria,
    PropertyForm
)
from rentease.services.filtering import filter_properties
from rentease.utils.exceptions import (
    ConfirmationRequiredError,
    ListingUnavailableError,
    PropertyNotFoundError,
    RemoteCallError,
    RemoteServiceError
)

logger = logging.getLogger(__name__)


class PropertyService:
    """
    Listing operations issued with one backend client.

    The client is the caller's own session client when signed in, so the
    record store's policies see the real identity on every call.
    """

    def __init__(self, client: Any):
        self.client = client
        self.property_repo = PropertyRepository(client)

    async def browse(self, criteria: PropertyFilterCriteria) -> PropertyBrowseResponse:
        """
        Available listings, newest first, narrowed by the browse filters.

        A failed fetch degrades to an empty list with a notice.
        """
        try:
            listings = await self.property_repo.list_available()
        except RemoteCallError:
            return PropertyBrowseResponse(
                state=ViewState.READY,
                criteria=criteria,
                notice=Notice.error("Failed to load properties")
            )

        filtered = filter_properties(listings, criteria)
        logger.debug(f"Browse filter kept {len(filtered)} of {len(listings)} listings")

        return PropertyBrowseResponse(
            state=ViewState.READY if filtered else ViewState.READY_EMPTY,
            properties=filtered,
            total_available=len(listings),
            criteria=criteria
        )

    async def get_details(self, listing_id: str) -> Listing:
        """
        One listing with its owner's contact details.

        Raises:
            ListingUnavailableError: If the listing is missing or cannot be loaded
        """
        try:
            listing = await self.property_repo.get_with_owner(listing_id)
        except RemoteCallError:
            raise ListingUnavailableError()

        if listing is None:
            logger.debug(f"Listing {listing_id} not found")
            raise ListingUnavailableError()
        return listing

    async def draft_for(self, listing_id: str, owner: Identity) -> PropertyDraft:
        """
        Pre-filled draft for editing one of the owner's listings.

        Raises:
            PropertyNotFoundError: If the owner has no such listing
            RemoteServiceError: If the listing cannot be loaded
        """
        try:
            listing = await self.property_repo.get_by_id(listing_id)
        except RemoteCallError:
            raise RemoteServiceError("Failed to load property")

        if listing is None or listing.owner_id != owner.id:
            raise PropertyNotFoundError(listing_id)
        return PropertyDraft.from_listing(listing)

    async def save_listing(
        self,
        draft: PropertyDraft,
        owner: Identity,
        editing_id: Optional[str] = None
    ) -> "SaveResult":
        """
        Validate a draft and create or update the listing.

        Args:
            draft: Form values as submitted
            owner: Authenticated owner
            editing_id: Listing being edited, None to create

        Returns:
            SaveResult with the stored listing and success notice

        Raises:
            FormValidationError: Before any remote call, if a rule is violated
            PropertyNotFoundError: If the edited listing does not belong to the owner
            RemoteServiceError: If the store rejects the write (draft echoed back)
        """
        form = PropertyForm.from_draft(draft)
        record = form.to_record()

        try:
            if editing_id:
                listing = await self.property_repo.update_listing(editing_id, record, owner_id=owner.id)
                if listing is None:
                    raise PropertyNotFoundError(editing_id)
                logger.info(f"Listing {editing_id} updated by owner {owner.id}")
                return SaveResult(listing, Notice.success("Property updated successfully"))

            record["owner_id"] = owner.id
            listing = await self.property_repo.create_listing(record)
            return SaveResult(listing, Notice.success("Property added successfully"))

        except RemoteCallError:
            raise RemoteServiceError("Failed to save property", payload={"draft": draft.model_dump()})

    async def delete_listing(
        self,
        listing_id: str,
        confirmed: bool,
        owner: Optional[Identity] = None
    ) -> Notice:
        """
        Delete a listing once the user has confirmed.

        Args:
            listing_id: Listing to delete
            confirmed: Explicit user confirmation
            owner: Restrict the delete to this owner's listings (None for moderation)

        Raises:
            ConfirmationRequiredError: If not confirmed
            PropertyNotFoundError: If nothing was deleted
            RemoteServiceError: If the store rejects the delete
        """
        if not confirmed:
            raise ConfirmationRequiredError()

        try:
            deleted = await self.property_repo.delete_listing(
                listing_id, owner_id=owner.id if owner else None
            )
        except RemoteCallError:
            raise RemoteServiceError("Failed to delete property")

        if not deleted:
            raise PropertyNotFoundError(listing_id)

        logger.info(f"Listing {listing_id} deleted")
        return Notice.success("Property deleted successfully")


class SaveResult:
    """Outcome of a successful listing save."""

    def __init__(self, listing: Optional[Listing], notice: Notice):
        self.listing = listing
        self.notice = notice
