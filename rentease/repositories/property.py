"""
Property repository for listing reads and owner-scoped writes.
"""

from typing import Any, Dict, List, Optional
import logging

from rentease.models.property import Listing
from rentease.repositories.base import BaseRepository

logger = logging.getLogger(__name__)

# Relational embeds resolved by the record store
OWNER_NAME_COLUMNS = "*, profiles:owner_id(name)"
OWNER_CONTACT_COLUMNS = "*, profiles:owner_id(name, email, phone)"


class PropertyRepository(BaseRepository[Listing]):
    """Repository for the ``properties`` collection."""

    def __init__(self, client: Any):
        super().__init__("properties", Listing, client)

    async def list_available(self) -> List[Listing]:
        """Listings open for rent, newest first."""
        return await self.get_multi(filters={"is_available": True}, order_by="-created_at")

    async def list_by_owner(self, owner_id: str) -> List[Listing]:
        """All listings of one owner, newest first."""
        return await self.get_multi(filters={"owner_id": owner_id}, order_by="-created_at")

    async def list_with_owner_names(self) -> List[Listing]:
        """Every listing with the owner's display name embedded."""
        return await self.get_multi(columns=OWNER_NAME_COLUMNS, order_by="-created_at")

    async def get_with_owner(self, listing_id: str) -> Optional[Listing]:
        """One listing with the owner's contact details embedded."""
        return await self.get_by_id(listing_id, columns=OWNER_CONTACT_COLUMNS)

    async def create_listing(self, data: Dict[str, Any]) -> Optional[Listing]:
        listing = await self.create(data)
        logger.info(f"Created listing '{data.get('title')}' for owner {data.get('owner_id')}")
        return listing

    async def update_listing(
        self,
        listing_id: str,
        data: Dict[str, Any],
        owner_id: Optional[str] = None
    ) -> Optional[Listing]:
        scope = {"owner_id": owner_id} if owner_id else None
        return await self.update(listing_id, data, scope=scope)

    async def delete_listing(self, listing_id: str, owner_id: Optional[str] = None) -> bool:
        scope = {"owner_id": owner_id} if owner_id else None
        return await self.delete(listing_id, scope=scope)
