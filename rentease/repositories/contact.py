"""
Contact message repository.
"""

from typing import Any, Dict, List, Optional

from rentease.models.contact import ContactMessage
from rentease.repositories.base import BaseRepository


class ContactRepository(BaseRepository[ContactMessage]):
    """Repository for the ``contacts`` collection."""

    def __init__(self, client: Any):
        super().__init__("contacts", ContactMessage, client)

    async def list_messages(self) -> List[ContactMessage]:
        return await self.get_multi(order_by="-created_at")

    async def create_message(self, data: Dict[str, Any]) -> Optional[ContactMessage]:
        return await self.create(data)
