"""
Contact service: appends visitor messages to the contacts collection.
"""

from typing import Any
import logging

from rentease.repositories.contact import ContactRepository
from rentease.schemas.common import Notice
from rentease.schemas.contact import ContactCreate
from rentease.utils.exceptions import RemoteCallError, RemoteServiceError

logger = logging.getLogger(__name__)


class ContactService:

    def __init__(self, client: Any):
        self.contact_repo = ContactRepository(client)

    async def submit(self, message: ContactCreate) -> Notice:
        """
        Store a contact message.

        Raises:
            RemoteServiceError: If the store rejects the insert
        """
        try:
            await self.contact_repo.create_message(message.model_dump())
        except RemoteCallError:
            raise RemoteServiceError("Failed to send message")

        logger.info(f"Contact message received from {message.email}")
        return Notice.success("Message sent successfully")
