"""
Profile and role-assignment repositories.
"""

from typing import Any, FrozenSet, List
import logging

from pydantic import BaseModel, ConfigDict

from rentease.models.user import Profile, UserRole
from rentease.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class RoleAssignment(BaseModel):
    """One row of ``user_roles``; an identity may hold several."""

    model_config = ConfigDict(extra="ignore")

    role: str


class ProfileRepository(BaseRepository[Profile]):
    """Repository for the ``profiles`` collection."""

    def __init__(self, client: Any):
        super().__init__("profiles", Profile, client)

    async def list_profiles(self) -> List[Profile]:
        return await self.get_multi()


class RoleRepository(BaseRepository[RoleAssignment]):
    """Repository for the ``user_roles`` collection."""

    def __init__(self, client: Any):
        super().__init__("user_roles", RoleAssignment, client)

    async def get_roles(self, user_id: str) -> FrozenSet[UserRole]:
        """
        Get the role set held by an identity.

        Unknown role names are ignored.
        """
        assignments = await self.get_multi(filters={"user_id": user_id}, columns="role")

        roles = set()
        for assignment in assignments:
            try:
                roles.add(UserRole(assignment.role))
            except ValueError:
                logger.warning(f"Ignoring unknown role '{assignment.role}' for user {user_id}")
        return frozenset(roles)
