"""
Identity, profile and role records as read from the hosted backend.
The auth service owns identities; profiles and role rows are written outside this app.
"""

from pydantic import BaseModel, ConfigDict
from typing import Any, Optional
from datetime import datetime
import enum


class UserRole(str, enum.Enum):
    """Role names stored in the ``user_roles`` collection."""
    TENANT = "tenant"
    OWNER = "owner"
    ADMIN = "admin"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class Identity(BaseModel):
    """Authenticated subject recognized by the auth service."""

    model_config = ConfigDict(extra="ignore")

    id: str
    email: Optional[str] = None

    @classmethod
    def from_session(cls, session: Any) -> Optional["Identity"]:
        """Extract the identity from an auth session, or None when signed out."""
        user = getattr(session, "user", None) if session is not None else None
        if user is None or not getattr(user, "id", None):
            return None
        return cls(id=str(user.id), email=getattr(user, "email", None))


class Profile(BaseModel):
    """Public profile row, one per identity."""

    model_config = ConfigDict(extra="ignore")

    id: str
    name: str
    email: str
    phone: Optional[str] = None
    created_at: Optional[datetime] = None
