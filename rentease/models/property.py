"""
Property listing record.
Rows of the ``properties`` collection, optionally with the owner's profile embedded.
"""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime
import enum


class PropertyCategory(str, enum.Enum):
    """Listing category, stored in the ``type`` column."""
    PG = "PG"
    FLAT = "Flat"
    ROOM = "Room"


class OwnerSummary(BaseModel):
    """Owner profile fields embedded into a listing."""

    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None


class Listing(BaseModel):
    """A rental property owned by one identity."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: str
    title: str
    location: str
    rent: float
    type: PropertyCategory
    description: str
    is_available: bool = True
    image_url: Optional[str] = None
    owner_id: Optional[str] = None
    created_at: Optional[datetime] = None

    # Embedded as ``profiles:owner_id(...)`` by the record store
    owner: Optional[OwnerSummary] = Field(
        None,
        validation_alias=AliasChoices("profiles", "owner")
    )

    @property
    def owner_name(self) -> Optional[str]:
        return self.owner.name if self.owner else None
