"""
Record models for the RentEase web application.
Plain pydantic records for the collections consumed from the hosted backend.
"""

from rentease.models.user import Identity, Profile, UserRole
from rentease.models.property import Listing, OwnerSummary, PropertyCategory
from rentease.models.contact import ContactMessage

# Export all models for easy importing
__all__ = [
    "Identity",
    "Profile",
    "UserRole",
    "Listing",
    "OwnerSummary",
    "PropertyCategory",
    "ContactMessage",
]
