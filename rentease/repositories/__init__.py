"""
Repository layer for record store access.
Wraps the hosted backend's collections with typed reads/writes and uniform error translation.
"""

from rentease.repositories.base import BaseRepository
from rentease.repositories.property import PropertyRepository
from rentease.repositories.user import ProfileRepository, RoleAssignment, RoleRepository
from rentease.repositories.contact import ContactRepository

__all__ = [
    "BaseRepository",
    "PropertyRepository",
    "ProfileRepository",
    "RoleAssignment",
    "RoleRepository",
    "ContactRepository"
]
