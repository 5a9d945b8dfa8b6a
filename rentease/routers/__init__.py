"""
Route handlers for the RentEase web application.
"""

from .admin import router as admin_router
from .auth import router as auth_router
from .contact import router as contact_router
from .owner import router as owner_router
from .pages import router as pages_router
from .properties import router as properties_router

__all__ = [
    "admin_router",
    "auth_router",
    "contact_router",
    "owner_router",
    "pages_router",
    "properties_router"
]
