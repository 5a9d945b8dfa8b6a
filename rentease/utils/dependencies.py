"""
FastAPI dependency injection utilities for sessions, backend clients and page access.
Provides reusable dependencies for route protection and service construction.
"""

from typing import Any, Optional
from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from rentease.schemas.navigation import NavigationResponse
from rentease.services.contact import ContactService
from rentease.services.navigation import build_navigation
from rentease.services.property import PropertyService
from rentease.services.session import PAGE_ROLES, Page, SessionContext, SessionManager, SessionState
from rentease.utils.exceptions import AccessDeniedError, AuthenticationRequiredError


# HTTP Bearer token security scheme; the token is the opaque session handle
security = HTTPBearer(auto_error=False)


def get_session_manager(request: Request) -> SessionManager:
    """Process-wide session registry created at application startup."""
    return request.app.state.session_manager


async def get_optional_session(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    manager: SessionManager = Depends(get_session_manager)
) -> Optional[SessionContext]:
    """
    Get the caller's live session context if the token is known.

    Waits for any in-flight role re-evaluation so the view never renders
    with stale capabilities.

    Returns:
        SessionContext if the token maps to a live session, None otherwise
    """
    if not credentials:
        return None

    context = manager.get(credentials.credentials)
    if context is None:
        return None

    await context.settle()
    return None if context.closed else context


async def get_session_state(
    context: Optional[SessionContext] = Depends(get_optional_session)
) -> SessionState:
    return context.state if context is not None else SessionState.anonymous()


async def get_navigation(
    state: SessionState = Depends(get_session_state)
) -> NavigationResponse:
    return build_navigation(state)


async def get_store_client(
    context: Optional[SessionContext] = Depends(get_optional_session),
    manager: SessionManager = Depends(get_session_manager)
) -> Any:
    """
    Backend client for the caller.

    Signed-in callers use their own session client so the store sees their
    identity; everyone else shares the anonymous client.
    """
    if context is not None:
        return context.client
    return await manager.anonymous_client()


async def get_property_service(client: Any = Depends(get_store_client)) -> PropertyService:
    return PropertyService(client)


async def get_contact_service(client: Any = Depends(get_store_client)) -> ContactService:
    return ContactService(client)


def require_page_access(page: Page):
    """
    Create a dependency that gates a page on its required role.

    Runs before the view body, so nothing of the page is produced for a
    caller who may not see it.

    Args:
        page: Page being requested

    Returns:
        Dependency function yielding the caller's session context

    Raises:
        AuthenticationRequiredError: If no one is signed in
        AccessDeniedError: If the signed-in identity lacks the role
    """
    async def page_access_dependency(
        context: Optional[SessionContext] = Depends(get_optional_session)
    ) -> SessionContext:
        if context is None or not context.state.is_authenticated:
            raise AuthenticationRequiredError()

        if not context.state.can_access(page):
            role = PAGE_ROLES[page]
            raise AccessDeniedError(f"Access denied. {role.label} role required.")

        return context

    return page_access_dependency


require_owner = require_page_access(Page.OWNER_DASHBOARD)
require_admin = require_page_access(Page.ADMIN_DASHBOARD)
