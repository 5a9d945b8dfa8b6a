"""
Admin moderation endpoints.
"""

from fastapi import APIRouter, Depends, Path, Query

from rentease.schemas.dashboard import AdminDashboardResponse, AdminDeleteResponse
from rentease.schemas.error import get_auth_error_responses, get_delete_error_responses
from rentease.schemas.navigation import NavigationResponse
from rentease.services.dashboard import AdminDashboard
from rentease.services.property import PropertyService
from rentease.services.session import SessionContext
from rentease.utils.dependencies import get_navigation, require_admin

router = APIRouter(prefix="/admin", tags=["Admin"])


@router.get(
    "/dashboard",
    response_model=AdminDashboardResponse,
    summary="Admin dashboard",
    description="All users, listings and contact messages with totals",
    responses=get_auth_error_responses()
)
async def admin_dashboard(
    context: SessionContext = Depends(require_admin),
    navigation: NavigationResponse = Depends(get_navigation)
) -> AdminDashboardResponse:
    dashboard = await AdminDashboard(context.client).load()
    return dashboard.to_response(navigation)


@router.delete(
    "/properties/{property_id}",
    response_model=AdminDeleteResponse,
    summary="Remove any listing",
    responses=get_delete_error_responses()
)
async def moderate_listing(
    property_id: str = Path(..., description="Listing ID"),
    confirm: bool = Query(False, description="Explicit confirmation of the deletion"),
    context: SessionContext = Depends(require_admin),
    navigation: NavigationResponse = Depends(get_navigation)
) -> AdminDeleteResponse:
    """
    Delete exactly the given listing, whoever owns it, then reload the dashboard.

    Raises:
        ConfirmationRequiredError: If ``confirm`` is not true
        PropertyNotFoundError: If no listing has that ID
    """
    notice = await PropertyService(context.client).delete_listing(property_id, confirm)
    dashboard = await AdminDashboard(context.client).load()
    return AdminDeleteResponse(notice=notice, dashboard=dashboard.to_response(navigation))
