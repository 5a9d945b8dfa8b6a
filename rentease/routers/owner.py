"""
Owner dashboard endpoints: the owner's listings and the listing editor.
Every route requires a signed-in identity holding the owner role.
"""

from fastapi import APIRouter, Depends, Path, Query, status

from rentease.schemas.dashboard import ListingSaveResponse, OwnerDashboardResponse, OwnerDeleteResponse
from rentease.schemas.error import (
    get_auth_error_responses,
    get_delete_error_responses,
    get_error_responses,
    get_form_error_responses
)
from rentease.schemas.navigation import NavigationResponse
from rentease.schemas.property import PropertyDraft, PropertyDraftResponse
from rentease.services.dashboard import OwnerDashboard
from rentease.services.property import PropertyService
from rentease.services.session import SessionContext
from rentease.utils.dependencies import get_navigation, require_owner

router = APIRouter(prefix="/owner", tags=["Owner"])


async def _dashboard(context: SessionContext, navigation: NavigationResponse) -> OwnerDashboardResponse:
    dashboard = await OwnerDashboard(context.client, context.state.identity).load()
    return dashboard.to_response(navigation)


@router.get(
    "/dashboard",
    response_model=OwnerDashboardResponse,
    summary="Owner dashboard",
    responses=get_auth_error_responses()
)
async def owner_dashboard(
    context: SessionContext = Depends(require_owner),
    navigation: NavigationResponse = Depends(get_navigation)
) -> OwnerDashboardResponse:
    return await _dashboard(context, navigation)


@router.get(
    "/properties/{property_id}/draft",
    response_model=PropertyDraftResponse,
    summary="Edit draft for a listing",
    responses=get_error_responses(401, 403, 404, 502)
)
async def get_listing_draft(
    property_id: str = Path(..., description="Listing ID"),
    context: SessionContext = Depends(require_owner)
) -> PropertyDraftResponse:
    """Pre-filled form values for editing one of the owner's listings."""
    draft = await PropertyService(context.client).draft_for(property_id, context.state.identity)
    return PropertyDraftResponse(property_id=property_id, draft=draft)


@router.post(
    "/properties",
    response_model=ListingSaveResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add a listing",
    responses=get_form_error_responses()
)
async def create_listing(
    draft: PropertyDraft,
    context: SessionContext = Depends(require_owner),
    navigation: NavigationResponse = Depends(get_navigation)
) -> ListingSaveResponse:
    """
    Validate and store a new listing owned by the caller.

    Raises:
        FormValidationError: If a form rule is violated (nothing is sent to the store)
        RemoteServiceError: If the store rejects the insert
    """
    result = await PropertyService(context.client).save_listing(draft, context.state.identity)
    return ListingSaveResponse(
        notice=result.notice,
        property=result.listing,
        dashboard=await _dashboard(context, navigation)
    )


@router.put(
    "/properties/{property_id}",
    response_model=ListingSaveResponse,
    summary="Update a listing",
    responses=get_form_error_responses()
)
async def update_listing(
    draft: PropertyDraft,
    property_id: str = Path(..., description="Listing ID"),
    context: SessionContext = Depends(require_owner),
    navigation: NavigationResponse = Depends(get_navigation)
) -> ListingSaveResponse:
    result = await PropertyService(context.client).save_listing(
        draft, context.state.identity, editing_id=property_id
    )
    return ListingSaveResponse(
        notice=result.notice,
        property=result.listing,
        dashboard=await _dashboard(context, navigation)
    )


@router.delete(
    "/properties/{property_id}",
    response_model=OwnerDeleteResponse,
    summary="Delete a listing",
    responses=get_delete_error_responses()
)
async def delete_listing(
    property_id: str = Path(..., description="Listing ID"),
    confirm: bool = Query(False, description="Explicit confirmation of the deletion"),
    context: SessionContext = Depends(require_owner),
    navigation: NavigationResponse = Depends(get_navigation)
) -> OwnerDeleteResponse:
    """
    Delete one of the caller's listings.

    Raises:
        ConfirmationRequiredError: If ``confirm`` is not true
        PropertyNotFoundError: If the caller has no such listing
    """
    notice = await PropertyService(context.client).delete_listing(
        property_id, confirm, owner=context.state.identity
    )
    return OwnerDeleteResponse(notice=notice, dashboard=await _dashboard(context, navigation))
