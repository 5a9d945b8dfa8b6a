"""
Public listing endpoints: browse with filters and listing details.
"""

from fastapi import APIRouter, Depends, Path, Query

from rentease.schemas.error import get_error_responses
from rentease.schemas.navigation import NavigationResponse
from rentease.schemas.property import (
    PropertyBrowseResponse,
    PropertyDetailResponse,
    PropertyFilterCriteria
)
from rentease.services.property import PropertyService
from rentease.utils.dependencies import get_navigation, get_property_service

router = APIRouter(prefix="/properties", tags=["Properties"])


@router.get(
    "",
    response_model=PropertyBrowseResponse,
    summary="Browse available properties",
    description="Available listings, newest first, filtered by location, category and maximum rent"
)
async def browse_properties(
    location: str = Query("", description="Case-insensitive location substring"),
    category: str = Query("all", description="'all' or one of PG, Flat, Room"),
    max_rent: str = Query("", description="Maximum monthly rent; blank for no limit"),
    navigation: NavigationResponse = Depends(get_navigation),
    property_service: PropertyService = Depends(get_property_service)
) -> PropertyBrowseResponse:
    criteria = PropertyFilterCriteria(location=location, category=category, max_rent=max_rent)
    response = await property_service.browse(criteria)
    response.navigation = navigation
    return response


@router.get(
    "/{property_id}",
    response_model=PropertyDetailResponse,
    summary="Property details",
    responses=get_error_responses(404)
)
async def get_property(
    property_id: str = Path(..., description="Listing ID"),
    navigation: NavigationResponse = Depends(get_navigation),
    property_service: PropertyService = Depends(get_property_service)
) -> PropertyDetailResponse:
    """
    Get one listing with the owner's contact details.

    Raises:
        ListingUnavailableError: If the listing cannot be loaded (redirects to browse)
    """
    listing = await property_service.get_details(property_id)
    return PropertyDetailResponse(property=listing, navigation=navigation)
