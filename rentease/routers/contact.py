"""
Contact page endpoints.
"""

from fastapi import APIRouter, Depends, status

from rentease.schemas.contact import ContactCreate, ContactPageResponse, ContactSubmitResponse
from rentease.schemas.error import get_error_responses
from rentease.schemas.navigation import NavigationResponse
from rentease.services.contact import ContactService
from rentease.utils.dependencies import get_contact_service, get_navigation

router = APIRouter(prefix="/contact", tags=["Contact"])


@router.get("", response_model=ContactPageResponse, summary="Contact page")
async def contact_page(navigation: NavigationResponse = Depends(get_navigation)) -> ContactPageResponse:
    return ContactPageResponse(navigation=navigation)


@router.post(
    "",
    response_model=ContactSubmitResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Send a message",
    responses=get_error_responses(422, 502)
)
async def send_message(
    message: ContactCreate,
    contact_service: ContactService = Depends(get_contact_service)
) -> ContactSubmitResponse:
    notice = await contact_service.submit(message)
    return ContactSubmitResponse(notice=notice)
