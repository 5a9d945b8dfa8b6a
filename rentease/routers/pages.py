"""
Static page and navigation endpoints.
"""

from fastapi import APIRouter, Depends

from rentease.schemas.navigation import NavigationResponse
from rentease.schemas.pages import AboutResponse, HomeResponse
from rentease.services.pages import about_page, home_page
from rentease.utils.dependencies import get_navigation

router = APIRouter(tags=["Pages"])


@router.get("/", response_model=HomeResponse, summary="Home page")
async def home(navigation: NavigationResponse = Depends(get_navigation)) -> HomeResponse:
    return home_page(navigation)


@router.get("/about", response_model=AboutResponse, summary="About page")
async def about(navigation: NavigationResponse = Depends(get_navigation)) -> AboutResponse:
    return about_page(navigation)


@router.get(
    "/navigation",
    response_model=NavigationResponse,
    summary="Navigation shell",
    description="Links and session controls for the caller, recomputed on every request"
)
async def navigation(navigation: NavigationResponse = Depends(get_navigation)) -> NavigationResponse:
    return navigation
