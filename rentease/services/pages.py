"""
Static page content for the home and about views.
"""

from typing import Optional

from rentease.schemas.navigation import NavigationResponse, NavLink
from rentease.schemas.pages import AboutResponse, Feature, HomeResponse

HOME_FEATURES = [
    Feature(title="Easy Search", description="Find your perfect rental with advanced filtering options"),
    Feature(title="Verified Listings", description="All properties are verified for authenticity and quality"),
    Feature(title="For Everyone", description="Perfect for students and working professionals"),
    Feature(title="Manage Properties", description="Owners can easily list and manage their properties"),
]

ABOUT_FEATURES = [
    Feature(
        title="Verified Properties",
        description="All properties are verified by our team to ensure quality and authenticity."
    ),
    Feature(
        title="Easy Management",
        description="Property owners can easily manage their listings through our dashboard."
    ),
    Feature(
        title="Secure Platform",
        description="Your data is protected with industry-standard security measures."
    ),
    Feature(
        title="Customer First",
        description="We prioritize customer satisfaction and provide excellent support."
    ),
]

ABOUT_STORY = [
    "RentEase is a comprehensive rental property management platform designed to bridge "
    "the gap between tenants and property owners. We understand the challenges faced by "
    "students and working professionals when searching for accommodation, and we're here "
    "to make that process seamless and stress-free.",
    "Our platform provides verified property listings, secure user authentication, digital "
    "property management tools, and a seamless search and booking experience. Whether "
    "you're looking for a PG, flat, or room, or you're a property owner wanting to reach "
    "the right tenants, RentEase is your trusted partner.",
]

ABOUT_MISSION = (
    "To create a transparent, efficient, and user-friendly platform that connects property "
    "owners with potential tenants, making the rental process simple, secure, and accessible "
    "for everyone."
)


def home_page(navigation: Optional[NavigationResponse] = None) -> HomeResponse:
    return HomeResponse(
        headline="Simplifying Rentals for Students & Professionals",
        tagline="Find your perfect PG, flat, or room with RentEase - Your trusted rental platform",
        actions=[
            NavLink(label="Browse Properties", path="/properties"),
            NavLink(label="Get Started", path="/auth?mode=signup"),
        ],
        features_heading="Why Choose RentEase?",
        features=HOME_FEATURES,
        navigation=navigation
    )


def about_page(navigation: Optional[NavigationResponse] = None) -> AboutResponse:
    return AboutResponse(
        title="About RentEase",
        subtitle="Simplifying rentals for students and professionals",
        story=ABOUT_STORY,
        features=ABOUT_FEATURES,
        mission=ABOUT_MISSION,
        navigation=navigation
    )
