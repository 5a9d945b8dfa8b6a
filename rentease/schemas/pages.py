"""
Static page schemas (home, about).
"""

from pydantic import BaseModel, Field
from typing import List, Optional

from rentease.schemas.navigation import NavigationResponse, NavLink


class Feature(BaseModel):
    title: str
    description: str


class HomeResponse(BaseModel):
    headline: str
    tagline: str
    actions: List[NavLink] = Field(default_factory=list)
    features_heading: str
    features: List[Feature] = Field(default_factory=list)
    navigation: Optional[NavigationResponse] = None


class AboutResponse(BaseModel):
    title: str
    subtitle: str
    story: List[str] = Field(default_factory=list)
    features: List[Feature] = Field(default_factory=list)
    mission: str
    navigation: Optional[NavigationResponse] = None
