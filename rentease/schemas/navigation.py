"""
Navigation shell schemas.
"""

from pydantic import BaseModel, Field
from typing import List, Optional


class NavLink(BaseModel):
    label: str = Field(..., examples=["Properties"])
    path: str = Field(..., examples=["/properties"])


class SessionControl(BaseModel):
    """Login/logout control; ``method`` is set for controls that submit an action."""

    label: str = Field(..., examples=["Logout"])
    path: str = Field(..., examples=["/auth/logout"])
    method: Optional[str] = Field(None, examples=["POST"])


class NavigationResponse(BaseModel):
    brand: str = Field("RentEase", description="Brand name linking home")
    links: List[NavLink] = Field(default_factory=list)
    controls: List[SessionControl] = Field(default_factory=list)
    is_authenticated: bool = False
