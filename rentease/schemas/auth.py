"""
Pydantic schemas for sign-in, sign-up and session state.
"""

from pydantic import BaseModel, EmailStr, Field, field_validator
from typing import List, Optional

from rentease.models.user import Identity, UserRole
from rentease.schemas.common import Notice
from rentease.schemas.navigation import NavigationResponse


class LoginRequest(BaseModel):
    """Schema for login request."""

    email: EmailStr = Field(..., description="Account email address", examples=["owner@example.com"])
    password: str = Field(..., min_length=1, description="Account password")

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v):
        return v.lower()


class SignupRequest(BaseModel):
    """Schema for account creation; the name becomes the profile display name."""

    name: str = Field(..., min_length=1, max_length=100, description="Display name", examples=["Asha Rao"])
    email: EmailStr = Field(..., description="Account email address")
    password: str = Field(..., min_length=6, max_length=72, description="Account password")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        if not v.strip():
            raise ValueError("Name cannot be empty")
        return v.strip()

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v):
        return v.lower()


class SessionResponse(BaseModel):
    """Resolved session: identity and role capabilities."""

    is_authenticated: bool = False
    identity: Optional[Identity] = None
    roles: List[UserRole] = Field(default_factory=list)
    is_owner: bool = False
    is_admin: bool = False


class LoginResponse(BaseModel):
    access_token: Optional[str] = Field(None, description="Opaque session token (Bearer)")
    token_type: str = "bearer"
    session: SessionResponse
    notice: Notice
    redirect_to: Optional[str] = None
    navigation: NavigationResponse


class LogoutResponse(BaseModel):
    notice: Notice
    redirect_to: str = "/"
    navigation: NavigationResponse
