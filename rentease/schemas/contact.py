"""
Contact form schemas.
"""

from pydantic import BaseModel, EmailStr, Field, field_validator
from typing import Optional

from rentease.schemas.common import Notice
from rentease.schemas.navigation import NavigationResponse


class ContactCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100, examples=["Ravi Kumar"])
    email: EmailStr = Field(..., examples=["ravi@example.com"])
    message: str = Field(..., min_length=1, max_length=1000, examples=["Is the Koramangala flat still free?"])

    @field_validator("name", "message")
    @classmethod
    def strip_text(cls, v):
        if not v.strip():
            raise ValueError("Field cannot be blank")
        return v.strip()


class ContactPageResponse(BaseModel):
    title: str = "Contact Us"
    subtitle: str = "Have a question? Send us a message and we'll get back to you."
    navigation: Optional[NavigationResponse] = None


class ContactSubmitResponse(BaseModel):
    notice: Notice
