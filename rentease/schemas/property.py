"""
Pydantic schemas for listing forms, browse filters and listing views.
"""

from pydantic import BaseModel, Field, ValidationError as PydanticValidationError, field_validator
from pydantic_core import PydanticCustomError
from typing import Any, List, Optional, Union
import math

from rentease.models.property import Listing, PropertyCategory
from rentease.schemas.common import Notice, ViewState
from rentease.schemas.navigation import NavigationResponse
from rentease.utils.exceptions import FormValidationError

TITLE_MAX_LENGTH = 100
LOCATION_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 500


class PropertyDraft(BaseModel):
    """
    Editable listing draft as typed into the form.

    Values are kept raw (rent may arrive as text) so that a rejected draft can
    be handed back exactly as submitted.
    """

    title: str = Field("", description="Listing title", examples=["Cozy room near campus"])
    location: str = Field("", description="Listing location", examples=["Koramangala, Bangalore"])
    rent: Optional[Union[float, str]] = Field("", description="Monthly rent", examples=["8500"])
    type: str = Field(PropertyCategory.PG.value, description="PG, Flat or Room", examples=["Room"])
    description: str = Field("", description="Listing description", examples=["Furnished, wifi included."])

    @classmethod
    def from_listing(cls, listing: Listing) -> "PropertyDraft":
        """Pre-fill the draft from an existing listing for editing."""
        rent = listing.rent
        return cls(
            title=listing.title,
            location=listing.location,
            rent=str(int(rent)) if float(rent).is_integer() else str(rent),
            type=listing.type.value,
            description=listing.description,
        )


def _text_rule(value: Any, label: str, max_length: int) -> str:
    text = "" if value is None else str(value).strip()
    if not text:
        raise PydanticCustomError("required", f"{label} is required")
    if len(text) > max_length:
        raise PydanticCustomError(
            "too_long", f"{label} must be at most {max_length} characters"
        )
    return text


class PropertyForm(BaseModel):
    """
    Validated listing form.

    Rules: title and location 1-100 characters, rent a positive number,
    type one of PG/Flat/Room, description 1-500 characters.
    """

    title: str
    location: str
    rent: float
    type: PropertyCategory
    description: str

    @field_validator("title", mode="before")
    @classmethod
    def validate_title(cls, v):
        return _text_rule(v, "Title", TITLE_MAX_LENGTH)

    @field_validator("location", mode="before")
    @classmethod
    def validate_location(cls, v):
        return _text_rule(v, "Location", LOCATION_MAX_LENGTH)

    @field_validator("rent", mode="before")
    @classmethod
    def validate_rent(cls, v):
        if v is None or (isinstance(v, str) and not v.strip()):
            raise PydanticCustomError("required", "Rent is required")
        if isinstance(v, bool):
            raise PydanticCustomError("not_a_number", "Rent must be a number")
        try:
            rent = float(v)
        except (TypeError, ValueError):
            raise PydanticCustomError("not_a_number", "Rent must be a number")
        if not math.isfinite(rent):
            raise PydanticCustomError("not_a_number", "Rent must be a number")
        if rent <= 0:
            raise PydanticCustomError("not_positive", "Rent must be positive")
        return rent

    @field_validator("type", mode="before")
    @classmethod
    def validate_type(cls, v):
        allowed = [category.value for category in PropertyCategory]
        if v not in allowed:
            raise PydanticCustomError(
                "invalid_choice", f"Property type must be one of: {', '.join(allowed)}"
            )
        return v

    @field_validator("description", mode="before")
    @classmethod
    def validate_description(cls, v):
        return _text_rule(v, "Description", DESCRIPTION_MAX_LENGTH)

    @classmethod
    def from_draft(cls, draft: PropertyDraft) -> "PropertyForm":
        """
        Validate a draft.

        Raises:
            FormValidationError: With the first violated rule as its message
        """
        try:
            return cls.model_validate(draft.model_dump())
        except PydanticValidationError as e:
            errors = e.errors()
            field_errors = [
                {"field": ".".join(str(loc) for loc in error["loc"]), "message": error["msg"]}
                for error in errors
            ]
            raise FormValidationError(
                errors[0]["msg"],
                field_errors=field_errors,
                draft=draft.model_dump()
            )

    def to_record(self) -> dict:
        """Column values for insert/update."""
        return {
            "title": self.title,
            "location": self.location,
            "rent": self.rent,
            "type": self.type.value,
            "description": self.description,
        }


class PropertyFilterCriteria(BaseModel):
    """
    Browse filters as entered in the filter bar.

    ``max_rent`` is kept as typed; a value that does not parse as a finite
    number means "no upper bound".
    """

    location: str = Field("", description="Case-insensitive location substring")
    category: str = Field("all", description="'all' or one of PG, Flat, Room")
    max_rent: Optional[str] = Field("", description="Maximum monthly rent")

    @property
    def max_rent_value(self) -> Optional[float]:
        if self.max_rent is None or not str(self.max_rent).strip():
            return None
        try:
            value = float(self.max_rent)
        except ValueError:
            return None
        return value if math.isfinite(value) else None


class PropertyBrowseResponse(BaseModel):
    state: ViewState
    properties: List[Listing] = Field(default_factory=list)
    total_available: int = Field(0, description="Listings before filtering")
    criteria: PropertyFilterCriteria
    categories: List[str] = Field(
        default_factory=lambda: ["all"] + [category.value for category in PropertyCategory]
    )
    notice: Optional[Notice] = None
    navigation: Optional[NavigationResponse] = None


class PropertyDetailResponse(BaseModel):
    property: Listing
    navigation: Optional[NavigationResponse] = None


class PropertyDraftResponse(BaseModel):
    property_id: str
    draft: PropertyDraft
