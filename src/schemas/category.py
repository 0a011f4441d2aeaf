"""Category and ingredient schemas."""

from datetime import datetime

from pydantic import Field

from src.schemas.common import CamelModel


class ReferenceCreate(CamelModel):
    """Create a category or ingredient."""

    name: str = Field(..., min_length=1, max_length=255)
    image_url: str = Field("", max_length=1024)


class ReferenceUpdate(CamelModel):
    """Update a category or ingredient."""

    name: str | None = Field(None, min_length=1, max_length=255)
    image_url: str | None = Field(None, max_length=1024)


class ReferenceResponse(CamelModel):
    """Category or ingredient response."""

    id: int
    name: str
    image_url: str
    created_at: datetime
    updated_at: datetime


CategoryCreate = ReferenceCreate
CategoryUpdate = ReferenceUpdate
CategoryResponse = ReferenceResponse

IngredientCreate = ReferenceCreate
IngredientUpdate = ReferenceUpdate
IngredientResponse = ReferenceResponse
