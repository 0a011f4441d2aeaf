"""Shared schemas: camelCase base model, response envelope and paginated listings."""

from enum import Enum
from typing import Generic, Literal, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

DataT = TypeVar("DataT")
ItemT = TypeVar("ItemT")


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys. Accepts either case on input."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class Envelope(BaseModel, Generic[DataT]):
    """Uniform response wrapper for every API endpoint."""

    status: Literal["success", "error"] = "success"
    message: str
    code: int
    data: DataT | None = None


def success(message: str, data=None, code: int = 200) -> dict:
    """Build a success envelope for a handler to return."""
    return {"status": "success", "message": message, "code": code, "data": data}


def error(message: str, code: int) -> dict:
    """Build an error envelope."""
    return {"status": "error", "message": message, "code": code, "data": None}


# --- Listing ---


class SortOption(str, Enum):
    """Sort orders understood by the listing endpoints."""

    A_Z = "a-z"
    Z_A = "z-a"
    NEWEST = "newest"
    LATEST = "latest"

    @classmethod
    def parse(cls, value: str | None) -> "SortOption":
        """Map a raw query value to a sort option, falling back to a-z."""
        try:
            return cls(value)
        except ValueError:
            return cls.A_Z


class ListParams(BaseModel):
    """Pagination, sort and search parameters for a listing."""

    page: int = Field(1, ge=1)
    limit: int = Field(10, ge=1, le=100)
    sort: SortOption = SortOption.A_Z
    search: str | None = None


class PageMetadata(CamelModel):
    total: int
    page: int
    limit: int
    total_pages: int
    has_next_page: bool
    has_previous_page: bool


class Page(CamelModel, Generic[ItemT]):
    """A single page of results plus pagination metadata."""

    data: list[ItemT]
    metadata: PageMetadata
