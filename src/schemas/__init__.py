"""Pydantic schemas for API requests and responses."""

from src.schemas.auth import SessionRequest, SessionResponse, UserLogin, UserRegister, UserResponse
from src.schemas.category import ReferenceCreate, ReferenceResponse, ReferenceUpdate
from src.schemas.common import Envelope, ListParams, Page, SortOption
from src.schemas.favorite import FavoriteCreate, FavoriteResponse
from src.schemas.instruction import InstructionCreate, InstructionResponse, InstructionUpdate
from src.schemas.recipe import RecipeCreate, RecipeListResponse, RecipeResponse, RecipeUpdate

__all__ = [
    "Envelope",
    "Page",
    "ListParams",
    "SortOption",
    "UserRegister",
    "UserLogin",
    "SessionRequest",
    "SessionResponse",
    "UserResponse",
    "ReferenceCreate",
    "ReferenceUpdate",
    "ReferenceResponse",
    "InstructionCreate",
    "InstructionUpdate",
    "InstructionResponse",
    "RecipeCreate",
    "RecipeUpdate",
    "RecipeResponse",
    "RecipeListResponse",
    "FavoriteCreate",
    "FavoriteResponse",
]
