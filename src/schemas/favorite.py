"""Favorite schemas."""

from datetime import datetime

from src.schemas.common import CamelModel


class FavoriteCreate(CamelModel):
    recipe_id: int


class FavoriteRecipeResponse(CamelModel):
    """Summary of the favorited recipe."""

    id: int
    title: str
    description: str
    image_url: str
    servings: int
    cooking_time: int


class FavoriteResponse(CamelModel):
    id: int
    user_id: int
    recipe_id: int
    recipe: FavoriteRecipeResponse
    created_at: datetime
