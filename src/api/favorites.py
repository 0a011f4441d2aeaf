"""Favorite API endpoints. Every route acts on the current user's favorites."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from src.api.dependencies import CurrentUser, get_favorite_service, verify_api_key
from src.schemas.common import Envelope, success
from src.schemas.favorite import FavoriteCreate, FavoriteResponse
from src.services.favorite_service import FavoriteService

router = APIRouter(
    prefix="/api/v1/favorites", tags=["favorites"], dependencies=[Depends(verify_api_key)]
)

FavoriteServiceDep = Annotated[FavoriteService, Depends(get_favorite_service)]


@router.get("", response_model=Envelope[list[FavoriteResponse]])
def get_favorites(current_user: CurrentUser, service: FavoriteServiceDep):
    """Get the current user's favorites."""
    favorites = service.get_all_by_user_id(current_user.id)
    return success("Get favorites successfully", favorites)


@router.post("", response_model=Envelope[FavoriteResponse], status_code=status.HTTP_201_CREATED)
def create_favorite(
    favorite_data: FavoriteCreate,
    current_user: CurrentUser,
    service: FavoriteServiceDep,
):
    """Favorite a recipe."""
    favorite = service.create(current_user.id, favorite_data.recipe_id)
    return success("Add favorite successfully", favorite, status.HTTP_201_CREATED)


@router.delete("/{favorite_id}", response_model=Envelope[dict])
def delete_favorite(favorite_id: int, current_user: CurrentUser, service: FavoriteServiceDep):
    """Remove one of the current user's favorites."""
    service.delete(favorite_id, current_user.id)
    return success("Delete favorite successfully", {"status": "success"})
