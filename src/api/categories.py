"""Category API endpoints. Reads are public; writes require an admin session."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from src.api.dependencies import AdminUser, get_category_service, get_list_params, verify_api_key
from src.schemas.category import CategoryCreate, CategoryResponse, CategoryUpdate
from src.schemas.common import Envelope, ListParams, Page, success
from src.services.reference_data import CategoryService

router = APIRouter(
    prefix="/api/v1/categories", tags=["categories"], dependencies=[Depends(verify_api_key)]
)

CategoryServiceDep = Annotated[CategoryService, Depends(get_category_service)]


@router.get("", response_model=Envelope[Page[CategoryResponse]])
def get_categories(
    params: Annotated[ListParams, Depends(get_list_params)],
    service: CategoryServiceDep,
):
    """List categories with pagination, sort and name search."""
    return success("Get all categories successfully", service.get_all(params))


@router.get("/recipe", response_model=Envelope[list[CategoryResponse]])
def get_categories_by_recipe(
    recipe_id: Annotated[int, Query(alias="recipeId")],
    service: CategoryServiceDep,
):
    """Get the categories linked to a recipe."""
    return success("Get categories successfully", service.get_all_by_recipe_id(recipe_id))


@router.get("/{category_id_or_name}", response_model=Envelope[CategoryResponse])
def get_category(category_id_or_name: str, service: CategoryServiceDep):
    """Get a category by id or by name."""
    return success("Get category successfully", service.get_one(category_id_or_name))


@router.post("", response_model=Envelope[CategoryResponse], status_code=status.HTTP_201_CREATED)
def create_category(
    category_data: CategoryCreate,
    current_user: AdminUser,
    service: CategoryServiceDep,
):
    """Create a category (admin only)."""
    category = service.create(category_data)
    return success("Create category successfully", category, status.HTTP_201_CREATED)


@router.patch("/{category_id}", response_model=Envelope[CategoryResponse])
def update_category(
    category_id: int,
    category_data: CategoryUpdate,
    current_user: AdminUser,
    service: CategoryServiceDep,
):
    """Update a category (admin only)."""
    return success("Update category successfully", service.update(category_id, category_data))


@router.delete("/{category_id}", response_model=Envelope[dict])
def delete_category(category_id: int, current_user: AdminUser, service: CategoryServiceDep):
    """Delete a category (admin only). Recipes keep existing without it."""
    service.delete(category_id)
    return success("Delete category successfully", {"status": "success"})
