"""Ingredient API endpoints. Reads are public; writes require an admin session."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from src.api.dependencies import AdminUser, get_ingredient_service, get_list_params, verify_api_key
from src.schemas.category import IngredientCreate, IngredientResponse, IngredientUpdate
from src.schemas.common import Envelope, ListParams, Page, success
from src.services.reference_data import IngredientService

router = APIRouter(
    prefix="/api/v1/ingredients", tags=["ingredients"], dependencies=[Depends(verify_api_key)]
)

IngredientServiceDep = Annotated[IngredientService, Depends(get_ingredient_service)]


@router.get("", response_model=Envelope[Page[IngredientResponse]])
def get_ingredients(
    params: Annotated[ListParams, Depends(get_list_params)],
    service: IngredientServiceDep,
):
    return success("Get all ingredients successfully", service.get_all(params))


@router.get("/recipe", response_model=Envelope[list[IngredientResponse]])
def get_ingredients_by_recipe(
    recipe_id: Annotated[int, Query(alias="recipeId")],
    service: IngredientServiceDep,
):
    return success("Get ingredients successfully", service.get_all_by_recipe_id(recipe_id))


@router.get("/{ingredient_id_or_name}", response_model=Envelope[IngredientResponse])
def get_ingredient(ingredient_id_or_name: str, service: IngredientServiceDep):
    return success("Get ingredient successfully", service.get_one(ingredient_id_or_name))


@router.post(
    "", response_model=Envelope[IngredientResponse], status_code=status.HTTP_201_CREATED
)
def create_ingredient(
    ingredient_data: IngredientCreate,
    current_user: AdminUser,
    service: IngredientServiceDep,
):
    """Create an ingredient (admin only)."""
    ingredient = service.create(ingredient_data)
    return success("Create ingredient successfully", ingredient, status.HTTP_201_CREATED)


@router.patch("/{ingredient_id}", response_model=Envelope[IngredientResponse])
def update_ingredient(
    ingredient_id: int,
    ingredient_data: IngredientUpdate,
    current_user: AdminUser,
    service: IngredientServiceDep,
):
    """Update an ingredient (admin only)."""
    ingredient = service.update(ingredient_id, ingredient_data)
    return success("Update ingredient successfully", ingredient)


@router.delete("/{ingredient_id}", response_model=Envelope[dict])
def delete_ingredient(
    ingredient_id: int, current_user: AdminUser, service: IngredientServiceDep
):
    """Delete an ingredient (admin only). Recipe links to it are removed."""
    service.delete(ingredient_id)
    return success("Delete ingredient successfully", {"status": "success"})
