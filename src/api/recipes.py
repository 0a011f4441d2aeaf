"""Recipe API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from src.api.dependencies import CurrentUser, get_list_params, get_recipe_service, verify_api_key
from src.schemas.common import Envelope, ListParams, Page, success
from src.schemas.recipe import RecipeCreate, RecipeListResponse, RecipeResponse, RecipeUpdate
from src.services.recipe_service import RecipeService

router = APIRouter(
    prefix="/api/v1/recipes", tags=["recipes"], dependencies=[Depends(verify_api_key)]
)

RecipeServiceDep = Annotated[RecipeService, Depends(get_recipe_service)]
ListParamsDep = Annotated[ListParams, Depends(get_list_params)]


# --- Static routes first (before /{recipe_id}) ---


@router.get("", response_model=Envelope[Page[RecipeListResponse]])
def list_recipes(params: ListParamsDep, service: RecipeServiceDep):
    """List all recipes."""
    return success("Get all recipes successfully", service.get_all(params))


@router.get("/user", response_model=Envelope[Page[RecipeListResponse]])
def list_recipes_by_user(
    user_id: Annotated[int, Query(alias="userId")],
    params: ListParamsDep,
    service: RecipeServiceDep,
):
    """List the recipes owned by a user."""
    recipes = service.get_all_by_user_id(user_id, params)
    return success("Get all recipes by user successfully", recipes)


@router.get("/category", response_model=Envelope[Page[RecipeListResponse]])
def list_recipes_by_category(
    category_id: Annotated[int, Query(alias="categoryId")],
    params: ListParamsDep,
    service: RecipeServiceDep,
):
    """List the recipes linked to a category."""
    recipes = service.get_all_by_category_id(category_id, params)
    return success("Get all recipes by category successfully", recipes)


@router.get("/ingredient", response_model=Envelope[Page[RecipeListResponse]])
def list_recipes_by_ingredient(
    ingredient_id: Annotated[int, Query(alias="ingredientId")],
    params: ListParamsDep,
    service: RecipeServiceDep,
):
    """List the recipes that use an ingredient."""
    recipes = service.get_all_by_ingredient_id(ingredient_id, params)
    return success("Get all recipes by ingredient successfully", recipes)


@router.post("", response_model=Envelope[RecipeResponse], status_code=status.HTTP_201_CREATED)
def create_recipe(
    recipe_data: RecipeCreate,
    current_user: CurrentUser,
    service: RecipeServiceDep,
):
    """Create a recipe with its categories, ingredients and steps."""
    recipe = service.create(current_user, recipe_data)
    return success("Create recipe successfully", recipe, status.HTTP_201_CREATED)


# --- Single recipe ---


@router.get("/{recipe_id}", response_model=Envelope[RecipeResponse])
def get_recipe(recipe_id: int, service: RecipeServiceDep):
    """Get a recipe with categories, ingredients, steps and owner."""
    return success("Get recipe successfully", service.get_one(recipe_id))


@router.patch("/{recipe_id}", response_model=Envelope[RecipeResponse])
def update_recipe(
    recipe_id: int,
    recipe_data: RecipeUpdate,
    current_user: CurrentUser,
    service: RecipeServiceDep,
):
    """Update a recipe (owner or admin)."""
    recipe = service.update(recipe_id, current_user, recipe_data)
    return success("Update recipe successfully", recipe)


@router.delete("/{recipe_id}", response_model=Envelope[dict])
def delete_recipe(recipe_id: int, current_user: CurrentUser, service: RecipeServiceDep):
    """Delete a recipe (owner or admin) with its links and steps."""
    service.delete(recipe_id, current_user)
    return success("Delete recipe successfully", {"status": "success"})
