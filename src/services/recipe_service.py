"""Recipe service: the recipe aggregate and recipe listings."""

import logging
from collections.abc import Iterable

from sqlalchemy.orm import Query, Session, selectinload

from src.errors import AuthorizationError, NotFoundError, ValidationError, store_errors
from src.models.category import Category, Ingredient
from src.models.recipe import Instruction, Recipe, RecipeCategory, RecipeIngredient
from src.models.user import User
from src.schemas.common import ListParams
from src.schemas.recipe import (
    RecipeCategoryUpdate,
    RecipeCreate,
    RecipeIngredientUpdate,
    RecipeInstructionUpdate,
    RecipeUpdate,
)
from src.services.listing import PageResult, paginate

logger = logging.getLogger(__name__)

SCALAR_FIELDS = ("title", "description", "image_url", "servings", "cooking_time")


class RecipeService:
    """Service for the recipe aggregate.

    A recipe is written together with its category links, ingredient links
    and instruction steps in a single transaction; a failure anywhere rolls
    the whole write back.
    """

    def __init__(self, db: Session):
        self.db = db

    # --- Reads ---

    def _list_query(self) -> Query:
        return self.db.query(Recipe).options(
            selectinload(Recipe.user),
            selectinload(Recipe.categories).selectinload(RecipeCategory.category),
        )

    def _paginate(self, query: Query, params: ListParams) -> PageResult:
        with store_errors(self.db, "Error getting recipes from DB"):
            return paginate(
                query,
                params,
                model=Recipe,
                name_column=Recipe.title,
                search_columns=[Recipe.title, Recipe.description],
            )

    def get_all(self, params: ListParams) -> PageResult:
        return self._paginate(self._list_query(), params)

    def get_all_by_user_id(self, user_id: int, params: ListParams) -> PageResult:
        return self._paginate(self._list_query().filter(Recipe.user_id == user_id), params)

    def get_all_by_category_id(self, category_id: int, params: ListParams) -> PageResult:
        query = self._list_query().filter(
            Recipe.categories.any(RecipeCategory.category_id == category_id)
        )
        return self._paginate(query, params)

    def get_all_by_ingredient_id(self, ingredient_id: int, params: ListParams) -> PageResult:
        query = self._list_query().filter(
            Recipe.ingredients.any(RecipeIngredient.ingredient_id == ingredient_id)
        )
        return self._paginate(query, params)

    def get_one(self, recipe_id: int) -> Recipe:
        """Load a recipe with every nested collection expanded."""
        with store_errors(self.db, "Error getting recipe from DB"):
            recipe = (
                self._list_query()
                .options(
                    selectinload(Recipe.ingredients).selectinload(RecipeIngredient.ingredient),
                    selectinload(Recipe.instructions),
                )
                .filter(Recipe.id == recipe_id)
                .first()
            )
        if not recipe:
            raise NotFoundError("Recipe not found")
        return recipe

    # --- Writes ---

    def _ensure_exist(self, model, ids: Iterable[int], label: str) -> None:
        ids = set(ids)
        if not ids:
            return
        found = {row_id for (row_id,) in self.db.query(model.id).filter(model.id.in_(ids))}
        missing = sorted(ids - found)
        if missing:
            raise NotFoundError(f"{label} not found: {', '.join(map(str, missing))}")

    def _get_for_write(self, recipe_id: int, user: User) -> Recipe:
        """Fetch a recipe the user may modify: the owner or an admin."""
        recipe = self.db.get(Recipe, recipe_id)
        if not recipe:
            raise NotFoundError("Recipe not found")
        if recipe.user_id != user.id and not user.role.is_admin():
            raise AuthorizationError("You are not allowed to modify this recipe")
        return recipe

    def create(self, user: User, data: RecipeCreate) -> Recipe:
        """Create a recipe with its categories, ingredients and steps."""
        # Repeated category ids collapse to one link
        category_ids = list(dict.fromkeys(link.id for link in data.categories))

        with store_errors(self.db, "Error creating recipe in DB"):
            self._ensure_exist(Category, category_ids, "Category")
            self._ensure_exist(
                Ingredient, (i.ingredient_id for i in data.ingredients), "Ingredient"
            )

            recipe = Recipe(
                user_id=user.id,
                title=data.title,
                description=data.description,
                image_url=data.image_url,
                servings=data.servings,
                cooking_time=data.cooking_time,
            )
            recipe.categories = [RecipeCategory(category_id=cid) for cid in category_ids]
            recipe.ingredients = [
                RecipeIngredient(
                    ingredient_id=ing.ingredient_id, quantity=ing.quantity, unit=ing.unit
                )
                for ing in data.ingredients
            ]
            recipe.instructions = [
                Instruction(step_number=step.step_number, text=step.text)
                for step in data.instructions
            ]

            self.db.add(recipe)
            self.db.commit()
            recipe_id = recipe.id

        logger.info(
            f"Created recipe {recipe_id} for user {user.id} with "
            f"{len(category_ids)} categories, {len(data.ingredients)} ingredients, "
            f"{len(data.instructions)} steps"
        )
        return self.get_one(recipe_id)

    def update(self, recipe_id: int, user: User, data: RecipeUpdate) -> Recipe:
        """Update scalar fields and child rows of a recipe.

        Child entries with an `id` update that row, entries without one are
        added. Rows not mentioned are left as they are. A category link moved
        to another category is re-created with a new id.
        """
        with store_errors(self.db, "Error updating recipe in DB"):
            recipe = self._get_for_write(recipe_id, user)

            for field in SCALAR_FIELDS:
                value = getattr(data, field)
                if value is not None:
                    setattr(recipe, field, value)

            self._ensure_exist(Category, (c.category_id for c in data.categories), "Category")
            self._ensure_exist(
                Ingredient, (i.ingredient_id for i in data.ingredients), "Ingredient"
            )
            self._apply_categories(recipe, data.categories)
            self._apply_ingredients(recipe, data.ingredients)
            self._apply_instructions(recipe, data.instructions)

            # Child-only edits still count as an update of the recipe
            recipe.touch()
            self.db.commit()

        logger.info(f"Updated recipe {recipe_id} by user {user.id}")
        return self.get_one(recipe_id)

    def _rows_by_id(self, rows: list, entries: list, label: str) -> dict:
        by_id = {row.id: row for row in rows}
        for entry in entries:
            if entry.id is not None and entry.id not in by_id:
                raise NotFoundError(f"{label} {entry.id} not found in recipe")
        return by_id

    def _apply_categories(self, recipe: Recipe, entries: list[RecipeCategoryUpdate]) -> None:
        self._rows_by_id(recipe.categories, entries, "Recipe category")
        final = {link.id: link.category_id for link in recipe.categories}
        for entry in entries:
            if entry.id is not None:
                final[entry.id] = entry.category_id
        added = [entry.category_id for entry in entries if entry.id is None]

        category_ids = [*final.values(), *added]
        if len(category_ids) != len(set(category_ids)):
            raise ValidationError("A category can only be linked to a recipe once")

        # Re-pointed links are replaced, never updated in place, so no flushed
        # state repeats a (recipe_id, category_id) pair
        changed = [link for link in recipe.categories if final[link.id] != link.category_id]
        replacements = [final[link.id] for link in changed]
        if changed:
            for link in changed:
                recipe.categories.remove(link)
            self.db.flush()
        for category_id in [*replacements, *added]:
            recipe.categories.append(RecipeCategory(category_id=category_id))

    def _apply_ingredients(self, recipe: Recipe, entries: list[RecipeIngredientUpdate]) -> None:
        by_id = self._rows_by_id(recipe.ingredients, entries, "Recipe ingredient")
        for entry in entries:
            if entry.id is None:
                recipe.ingredients.append(
                    RecipeIngredient(
                        ingredient_id=entry.ingredient_id, quantity=entry.quantity, unit=entry.unit
                    )
                )
            else:
                row = by_id[entry.id]
                row.ingredient_id = entry.ingredient_id
                row.quantity = entry.quantity
                row.unit = entry.unit

    def _apply_instructions(self, recipe: Recipe, entries: list[RecipeInstructionUpdate]) -> None:
        by_id = self._rows_by_id(recipe.instructions, entries, "Instruction")
        for entry in entries:
            if entry.id is None:
                recipe.instructions.append(
                    Instruction(step_number=entry.step_number, text=entry.text)
                )
            else:
                row = by_id[entry.id]
                row.step_number = entry.step_number
                row.text = entry.text

        steps = [step.step_number for step in recipe.instructions]
        if len(steps) != len(set(steps)):
            raise ValidationError("Instruction step numbers must be unique")

    def delete(self, recipe_id: int, user: User) -> None:
        """Delete a recipe with its links, steps and favorites."""
        with store_errors(self.db, "Error deleting recipe in DB"):
            recipe = self._get_for_write(recipe_id, user)
            self.db.delete(recipe)
            self.db.commit()

        logger.info(f"Deleted recipe {recipe_id} by user {user.id}")
