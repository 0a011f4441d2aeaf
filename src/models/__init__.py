"""SQLAlchemy models."""

from src.models.category import Category, Ingredient
from src.models.enums import Role
from src.models.favorite import Favorite
from src.models.recipe import Instruction, Recipe, RecipeCategory, RecipeIngredient
from src.models.user import User, UserSession

__all__ = [
    "Role",
    "User",
    "UserSession",
    "Category",
    "Ingredient",
    "Recipe",
    "RecipeCategory",
    "RecipeIngredient",
    "Instruction",
    "Favorite",
]
