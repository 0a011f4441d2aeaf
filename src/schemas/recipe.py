"""Recipe schemas."""

from datetime import datetime

from pydantic import Field, model_validator

from src.schemas.common import CamelModel
from src.schemas.instruction import InstructionResponse


def _check_unique_steps(instructions: list) -> None:
    steps = [instruction.step_number for instruction in instructions]
    if len(steps) != len(set(steps)):
        raise ValueError("Instruction step numbers must be unique")


# --- Nested inputs ---


class RecipeCategoryLink(CamelModel):
    """Category to attach to a new recipe."""

    id: int


class RecipeCategoryUpdate(CamelModel):
    """Category link of an existing recipe. Without `id` a new link is added."""

    id: int | None = None
    category_id: int


class RecipeIngredientCreate(CamelModel):
    """Ingredient to attach to a new recipe."""

    quantity: float = Field(..., gt=0)
    unit: str = Field(..., max_length=50)
    ingredient_id: int


class RecipeIngredientUpdate(RecipeIngredientCreate):
    """Ingredient link of an existing recipe. Without `id` a new link is added."""

    id: int | None = None


class RecipeInstructionCreate(CamelModel):
    """Instruction step of a new recipe."""

    text: str = Field(..., min_length=1, max_length=10000)
    step_number: int = Field(..., ge=1)


class RecipeInstructionUpdate(RecipeInstructionCreate):
    """Instruction of an existing recipe. Without `id` a new step is added."""

    id: int | None = None


# --- Recipe ---


class RecipeCreate(CamelModel):
    """Create a new recipe with its categories, ingredients and steps."""

    title: str = Field(..., min_length=1, max_length=255)
    description: str = Field("", max_length=5000)
    image_url: str = Field("", max_length=1024)
    servings: int = Field(..., gt=0)
    cooking_time: int = Field(..., gt=0)
    categories: list[RecipeCategoryLink] = []
    ingredients: list[RecipeIngredientCreate] = []
    instructions: list[RecipeInstructionCreate] = []

    @model_validator(mode="after")
    def validate_steps(self) -> "RecipeCreate":
        _check_unique_steps(self.instructions)
        return self


class RecipeUpdate(CamelModel):
    """Update a recipe. Omitted scalar fields and child rows are left unchanged."""

    title: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = Field(None, max_length=5000)
    image_url: str | None = Field(None, max_length=1024)
    servings: int | None = Field(None, gt=0)
    cooking_time: int | None = Field(None, gt=0)
    categories: list[RecipeCategoryUpdate] = []
    ingredients: list[RecipeIngredientUpdate] = []
    instructions: list[RecipeInstructionUpdate] = []

    @model_validator(mode="after")
    def validate_steps(self) -> "RecipeUpdate":
        _check_unique_steps(self.instructions)
        return self


# --- Responses ---


class RecipeOwnerResponse(CamelModel):
    """Public fields of the recipe owner."""

    id: int
    name: str
    username: str
    avatar: str


class RecipeCategoryResponse(CamelModel):
    id: int
    category_id: int
    name: str


class RecipeIngredientResponse(CamelModel):
    id: int
    ingredient_id: int
    name: str
    quantity: float
    unit: str


class RecipeListResponse(CamelModel):
    """Recipe list item (without ingredients and steps)."""

    id: int
    user_id: int
    title: str
    description: str
    image_url: str
    servings: int
    cooking_time: int
    user: RecipeOwnerResponse
    categories: list[RecipeCategoryResponse]
    created_at: datetime
    updated_at: datetime


class RecipeResponse(RecipeListResponse):
    """Recipe with every nested collection expanded."""

    ingredients: list[RecipeIngredientResponse]
    instructions: list[InstructionResponse]
