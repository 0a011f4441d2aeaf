"""Recipe aggregate models: recipe, its category and ingredient links, and its steps."""

from sqlalchemy import Column, Float, ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import relationship

from src.database import Base
from src.models.mixins import TimestampMixin


class Recipe(Base, TimestampMixin):
    """Recipe owned by a user. Owns its links and instruction steps."""

    __tablename__ = "recipes"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    title = Column(String(255), nullable=False, index=True)
    description = Column(Text, nullable=False, default="")
    image_url = Column(String(1024), nullable=False, default="")
    servings = Column(Integer, nullable=False)
    cooking_time = Column(Integer, nullable=False)  # minutes

    # Relationships
    user = relationship("User", backref="recipes")
    categories = relationship(
        "RecipeCategory",
        back_populates="recipe",
        cascade="all, delete-orphan",
        order_by="RecipeCategory.id",
    )
    ingredients = relationship(
        "RecipeIngredient",
        back_populates="recipe",
        cascade="all, delete-orphan",
        order_by="RecipeIngredient.id",
    )
    instructions = relationship(
        "Instruction",
        back_populates="recipe",
        cascade="all, delete-orphan",
        order_by="Instruction.step_number",
    )
    favorites = relationship("Favorite", back_populates="recipe", cascade="all")


class RecipeCategory(Base, TimestampMixin):
    """Link between a recipe and a category."""

    __tablename__ = "recipe_categories"
    __table_args__ = (UniqueConstraint("recipe_id", "category_id"),)

    id = Column(Integer, primary_key=True, index=True)
    recipe_id = Column(
        Integer, ForeignKey("recipes.id", ondelete="CASCADE"), nullable=False, index=True
    )
    category_id = Column(
        Integer, ForeignKey("categories.id", ondelete="CASCADE"), nullable=False, index=True
    )

    # Relationships
    recipe = relationship("Recipe", back_populates="categories")
    category = relationship("Category", back_populates="recipe_links")

    @property
    def name(self) -> str:
        return self.category.name


class RecipeIngredient(Base, TimestampMixin):
    """Ingredient used by a recipe, with its quantity and unit."""

    __tablename__ = "recipe_ingredients"

    id = Column(Integer, primary_key=True, index=True)
    recipe_id = Column(
        Integer, ForeignKey("recipes.id", ondelete="CASCADE"), nullable=False, index=True
    )
    ingredient_id = Column(
        Integer, ForeignKey("ingredients.id", ondelete="CASCADE"), nullable=False, index=True
    )
    quantity = Column(Float, nullable=False)
    unit = Column(String(50), nullable=False)  # e.g. "g", "tbsp"

    # Relationships
    recipe = relationship("Recipe", back_populates="ingredients")
    ingredient = relationship("Ingredient", back_populates="recipe_links")

    @property
    def name(self) -> str:
        return self.ingredient.name


class Instruction(Base, TimestampMixin):
    """A single numbered step of a recipe."""

    __tablename__ = "instructions"

    id = Column(Integer, primary_key=True, index=True)
    recipe_id = Column(
        Integer, ForeignKey("recipes.id", ondelete="CASCADE"), nullable=False, index=True
    )
    step_number = Column(Integer, nullable=False)
    text = Column(Text, nullable=False)

    # Relationships
    recipe = relationship("Recipe", back_populates="instructions")
