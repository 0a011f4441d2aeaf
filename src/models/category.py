"""Shared reference data: categories and ingredients."""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from src.database import Base
from src.models.mixins import TimestampMixin


class Category(Base, TimestampMixin):
    """Recipe category. Names are stored lower-cased."""

    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False, unique=True, index=True)
    image_url = Column(String(1024), nullable=False, default="")

    recipe_links = relationship(
        "RecipeCategory", back_populates="category", cascade="all"
    )


class Ingredient(Base, TimestampMixin):
    """Ingredient referenced by recipes. Names are stored lower-cased."""

    __tablename__ = "ingredients"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False, unique=True, index=True)
    image_url = Column(String(1024), nullable=False, default="")

    recipe_links = relationship(
        "RecipeIngredient", back_populates="ingredient", cascade="all"
    )
