"""Categories and ingredients: shared reference data referenced by recipes."""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from src.errors import NotFoundError, ValidationError, store_errors
from src.models.category import Category, Ingredient
from src.models.recipe import RecipeCategory, RecipeIngredient
from src.schemas.category import ReferenceCreate, ReferenceUpdate
from src.schemas.common import ListParams
from src.services.listing import PageResult, paginate

logger = logging.getLogger(__name__)


class ReferenceDataService:
    """CRUD and listing for a named reference entity.

    Names are normalized to lower case on every write.
    """

    model: type
    link_model: type
    link_key: str
    label: str

    def __init__(self, db: Session):
        self.db = db

    def get_all(self, params: ListParams) -> PageResult:
        with store_errors(self.db, f"Error getting {self.label.lower()} list from DB"):
            return paginate(
                self.db.query(self.model),
                params,
                model=self.model,
                name_column=self.model.name,
                search_columns=[self.model.name],
            )

    def get_all_by_recipe_id(self, recipe_id: int) -> list:
        link_column = getattr(self.link_model, self.link_key)
        linked_ids = select(link_column).where(self.link_model.recipe_id == recipe_id)
        with store_errors(self.db, f"Error getting {self.label.lower()} list from DB"):
            return (
                self.db.query(self.model)
                .filter(self.model.id.in_(linked_ids))
                .order_by(self.model.name, self.model.id)
                .all()
            )

    def get_one(self, id_or_name: str | int):
        """Find by numeric id, or else by (case-insensitive) name."""
        with store_errors(self.db, f"Error getting {self.label.lower()} from DB"):
            if isinstance(id_or_name, int) or id_or_name.isdecimal():
                item = self.db.get(self.model, int(id_or_name))
            else:
                item = (
                    self.db.query(self.model)
                    .filter(self.model.name == id_or_name.strip().lower())
                    .first()
                )
        if item is None:
            raise NotFoundError(f"{self.label} not found")
        return item

    def _ensure_name_free(self, name: str, exclude_id: int | None = None) -> None:
        query = self.db.query(self.model.id).filter(self.model.name == name)
        if exclude_id is not None:
            query = query.filter(self.model.id != exclude_id)
        if query.first():
            raise ValidationError(f"{self.label} '{name}' already exists")

    def _commit_unique(self, name: str) -> None:
        """Commit, reporting a name taken by a concurrent write as a duplicate."""
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise ValidationError(f"{self.label} '{name}' already exists") from None

    def create(self, data: ReferenceCreate):
        name = data.name.strip().lower()
        with store_errors(self.db, f"Error creating {self.label.lower()} in DB"):
            self._ensure_name_free(name)
            item = self.model(name=name, image_url=data.image_url)
            self.db.add(item)
            self._commit_unique(name)
            self.db.refresh(item)

        logger.info(f"Created {self.label.lower()} {item.id} '{item.name}'")
        return item

    def update(self, item_id: int, data: ReferenceUpdate):
        item = self.get_one(item_id)
        with store_errors(self.db, f"Error updating {self.label.lower()} in DB"):
            if data.name is not None:
                name = data.name.strip().lower()
                self._ensure_name_free(name, exclude_id=item.id)
                item.name = name
            if data.image_url is not None:
                item.image_url = data.image_url
            self._commit_unique(item.name)
            self.db.refresh(item)
        return item

    def delete(self, item_id: int) -> None:
        """Delete the entity. Recipes lose their links to it."""
        item = self.get_one(item_id)
        with store_errors(self.db, f"Error deleting {self.label.lower()} in DB"):
            self.db.delete(item)
            self.db.commit()

        logger.info(f"Deleted {self.label.lower()} {item_id}")


class CategoryService(ReferenceDataService):
    model = Category
    link_model = RecipeCategory
    link_key = "category_id"
    label = "Category"


class IngredientService(ReferenceDataService):
    model = Ingredient
    link_model = RecipeIngredient
    link_key = "ingredient_id"
    label = "Ingredient"
