"""Favorite service."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, selectinload

from src.errors import NotFoundError, ValidationError, store_errors
from src.models.favorite import Favorite
from src.models.recipe import Recipe

logger = logging.getLogger(__name__)


class FavoriteService:
    """Per-user recipe bookmarks. A user can favorite a recipe only once."""

    def __init__(self, db: Session):
        self.db = db

    def get_all_by_user_id(self, user_id: int) -> list[Favorite]:
        with store_errors(self.db, "Error getting favorites from DB"):
            return (
                self.db.query(Favorite)
                .options(selectinload(Favorite.recipe))
                .filter(Favorite.user_id == user_id)
                .order_by(Favorite.created_at.desc(), Favorite.id.desc())
                .all()
            )

    def create(self, user_id: int, recipe_id: int) -> Favorite:
        """Favorite a recipe.

        The unique (user_id, recipe_id) constraint backs the pre-check, so a
        concurrent duplicate also fails as a validation error.
        """
        with store_errors(self.db, "Error creating favorite in DB"):
            if self.db.get(Recipe, recipe_id) is None:
                raise NotFoundError("Recipe not found")

            existing = (
                self.db.query(Favorite.id)
                .filter(Favorite.user_id == user_id, Favorite.recipe_id == recipe_id)
                .first()
            )
            if existing:
                raise ValidationError("Recipe already in favorites")

            favorite = Favorite(user_id=user_id, recipe_id=recipe_id)
            self.db.add(favorite)
            try:
                self.db.commit()
            except IntegrityError:
                self.db.rollback()
                raise ValidationError("Recipe already in favorites") from None
            self.db.refresh(favorite)

        logger.info(f"User {user_id} favorited recipe {recipe_id}")
        return favorite

    def delete(self, favorite_id: int, user_id: int) -> None:
        """Remove one of the user's own favorites."""
        with store_errors(self.db, "Error deleting favorite in DB"):
            favorite = (
                self.db.query(Favorite)
                .filter(Favorite.id == favorite_id, Favorite.user_id == user_id)
                .first()
            )
            if favorite is None:
                raise NotFoundError("Favorite not found")
            self.db.delete(favorite)
            self.db.commit()
