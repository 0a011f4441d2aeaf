"""Instruction service for editing recipe steps one at a time."""

import logging

from sqlalchemy.orm import Session

from src.errors import NotFoundError, ValidationError, store_errors
from src.models.recipe import Instruction, Recipe
from src.schemas.instruction import InstructionCreate, InstructionUpdate

logger = logging.getLogger(__name__)


class InstructionService:
    def __init__(self, db: Session):
        self.db = db

    def get_all(self) -> list[Instruction]:
        with store_errors(self.db, "Error getting instructions from DB"):
            return (
                self.db.query(Instruction)
                .order_by(Instruction.recipe_id, Instruction.step_number)
                .all()
            )

    def get_all_by_recipe_id(self, recipe_id: int) -> list[Instruction]:
        """Steps of a recipe in ascending step order."""
        with store_errors(self.db, "Error getting instructions from DB"):
            return (
                self.db.query(Instruction)
                .filter(Instruction.recipe_id == recipe_id)
                .order_by(Instruction.step_number, Instruction.id)
                .all()
            )

    def get_one(self, instruction_id: int) -> Instruction:
        with store_errors(self.db, "Error getting instruction from DB"):
            instruction = self.db.get(Instruction, instruction_id)
        if instruction is None:
            raise NotFoundError("Instruction not found")
        return instruction

    def _ensure_step_free(
        self, recipe_id: int, step_number: int, exclude_id: int | None = None
    ) -> None:
        query = self.db.query(Instruction.id).filter(
            Instruction.recipe_id == recipe_id, Instruction.step_number == step_number
        )
        if exclude_id is not None:
            query = query.filter(Instruction.id != exclude_id)
        if query.first():
            raise ValidationError(f"Step {step_number} already exists for this recipe")

    def create(self, data: InstructionCreate) -> Instruction:
        with store_errors(self.db, "Error creating instruction in DB"):
            recipe = self.db.get(Recipe, data.recipe_id)
            if recipe is None:
                raise NotFoundError("Recipe not found")
            self._ensure_step_free(recipe.id, data.step_number)

            instruction = Instruction(step_number=data.step_number, text=data.text)
            recipe.instructions.append(instruction)
            self.db.commit()
            self.db.refresh(instruction)

        logger.info(f"Added step {instruction.step_number} to recipe {recipe.id}")
        return instruction

    def update(self, instruction_id: int, data: InstructionUpdate) -> Instruction:
        instruction = self.get_one(instruction_id)
        with store_errors(self.db, "Error updating instruction in DB"):
            if data.step_number is not None:
                self._ensure_step_free(
                    instruction.recipe_id, data.step_number, exclude_id=instruction.id
                )
                instruction.step_number = data.step_number
            if data.text is not None:
                instruction.text = data.text
            self.db.commit()
            self.db.refresh(instruction)
        return instruction

    def delete(self, instruction_id: int) -> None:
        instruction = self.get_one(instruction_id)
        with store_errors(self.db, "Error deleting instruction in DB"):
            self.db.delete(instruction)
            self.db.commit()
