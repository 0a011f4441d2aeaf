"""Instruction schemas."""

from pydantic import Field

from src.schemas.common import CamelModel


class InstructionCreate(CamelModel):
    """Add a step to an existing recipe."""

    recipe_id: int
    step_number: int = Field(..., ge=1)
    text: str = Field(..., min_length=1, max_length=10000)


class InstructionUpdate(CamelModel):
    step_number: int | None = Field(None, ge=1)
    text: str | None = Field(None, min_length=1, max_length=10000)


class InstructionResponse(CamelModel):
    id: int
    recipe_id: int
    step_number: int
    text: str
